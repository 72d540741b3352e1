"""Analysis orchestrator.

For each function declaration of a file, in declaration order:

    1. resolve and estimate every parameter type, multiply -> input space
    2. same for the result types                           -> output space
    3. count structural metrics over the body
    4. assemble one ComplexityReport

Reading, parsing and snapshot loading happen once, up front; any failure
there aborts the run before a single report is produced.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from tree_sitter import Tree

from ..config import AnalysisConfig
from ..exceptions import FileAccessError, ParsingError
from ..metrics import StructuralCounter
from ..scanning import (
    FunctionDeclaration,
    GoParser,
    extract_functions,
    extract_type_declarations,
    package_name,
)
from ..typesys import SymbolSnapshot, TypeResolver, load_snapshot, product_state_space
from .models import ComplexityReport, FileAnalysis

logger = logging.getLogger(__name__)


class ComplexityAnalyzer:
    """Produces ComplexityReports for Go source files.

    Usage:
        analyzer = ComplexityAnalyzer(config)
        result = analyzer.analyze_file(Path("main.go"))
        for report in result.reports:
            ...
    """

    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        self.config = config or AnalysisConfig()
        self._parser = GoParser()
        self._counter = StructuralCounter.from_config(self.config)

    def analyze_file(
        self, path: Union[str, Path], package_dir: Optional[Union[str, Path]] = None
    ) -> FileAnalysis:
        """Read, parse and analyze one Go file.

        Args:
            path: Go source file
            package_dir: Directory of the enclosing package (default: the
                file's directory)

        Raises:
            FileAccessError: If the file cannot be read
            ParsingError: If the file is not valid Go
            SnapshotLoadError: If the package symbols cannot be loaded
        """
        path = Path(path)
        try:
            code = path.read_bytes()
        except OSError as e:
            raise FileAccessError(path, e.strerror or str(e))

        tree = self._parse(code, path)
        snapshot = load_snapshot(tree, path, package_dir=package_dir, parser=self._parser)
        return self.analyze_tree(tree, snapshot, str(path))

    def analyze_source(
        self,
        code: Union[str, bytes],
        path: str = "<source>",
        snapshot: Optional[SymbolSnapshot] = None,
    ) -> FileAnalysis:
        """Analyze Go source held in memory.

        Without an explicit snapshot, only the source's own type
        declarations and the predeclared types are known.
        """
        if isinstance(code, str):
            code = code.encode("utf-8")
        tree = self._parse(code, Path(path))
        if snapshot is None:
            snapshot = SymbolSnapshot(
                package=package_name(tree) or "",
                declarations=extract_type_declarations(tree).all(),
            )
        return self.analyze_tree(tree, snapshot, path)

    def analyze_tree(self, tree: Tree, snapshot: SymbolSnapshot, path: str) -> FileAnalysis:
        """Analyze every function of an already parsed file."""
        declarations = extract_functions(tree, include_methods=self.config.include_methods)
        reports = tuple(self.analyze_function(decl, snapshot) for decl in declarations)
        logger.info(f"Analyzed {len(reports)} functions in {path}")
        return FileAnalysis(path=path, package=snapshot.package, reports=reports)

    def analyze_function(
        self, decl: FunctionDeclaration, snapshot: SymbolSnapshot
    ) -> ComplexityReport:
        """Build the report for one function declaration."""
        resolver = TypeResolver(snapshot)
        weights = self.config.weights

        input_space = product_state_space((resolver.resolve(p) for p in decl.params), weights)
        output_space = product_state_space((resolver.resolve(r) for r in decl.results), weights)
        metrics = self._counter.count(decl.body)

        diagnostics = resolver.diagnostics
        if diagnostics.unresolved or diagnostics.skipped_fields:
            logger.debug(
                f"{decl.name}: {diagnostics.unresolved} unresolved types, "
                f"{diagnostics.skipped_fields} skipped fields"
            )

        return ComplexityReport(
            name=decl.name,
            input_state_space=input_space,
            output_state_space=output_space,
            branching_factor=metrics.branching_factor,
            operational_complexity=metrics.operational_complexity,
            local_assignment_count=metrics.local_assignment_count,
            line=decl.start_line,
            receiver=decl.receiver,
            unresolved_types=diagnostics.unresolved,
            skipped_fields=diagnostics.skipped_fields,
        )

    def _parse(self, code: bytes, path: Path) -> Tree:
        tree = self._parser.parse_checked(code, path)
        if package_name(tree) is None:
            raise ParsingError(path, "expected 'package' clause")
        return tree
