"""Build the SymbolSnapshot for an analyzed file.

The snapshot covers the file's package: every non-test ``.go`` file in the
package directory that declares the same package name. Their top-level type
declarations are resolved up front (with the cycle guard of TypeResolver)
into the snapshot's definitions and uses tables, together with the
unresolved and skipped-field counts met while resolving each name.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from tree_sitter import Tree

from ..exceptions import SnapshotLoadError
from ..scanning import GoParser, TypeDeclarations, extract_type_declarations, package_name
from .models import ResolvedType, describe
from .resolver import ResolutionDiagnostics, TypeResolver
from .snapshot import SymbolSnapshot

logger = logging.getLogger(__name__)


def _package_files(package_dir: Path) -> list[Path]:
    try:
        return sorted(
            p
            for p in package_dir.iterdir()
            if p.suffix == ".go" and not p.name.endswith("_test.go") and p.is_file()
        )
    except OSError as e:
        raise SnapshotLoadError(package_dir, str(e))


def load_snapshot(
    tree: Tree,
    source_path: Union[str, Path],
    package_dir: Optional[Union[str, Path]] = None,
    parser: Optional[GoParser] = None,
) -> SymbolSnapshot:
    """Load the read-only symbol snapshot for one parsed file.

    Args:
        tree: Parsed tree of the analyzed file
        source_path: Path of the analyzed file
        package_dir: Directory of the enclosing package (default: the
            file's own directory)
        parser: Parser to reuse for sibling files

    Returns:
        SymbolSnapshot with package definitions, aliases and the file's
        own declarations

    Raises:
        SnapshotLoadError: If the package directory cannot be listed, a
            sibling file cannot be read or parsed, or the directory holds
            no Go files
    """
    source_path = Path(source_path)
    package_dir = Path(package_dir) if package_dir is not None else source_path.parent
    parser = parser or GoParser()
    package = package_name(tree) or ""

    candidates = _package_files(package_dir)
    in_package_dir = package_dir.resolve() == source_path.resolve().parent
    if not candidates and not in_package_dir:
        raise SnapshotLoadError(package_dir, "no Go files found")

    declarations = TypeDeclarations()
    own_path = source_path.resolve()
    loaded = 0

    for candidate in candidates:
        if candidate.resolve() == own_path:
            continue
        try:
            code = candidate.read_bytes()
        except OSError as e:
            raise SnapshotLoadError(package_dir, f"cannot read {candidate.name}: {e}")

        sibling = parser.parse(code)
        if sibling.root_node.has_error:
            raise SnapshotLoadError(package_dir, f"{candidate.name} has syntax errors")
        if package_name(sibling) != package:
            logger.debug(f"Skipping {candidate.name}: not in package {package!r}")
            continue

        declarations.merge(extract_type_declarations(sibling))
        loaded += 1

    own = extract_type_declarations(tree)
    declarations.merge(own)

    bootstrap = SymbolSnapshot(package=package, declarations=declarations.all())
    definitions: dict[str, ResolvedType] = {}
    uses: dict[str, ResolvedType] = {}
    losses: dict[str, tuple[int, int]] = {}
    totals = ResolutionDiagnostics()

    for table, specs in ((definitions, declarations.defined), (uses, declarations.aliases)):
        for name, expr in specs.items():
            # One resolver per name so its losses can be replayed on lookup
            resolver = TypeResolver(bootstrap)
            table[name] = resolver.resolve(expr)
            diagnostics = resolver.diagnostics
            if diagnostics.unresolved or diagnostics.skipped_fields:
                losses[name] = (diagnostics.unresolved, diagnostics.skipped_fields)
            totals.unresolved += diagnostics.unresolved
            totals.skipped_fields += diagnostics.skipped_fields
            totals.cyclic_references += diagnostics.cyclic_references
            logger.debug(f"type {name}: {describe(table[name])}")

    logger.debug(
        f"Loaded package {package!r}: {loaded} sibling files, "
        f"{len(definitions)} types, {len(uses)} aliases "
        f"({totals.unresolved} unresolved, {totals.skipped_fields} skipped fields, "
        f"{totals.cyclic_references} cyclic references)"
    )

    return SymbolSnapshot(
        package=package,
        definitions=definitions,
        uses=uses,
        declarations=own.all(),
        losses=losses,
    )
