"""Analysis-related exceptions: file access, parsing, symbol snapshot loading."""

from pathlib import Path

from .base import ComplexLintError


class AnalysisError(ComplexLintError):
    """Base class for errors that abort an analysis run."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when source text is not syntactically valid."""

    def __init__(self, filepath: Path, reason: str, language: str = "go"):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class SnapshotLoadError(AnalysisError):
    """Raised when the symbol snapshot of the enclosing package cannot be built."""

    def __init__(self, package_dir: Path, reason: str):
        super().__init__(
            f"Cannot load package symbols from {package_dir}",
            details={"package_dir": str(package_dir), "reason": reason},
        )
        self.package_dir = package_dir
        self.reason = reason
