"""Configuration loading and management for complex-lint.

This module provides configuration discovery and validation. Configuration
sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.complex-lint.toml)
    3. Project config (./complex-lint.toml)
    4. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True)
    >>> config.verbosity
    'verbose'
    >>> config.weights.sequence_length
    100
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

# Type aliases for clarity
Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class StateSpaceWeights:
    """Heuristic cardinalities used by the state-space estimator.

    These are policy, not physics: the values only need to rank functions
    relative to one another. Every weight must be at least 1 so that no
    type ever contributes a zero to a product.

    Attributes:
        bool_states: Distinct values of a boolean
        integer_states: Stand-in for any integer width/signedness
        string_states: Stand-in for the unbounded string domain
        sequence_length: Multiplier applied per slice/array level
    """

    bool_states: int = 2
    integer_states: int = 10  # really 2**32 or 2**64
    string_states: int = 10
    sequence_length: int = 100

    def __post_init__(self) -> None:
        """Validate weights."""
        for field_name in ("bool_states", "integer_states", "string_states", "sequence_length"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field_name} must be an integer")
            if value < 1:
                raise ValueError(f"{field_name} must be at least 1")


# Default weight table
DEFAULT_WEIGHTS = StateSpaceWeights()


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for analysis execution.

    Attributes:
        Estimation:
            weights: State-space weight table

        Structural counters (tree-sitter-go node types):
            branch_node_types: Nodes counted as decision points
            operation_node_types: Nodes counted as operations
            assignment_node_types: Nodes counted as local assignments;
                must be a subset of operation_node_types

        Scope:
            include_methods: Report method declarations as well as functions

        Output control:
            output_format: "text" or "json"
            verbosity: Logging verbosity level
    """

    weights: StateSpaceWeights = field(default_factory=StateSpaceWeights)

    branch_node_types: list[str] = field(
        default_factory=lambda: [
            "if_statement",
            "expression_switch_statement",
            "type_switch_statement",
            "for_statement",
        ]
    )
    operation_node_types: list[str] = field(
        default_factory=lambda: [
            "binary_expression",
            "call_expression",
            "type_conversion_expression",
            "assignment_statement",
            "short_var_declaration",
        ]
    )
    assignment_node_types: list[str] = field(
        default_factory=lambda: [
            "assignment_statement",
            "short_var_declaration",
        ]
    )

    include_methods: bool = True

    output_format: OutputFormat = "text"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.output_format not in ("text", "json"):
            raise ValueError("output_format must be 'text' or 'json'")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be 'quiet', 'normal' or 'verbose'")

        # Every local assignment is also an operation
        extra = set(self.assignment_node_types) - set(self.operation_node_types)
        if extra:
            raise ValueError(
                "assignment_node_types must be contained in operation_node_types, "
                f"missing: {', '.join(sorted(extra))}"
            )


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Configuration sources are merged in priority order (lowest to highest):
        1. Defaults (AnalysisConfig field defaults)
        2. Global config (~/.complex-lint.toml)
        3. Project config (./complex-lint.toml)
        4. Explicit config file (if config_file provided)
        5. Environment variables (COMPLEX_LINT_* prefix)
        6. CLI overrides (kwargs)

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation

    Example:
        >>> config = load_config(config_file=Path("custom.toml"))
    """
    merged: dict = {}

    # 1. Try global config
    global_config = Path.home() / ".complex-lint.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    # 2. Try project config
    project_config = Path.cwd() / "complex-lint.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    # 3. Explicit config file (highest priority from files)
    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    # 4. Environment variables (COMPLEX_LINT_* prefix)
    env_overrides = _load_env_vars()
    env_weights = env_overrides.pop("weights", None)
    merged.update(env_overrides)
    if env_weights:
        merged["weights"] = {**merged.get("weights", {}), **env_weights}

    # 5. CLI overrides (highest priority)
    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    # Handle [weights] section from TOML
    weights = merged.pop("weights", None)
    if weights is not None:
        if isinstance(weights, dict):
            try:
                merged["weights"] = StateSpaceWeights(**weights)
            except TypeError as e:
                raise ConfigurationError(f"Invalid [weights] config: {e}")
            except ValueError as e:
                raise InvalidConfigError("weights", weights, str(e))
        elif isinstance(weights, StateSpaceWeights):
            merged["weights"] = weights
        else:
            raise InvalidConfigError("weights", weights, "expected a table of integers")

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise InvalidConfigError("analysis", merged, str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COMPLEX_LINT_* environment variables.

    Supported environment variables:
        COMPLEX_LINT_INCLUDE_METHODS: bool (true/false/1/0)
        COMPLEX_LINT_OUTPUT_FORMAT: text/json
        COMPLEX_LINT_VERBOSITY: quiet/normal/verbose

    Weights are read from COMPLEX_LINT_WEIGHTS_<NAME>, e.g.
    COMPLEX_LINT_WEIGHTS_SEQUENCE_LENGTH=1000.

    Returns:
        Dict of field_name -> parsed_value for any COMPLEX_LINT_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"COMPLEX_LINT_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint, field_name)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    weights: dict[str, int] = {}
    for field_name in StateSpaceWeights.__dataclass_fields__:
        env_key = f"COMPLEX_LINT_WEIGHTS_{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            weights[field_name] = int(env_value)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
    if weights:
        result["weights"] = weights

    return result


def _parse_env_value(value: str, type_hint: Any, field_name: str) -> Any:
    """Parse environment variable string to the correct type.

    Args:
        value: Raw string from environment
        type_hint: Type annotation from dataclass
        field_name: Field name for error messages

    Returns:
        Parsed value or None if can't parse

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Skip list types (node type sets) - too complex for env vars
    if origin is list or type_hint is list:
        return None

    # Bool: accept true/false/1/0/yes/no
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Args:
        path: Path to TOML file

    Returns:
        Parsed TOML as dict

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
