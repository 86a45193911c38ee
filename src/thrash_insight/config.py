"""Configuration loading and management for Thrash Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.thrash-insight.toml)
    3. Project config (./thrash-insight.toml)
    4. Explicit config file
    5. Environment variables (THRASH_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(top_targets=20, detail=True)
    >>> config.top_targets
    20
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, ThrashInsightError
from .temporal.churn import DEFAULT_SOURCE_EXTENSIONS

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["text", "rich"]

OUTPUT_FORMATS = ("text", "rich")
VERBOSITIES = ("quiet", "normal", "verbose")


def _now() -> str:
    return datetime.now().astimezone().isoformat(timespec="seconds")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Repository and window:
            repo_path: Repository to inspect
            after: Lower bound of the commit window (any git date expression)
            before: Upper bound of the commit window (defaults to now)

        Scoring:
            source_extensions: File suffixes that count as source files

        Output control:
            top_targets: Number of targets to report
            top_reasons: Number of reasons considered per target
            detail: Show single-count reasons and per-commit lines
            name_width: Column width for target names
            output_format: "text" (plain report) or "rich" (table)
            verbosity: Logging verbosity level
    """

    # Repository and window
    repo_path: str = "."
    after: str = "1 week ago"
    before: str = field(default_factory=_now)

    # Scoring
    source_extensions: tuple[str, ...] = DEFAULT_SOURCE_EXTENSIONS

    # Output control
    top_targets: int = 10
    top_reasons: int = 3
    detail: bool = False
    name_width: int = 40
    output_format: OutputFormat = "text"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # TOML arrays arrive as lists
        if not isinstance(self.source_extensions, tuple):
            object.__setattr__(self, "source_extensions", tuple(self.source_extensions))

        if not self.after:
            raise InvalidConfigError("after", self.after, "must not be empty")
        if not self.before:
            raise InvalidConfigError("before", self.before, "must not be empty")

        if not self.source_extensions:
            raise InvalidConfigError(
                "source_extensions", self.source_extensions, "at least one extension required"
            )
        for ext in self.source_extensions:
            if not isinstance(ext, str) or not ext.startswith("."):
                raise InvalidConfigError("source_extensions", ext, "must start with '.'")

        if self.top_targets < 0:
            raise InvalidConfigError("top_targets", self.top_targets, "must be non-negative")
        if self.top_reasons < 0:
            raise InvalidConfigError("top_reasons", self.top_reasons, "must be non-negative")
        if self.name_width < 0:
            raise InvalidConfigError("name_width", self.name_width, "must be non-negative")

        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        if self.verbosity not in VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(VERBOSITIES)}"
            )


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ThrashInsightError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".thrash-insight.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except ThrashInsightError:
            raise
        except Exception as e:
            raise ThrashInsightError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "thrash-insight.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except ThrashInsightError:
            raise
        except Exception as e:
            raise ThrashInsightError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ThrashInsightError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except ThrashInsightError:
            raise
        except Exception as e:
            raise ThrashInsightError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ThrashInsightError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from THRASH_* environment variables.

    Supported environment variables:
        THRASH_REPO_PATH: str
        THRASH_AFTER: str
        THRASH_BEFORE: str
        THRASH_SOURCE_EXTENSIONS: comma-separated list (".c,.h")
        THRASH_TOP_TARGETS: int
        THRASH_TOP_REASONS: int
        THRASH_DETAIL: bool (true/false/1/0)
        THRASH_NAME_WIDTH: int
        THRASH_OUTPUT_FORMAT: text/rich
        THRASH_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"THRASH_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ThrashInsightError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # tuple[str, ...]
    if origin is tuple:
        return tuple(part.strip() for part in value.split(",") if part.strip())

    # Bool: accept true/false/1/0/yes/no
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ThrashInsightError: If tomllib/tomli not available
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
            raise ThrashInsightError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
