"""Configuration loading and management for Code Quality Analysis.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.code-quality.toml)
    3. Project config (./code-quality.toml)
    4. Explicit config file
    5. Environment variables (CODE_QUALITY_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(extensions=[".kt", ".java"], verbose=True)
    >>> config.extensions
    ('.kt', '.java')
    >>> config.verbosity
    'verbose'
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_KEYWORDS: tuple[str, ...] = ("if", "else", "when", "for", "while", "catch", "throw")
DEFAULT_REPORT_FILENAME = "code_quality_report.txt"
ENV_PREFIX = "CODE_QUALITY_"


@dataclass(frozen=True)
class ThresholdConfig:
    """Breakpoints that bucket a metric/total-lines ratio into a level.

    Intervals are half-open:
        ratio < low_ratio                -> LOW
        low_ratio <= ratio < high_ratio  -> MODERATE
        ratio >= high_ratio              -> HIGH
    """

    low_ratio: float = 0.05
    high_ratio: float = 0.20

    def __post_init__(self) -> None:
        """Validate threshold configuration."""
        if self.low_ratio < 0.0:
            raise ValueError("low_ratio must be non-negative")
        if self.high_ratio <= self.low_ratio:
            raise ValueError(
                f"high_ratio ({self.high_ratio}) must be greater than low_ratio ({self.low_ratio})"
            )


DEFAULT_THRESHOLDS = ThresholdConfig()


@dataclass(frozen=True)
class ScannerConfig:
    """Lexical tokens used by the line scanners.

    Attributes:
        line_comment: Prefix marking a single-line comment
        block_open: Prefix opening a block comment
        block_close: Suffix closing a block comment
        nest_open: Character that opens a nesting level
        nest_close: Character that closes a nesting level
        keywords: Control-flow vocabulary, matched as substrings
    """

    line_comment: str = "//"
    block_open: str = "/*"
    block_close: str = "*/"
    nest_open: str = "{"
    nest_close: str = "}"
    keywords: tuple[str, ...] = DEFAULT_KEYWORDS

    def __post_init__(self) -> None:
        for name in ("line_comment", "block_open", "block_close", "nest_open", "nest_close"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")
        if self.nest_open == self.nest_close:
            raise ValueError("nest_open and nest_close must differ")

        # Each keyword contributes at most once per line, so duplicates are dropped
        keywords = tuple(dict.fromkeys(k for k in self.keywords if k))
        if not keywords:
            raise ValueError("keywords must contain at least one non-empty entry")
        object.__setattr__(self, "keywords", keywords)


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a metrics run.

    Attributes:
        File selection:
            extensions: Source-file suffixes to analyze (e.g. ('.kt',))
            exclude_patterns: Glob patterns (relative to the root) to skip
            max_file_size_mb: Larger files are skipped
            max_files: Traversal stops after this many eligible files
            allow_hidden_files: Include entries whose name starts with '.'
            follow_symlinks: Descend into symbolic links

        Reading:
            encoding: Text encoding used to decode source files

        Output:
            report_filename: Name of the report written into the scanned root
            verbosity: Logging verbosity level

        Nested:
            thresholds: Level breakpoints
            scanner: Comment, nesting and keyword tokens
    """

    extensions: tuple[str, ...] = (".kt",)
    exclude_patterns: list[str] = field(default_factory=list)
    max_file_size_mb: float = 10.0
    max_files: int = 100000
    allow_hidden_files: bool = True
    follow_symlinks: bool = False

    encoding: str = "utf-8"

    report_filename: str = DEFAULT_REPORT_FILENAME
    verbosity: Verbosity = "normal"

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.extensions, str):
            raise ValueError("extensions must be a sequence of suffixes, not a string")
        extensions = tuple(dict.fromkeys(_normalize_extension(ext) for ext in self.extensions))
        if not extensions:
            raise ValueError("extensions must contain at least one suffix")
        object.__setattr__(self, "extensions", extensions)
        object.__setattr__(self, "exclude_patterns", list(self.exclude_patterns))

        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")
        if self.max_files < 1:
            raise ValueError("max_files must be at least 1")
        if not self.report_filename or "/" in self.report_filename:
            raise ValueError("report_filename must be a plain file name")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError(f"verbosity must be quiet, normal or verbose, got {self.verbosity!r}")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view, suitable for JSON output."""
        data = asdict(self)
        data["extensions"] = list(self.extensions)
        data["scanner"]["keywords"] = list(self.scanner.keywords)
        return data


def _normalize_extension(ext: str) -> str:
    ext = ext.strip()
    if not ext:
        raise ValueError("extensions must not contain empty entries")
    return ext if ext.startswith(".") else f".{ext}"


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are mapped onto ``verbosity``; ``None``
            values are ignored.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid, or if
            the merged values fail validation
    """
    merged: dict = {}

    global_config = Path.home() / ".code-quality.toml"
    if global_config.exists():
        _merge(merged, _load_toml_checked(global_config, "global config"))

    project_config = Path.cwd() / "code-quality.toml"
    if project_config.exists():
        _merge(merged, _load_toml_checked(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        _merge(merged, _load_toml_checked(config_file, "config file"))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    for section, cls in (("thresholds", ThresholdConfig), ("scanner", ScannerConfig)):
        value = merged.pop(section, None)
        if value is None:
            continue
        if isinstance(value, cls):
            merged[section] = value
        elif isinstance(value, dict):
            if "keywords" in value:
                value = {**value, "keywords": tuple(value["keywords"])}
            try:
                merged[section] = cls(**value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid [{section}] config: {e}")
        else:
            raise InvalidConfigError(section, value, "expected a table")

    if "extensions" in merged and not isinstance(merged["extensions"], str):
        merged["extensions"] = tuple(merged["extensions"])

    try:
        return AnalysisConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _merge(target: dict, source: dict) -> None:
    """Shallow-merge ``source`` into ``target``, merging nested tables one level deep."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            target[key] = {**target[key], **value}
        else:
            target[key] = value


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CODE_QUALITY_* environment variables.

    Supported environment variables:
        CODE_QUALITY_EXTENSIONS: comma-separated suffixes (".kt,.java")
        CODE_QUALITY_EXCLUDE_PATTERNS: comma-separated globs
        CODE_QUALITY_MAX_FILE_SIZE_MB: float
        CODE_QUALITY_MAX_FILES: int
        CODE_QUALITY_ALLOW_HIDDEN_FILES: bool (true/false/1/0)
        CODE_QUALITY_FOLLOW_SYMLINKS: bool
        CODE_QUALITY_ENCODING: str
        CODE_QUALITY_REPORT_FILENAME: str
        CODE_QUALITY_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any CODE_QUALITY_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns:
        Parsed value, or None for types that can't be set from the environment

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Sequences are comma-separated
    if origin in (list, tuple):
        items = [item.strip() for item in value.split(",") if item.strip()]
        return tuple(items) if origin is tuple else items

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

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    # Nested dataclasses come from TOML only
    return None


def _load_toml_checked(path: Path, label: str) -> dict:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If no TOML parser is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
