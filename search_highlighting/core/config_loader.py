"""
Configuration loader for the highlighting engine.

Loads settings from config.json and provides typed access via dataclasses.
Supports singleton pattern for global access and runtime reload capability.

The highlighting functions themselves never consult this module; callers
that want config-driven limits build a Highlighter from it explicitly.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError


# Field names the preview can select; mirrors highlight.FieldType.
FIELD_NAMES = ("title", "content", "author", "tags")


@dataclass
class PathsConfig:
    """Configuration for file system paths."""
    logs_directory: Path


@dataclass
class HighlightingConfig:
    """Per-call work caps and truncation tuning for the highlighter."""
    max_text_length: int
    max_query_length: int
    max_terms: int
    min_term_length: int
    trailing_context: int

    def validate(self) -> None:
        """
        Check that every cap is usable.

        Raises:
            ConfigurationError: If a cap is not a positive integer or the
                trailing context is negative.
        """
        for name in ("max_text_length", "max_query_length", "max_terms", "min_term_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(
                    f"highlighting.{name} must be a positive integer",
                    {"value": value}
                )

        if isinstance(self.trailing_context, bool) or not isinstance(self.trailing_context, int) \
                or self.trailing_context < 0:
            raise ConfigurationError(
                "highlighting.trailing_context must be a non-negative integer",
                {"value": self.trailing_context}
            )


@dataclass
class GUIConfig:
    """Configuration for the Streamlit preview interface."""
    page_title: str
    default_field: str
    show_performance: bool


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    max_file_size_mb: int
    backup_count: int


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig
    highlighting: HighlightingConfig
    gui: GUIConfig
    logging: LoggingConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        project_root = config_path.parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        paths_data = data.get("paths", {})
        paths = PathsConfig(
            logs_directory=cls._resolve_path(paths_data.get("logs_directory", "output/logs"), project_root)
        )

        hl_data = data.get("highlighting", {})
        highlighting = HighlightingConfig(
            max_text_length=hl_data.get("max_text_length", 100_000),
            max_query_length=hl_data.get("max_query_length", 500),
            max_terms=hl_data.get("max_terms", 32),
            min_term_length=hl_data.get("min_term_length", 2),
            trailing_context=hl_data.get("trailing_context", 30)
        )

        highlighting.validate()

        gui_data = data.get("gui", {})
        gui = GUIConfig(
            page_title=gui_data.get("page_title", "Search Highlighting Preview"),
            default_field=gui_data.get("default_field", "content"),
            show_performance=gui_data.get("show_performance", True)
        )
        if gui.default_field not in FIELD_NAMES:
            raise ConfigurationError(
                f"gui.default_field must be one of: {', '.join(FIELD_NAMES)}",
                {"value": gui.default_field}
            )

        log_data = data.get("logging", {})
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "INFO"),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5)
        )

        return cls(
            paths=paths,
            highlighting=highlighting,
            gui=gui,
            logging=logging_cfg,
            project_root=project_root
        )

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If config cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()
        _config_instance = Config.from_file(config_path)

    return _config_instance


def _find_config_file() -> Path:
    """Search upward from current directory to find config/config.json."""
    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise ConfigurationError(
        "Could not find config/config.json in current directory or parents"
    )


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"Logs directory: {config.paths.logs_directory}")
        print(f"Max text length: {config.highlighting.max_text_length}")
        print(f"Max terms: {config.highlighting.max_terms}")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
