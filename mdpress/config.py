"""Build configuration for mdpress.

Values come from built-in defaults, then an optional ``mdpress.config.toml``
file, then command line overrides.
"""

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .exceptions import ConfigError
from .template import DEFAULT_PLACEHOLDER

DEFAULT_CONFIG_FILE = "mdpress.config.toml"


@dataclass(frozen=True)
class BuildConfig:
    template_path: Path = Path("template.html")
    input_dir: Path = Path("md")
    output_dir: Path = Path("posts")
    placeholder: str = DEFAULT_PLACEHOLDER
    max_workers: Optional[int] = None

    def override(self, **changes: Any) -> "BuildConfig":
        """Return a copy with every non-None change applied."""
        changes = {key: value for key, value in changes.items() if value is not None}
        for key in ("template_path", "input_dir", "output_dir"):
            if key in changes:
                changes[key] = Path(changes[key])
        return replace(self, **changes)


def _resolve(base: Path, value: Any, key: str) -> Path:
    if not isinstance(value, str):
        raise ConfigError(f"Config value '{key}' must be a string path")
    path = Path(value)
    return path if path.is_absolute() else base / path


def load_config(config_path: Optional[Union[str, Path]] = None) -> BuildConfig:
    """Load build configuration.

    Args:
        config_path: TOML file to read. When None, ``mdpress.config.toml`` in
            the working directory is used if it exists.

    Returns:
        The resulting BuildConfig

    Raises:
        ConfigError: If an explicit config file is missing or any file is malformed
    """
    if config_path is None:
        default = Path.cwd() / DEFAULT_CONFIG_FILE
        if not default.is_file():
            return BuildConfig()
        config_path = default

    config_path = Path(config_path)
    try:
        with open(config_path, "rb") as f:
            data: Dict[str, Any] = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}")
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    base = config_path.parent
    paths = data.get("paths", {})
    build = data.get("build", {})
    if not isinstance(paths, dict) or not isinstance(build, dict):
        raise ConfigError("Config sections [paths] and [build] must be tables")

    values: Dict[str, Any] = {}
    for key, field in (("template", "template_path"), ("input", "input_dir"), ("output", "output_dir")):
        if key in paths:
            values[field] = _resolve(base, paths[key], key)

    if "placeholder" in build:
        placeholder = build["placeholder"]
        if not isinstance(placeholder, str) or not placeholder:
            raise ConfigError("Config value 'placeholder' must be a non-empty string")
        values["placeholder"] = placeholder

    if "workers" in build:
        workers = build["workers"]
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise ConfigError("Config value 'workers' must be a positive integer")
        values["max_workers"] = workers

    return BuildConfig(**values)
