"""Build file loader with YAML parsing and template rendering."""

from pathlib import Path
from typing import Any, Dict

import yaml

from schematool.core.exceptions import ConfigError
from schematool.models.config import BuildConfig
from schematool.models.templates import render_templates


def load_build(path: str | Path, cli_vars: Dict[str, str] | None = None) -> BuildConfig:
    """
    Load a build file.

    Relative ``project_dir`` values are resolved against the build file's
    directory.

    Args:
        path: Path to the build YAML file
        cli_vars: Variables passed via CLI (e.g., --vars key=value)

    Returns:
        Validated BuildConfig

    Raises:
        ConfigError: If the file is missing, not valid YAML, or fails validation
    """
    build_path = Path(path)
    build_dict = _read_yaml(build_path)
    build_dict = render_templates(build_dict, cli_vars)

    try:
        config = BuildConfig.from_dict(build_dict)
    except Exception as e:
        raise ConfigError(
            f"Build file validation failed: {e}", context={"path": str(path)}
        ) from e

    if not config.project_dir.is_absolute():
        config.project_dir = (build_path.parent / config.project_dir).resolve()
    return config


def _read_yaml(build_path: Path) -> Dict[str, Any]:
    try:
        with open(build_path, "r", encoding="utf-8") as f:
            build_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(
            f"Build file not found: {build_path}", context={"path": str(build_path)}
        )
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML in build file: {e}", context={"path": str(build_path)}
        ) from e

    if not isinstance(build_dict, dict):
        raise ConfigError(
            "Build file must contain a YAML dictionary",
            context={"path": str(build_path)},
        )
    return build_dict
