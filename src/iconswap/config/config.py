# src/iconswap/config/config.py
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv

from iconswap.codemod.errors import ConfigError
from iconswap.codemod.manifest import FileTarget, Manifest

DEFAULT_CONFIG_NAME = "config.yaml"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class CodemodConfig:
    project_dir: Path
    source_dir: str = "src"
    replacement_module: str = "components/LocalIcon"
    local_name: str = "LocalIcon"
    binding: str = "Icon"
    icon_module: str = "@iconify/react"
    strict_usage: bool = False
    files: List[FileTarget] = field(default_factory=list)
    skip: List[str] = field(default_factory=list)

    def manifest(self) -> Manifest:
        return Manifest.from_paths(self.files, skip=self.skip)


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None:
        return None
    return value.strip().lower() in _TRUTHY


def _yaml_str(data: dict, key: str, default: Optional[str], config_path: Path) -> Optional[str]:
    value = data.get(key, default)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{config_path}: '{key}' must be a non-empty string, got {value!r}")
    return value


def _yaml_bool(data: dict, key: str, default: bool, config_path: Path) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{config_path}: '{key}' must be true or false, got {value!r}")
    return value


def _parse_target(entry, index: int) -> FileTarget:
    if isinstance(entry, str):
        return FileTarget(entry)
    if isinstance(entry, dict) and isinstance(entry.get("path"), str):
        depth = entry.get("depth")
        if depth is not None and (isinstance(depth, bool) or not isinstance(depth, int) or depth < 0):
            raise ConfigError(f"files[{index}]: depth must be a non-negative integer, got {depth!r}")
        return FileTarget(entry["path"], depth)
    raise ConfigError(f"files[{index}]: expected a path or a mapping with 'path', got {entry!r}")


def load_config(
    config_path: Path = None,
    project_dir: Optional[str] = None,
    source_dir: Optional[str] = None,
    strict_usage: Optional[bool] = None,
) -> CodemodConfig:
    """
    Load the codemod configuration.

    Values come from, in increasing priority: built-in defaults, the YAML file,
    ``ICONSWAP_*`` environment variables (a ``.env`` file is honoured), and the
    explicit keyword arguments (used for command-line flags).

    Raises:
        ConfigError if the file is missing or malformed.
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(os.getenv("ICONSWAP_CONFIG", DEFAULT_CONFIG_NAME))
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")

    files = data.get("files")
    if not isinstance(files, list):
        raise ConfigError(f"{config_path}: 'files' must be a list of paths")
    skip = data.get("skip") or []
    if not isinstance(skip, list) or not all(isinstance(s, str) for s in skip):
        raise ConfigError(f"{config_path}: 'skip' must be a list of paths")

    yaml_project_dir = _yaml_str(data, "project_dir", ".", config_path)
    yaml_source_dir = _yaml_str(data, "source_dir", "src", config_path)
    yaml_module = _yaml_str(data, "replacement_module", "components/LocalIcon", config_path)
    icon_module = _yaml_str(data, "icon_module", "@iconify/react", config_path)
    local_name = _yaml_str(data, "local_name", "LocalIcon", config_path)
    binding = _yaml_str(data, "binding", "Icon", config_path)
    for key, name in (("local_name", local_name), ("binding", binding)):
        if not name.isidentifier():
            raise ConfigError(f"{config_path}: '{key}' must be a component name, got {name!r}")
    yaml_strict = _yaml_bool(data, "strict_usage", False, config_path)

    base_dir = config_path.resolve().parent
    raw_project_dir = project_dir or os.getenv("ICONSWAP_PROJECT_DIR") or yaml_project_dir
    resolved_project_dir = Path(raw_project_dir)
    if not resolved_project_dir.is_absolute():
        # relative to the config file, or to the cwd when given on the command line
        anchor = Path.cwd() if project_dir else base_dir
        resolved_project_dir = anchor / resolved_project_dir

    if strict_usage is None:
        strict_usage = _env_flag("ICONSWAP_STRICT_USAGE")
    if strict_usage is None:
        strict_usage = yaml_strict

    return CodemodConfig(
        project_dir=resolved_project_dir,
        source_dir=source_dir or os.getenv("ICONSWAP_SOURCE_DIR") or yaml_source_dir,
        replacement_module=os.getenv("ICONSWAP_REPLACEMENT_MODULE") or yaml_module,
        local_name=local_name,
        binding=binding,
        icon_module=icon_module,
        strict_usage=strict_usage,
        files=[_parse_target(entry, i) for i, entry in enumerate(files)],
        skip=skip,
    )
