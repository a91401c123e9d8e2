"""Load BurrowConfig from burrow.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from burrow.config import BurrowConfig

CONFIG_FILENAMES: tuple[str, ...] = ("burrow.yaml", "burrow.yml", "burrow.toml")

_KNOWN_KEYS = frozenset({
    "src_dir",
    "pages_dir",
    "declarations_file",
    "on_collision",
})


def load_config(root: Path, **overrides: object) -> BurrowConfig:
    """Load BurrowConfig from root, optionally merging burrow.yaml.

    Looks for burrow.yaml, burrow.yml, or burrow.toml in root. If found, loads
    and merges with overrides. Overrides take precedence; ``None`` overrides
    are ignored so that unset CLI flags do not mask file values.
    """
    file_config = _read_burrow_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    if "declarations_file" in merged and not isinstance(merged["declarations_file"], Path):
        merged["declarations_file"] = Path(str(merged["declarations_file"]))
    return BurrowConfig(root=root, **merged)


def _read_burrow_config(root: Path) -> dict[str, object]:
    """Read burrow config from yaml/toml if present. Returns empty dict otherwise."""
    for name in CONFIG_FILENAMES:
        path = root / name
        if not path.is_file():
            continue
        if path.suffix == ".toml":
            return _parse_toml(path)
        return _parse_yaml(path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config. Returns empty dict on error."""
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return _flatten_burrow_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config. Returns empty dict on error."""
    try:
        data = tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    return _flatten_burrow_section(data)


def _flatten_burrow_section(data: dict[str, object]) -> dict[str, object]:
    """Extract burrow.* keys into top-level config."""
    result: dict[str, object] = {}
    burrow = data.get("burrow")
    if isinstance(burrow, dict):
        for k, v in burrow.items():
            if k in _KNOWN_KEYS:
                result[k] = v
    for k, v in data.items():
        if k != "burrow" and k in _KNOWN_KEYS:
            result[k] = v
    return result
