"""
Run settings: target sum, input and output paths, output indentation.

Defaults ship as package data in data/defaults.yaml. load_settings() reads
them, overlays an optional user YAML file, and returns a frozen Settings.
Command-line values are applied last through Settings.with_overrides().
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, cast

import yaml

_DATA_DIR = Path(__file__).parent / "data"
_DEFAULTS_FILE = "defaults.yaml"


class SettingsError(ValueError):
    """Raised when a settings file cannot be read or holds invalid values."""


@dataclass(frozen=True)
class Settings:
    """
    Resolved settings for one solver run.

    Attributes:
        target_sum: Required sum for every column of the visible table.
        input_path: Puzzle file to read.
        output_path: File the solved puzzle is written to.
        indent: Indentation width of the written file.
    """

    target_sum: int
    input_path: Path
    output_path: Path
    indent: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.target_sum, bool) or not isinstance(self.target_sum, int):
            raise SettingsError(f"target_sum must be an int, got {self.target_sum!r}")
        if self.target_sum < 0:
            raise SettingsError(f"target_sum cannot be negative, got {self.target_sum}")
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 1:
            raise SettingsError(f"indent must be a positive int, got {self.indent!r}")
        object.__setattr__(self, "input_path", Path(self.input_path))
        object.__setattr__(self, "output_path", Path(self.output_path))

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise SettingsError(f"Settings file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise SettingsError(f"Failed to parse settings file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must hold a mapping")
    return cast(dict[str, Any], data)


def load_settings(path: Optional[str | Path] = None, data_dir: Path = _DATA_DIR) -> Settings:
    """
    Load the packaged defaults and overlay the user settings file at *path*.

    Raises:
        SettingsError: If either file is unreadable or a key is unknown or invalid.
    """
    merged = _load_yaml(data_dir / _DEFAULTS_FILE)
    if path is not None:
        merged.update(_load_yaml(Path(path)))

    known = {f.name for f in fields(Settings)}
    unknown = set(merged) - known
    if unknown:
        raise SettingsError(f"Unknown settings keys: {sorted(unknown)}")
    missing = {"target_sum", "input_path", "output_path"} - set(merged)
    if missing:
        raise SettingsError(f"Missing settings keys: {sorted(missing)}")
    return Settings(**merged)
