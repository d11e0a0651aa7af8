"""
Reading and writing puzzle files.

A puzzle file holds a top-level list of NUM_DIALS dial records. Each record
maps the ring names ``zero``, ``one``, ``two`` and ``three`` to a list of
NUM_COLUMNS slots (``null`` or a non-negative integer); a missing or
``null`` ring means the dial has no band there. An optional ``movable``
flag marks the fixed base; when omitted, only the last dial is fixed.

The file suffix picks the format both ways: .yaml/.yml files go through
PyYAML's safe loader and dumper, everything else is read as JSON and
written as pretty-printed JSON.

Every structural problem is raised as PuzzleLoadError before any search
starts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from grecian.schemas.puzzle import NUM_DIALS, Dial, Puzzle

logger = logging.getLogger(__name__)

RING_KEYS: tuple[str, ...] = ("zero", "one", "two", "three")
_YAML_SUFFIXES = {".yaml", ".yml"}


class PuzzleLoadError(ValueError):
    """Raised when a puzzle file is missing, unreadable, or structurally invalid."""


# ── Dict conversion ────────────────────────────────────────────────────────────


def puzzle_from_dict(data: Any) -> Puzzle:
    """Build a Puzzle from the deserialized file contents.

    Raises:
        PuzzleLoadError: If the structure does not describe a valid puzzle.
    """
    if not isinstance(data, list):
        raise PuzzleLoadError(f"puzzle must be a list of dials, got {type(data).__name__}")
    if len(data) != NUM_DIALS:
        raise PuzzleLoadError(f"puzzle must have {NUM_DIALS} dials, got {len(data)}")

    dials: list[Dial] = []
    for index, record in enumerate(data):
        dials.append(_dial_from_dict(record, index))
    try:
        return Puzzle(dials=dials)
    except ValueError as exc:
        raise PuzzleLoadError(str(exc)) from exc


def _dial_from_dict(record: Any, index: int) -> Dial:
    if not isinstance(record, dict):
        raise PuzzleLoadError(f"dial {index}: expected a mapping, got {type(record).__name__}")
    unknown = set(record) - set(RING_KEYS) - {"movable"}
    if unknown:
        raise PuzzleLoadError(f"dial {index}: unknown keys {sorted(unknown)}")

    rings = []
    for key in RING_KEYS:
        ring = record.get(key)
        if ring is not None and not isinstance(ring, list):
            raise PuzzleLoadError(f"dial {index} ring {key!r}: expected a list or null")
        rings.append(ring)

    movable = record.get("movable", index != NUM_DIALS - 1)
    if not isinstance(movable, bool):
        raise PuzzleLoadError(f"dial {index}: 'movable' must be a boolean, got {movable!r}")

    try:
        return Dial(rings=rings, movable=movable)
    except ValueError as exc:
        raise PuzzleLoadError(f"dial {index}: {exc}") from exc


def puzzle_to_dict(puzzle: Puzzle) -> list[dict[str, Any]]:
    """Inverse of puzzle_from_dict; always writes every ring key and the movable flag."""
    records = []
    for dial in puzzle.dials:
        record: dict[str, Any] = {
            key: None if ring is None else list(ring) for key, ring in zip(RING_KEYS, dial.rings)
        }
        record["movable"] = dial.movable
        records.append(record)
    return records


# ── Files ──────────────────────────────────────────────────────────────────────


def load_puzzle(path: str | Path) -> Puzzle:
    """
    Read and verify a puzzle file.

    Raises:
        PuzzleLoadError: If the file is missing, unreadable, not valid
            JSON/YAML, or does not describe a valid puzzle.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in _YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except FileNotFoundError:
        raise PuzzleLoadError(f"Puzzle file not found: {path}") from None
    except OSError as exc:
        raise PuzzleLoadError(f"Cannot read puzzle file {path}: {exc}") from exc
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise PuzzleLoadError(f"Failed to parse puzzle file {path}: {exc}") from exc

    puzzle = puzzle_from_dict(data)
    logger.info("loaded puzzle from %s (movable dials %s)", path, puzzle.movable_indices())
    return puzzle


def save_puzzle(puzzle: Puzzle, path: str | Path, indent: int = 2) -> None:
    """Write *puzzle* to *path*, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    records = puzzle_to_dict(puzzle)
    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() in _YAML_SUFFIXES:
            yaml.safe_dump(records, f, sort_keys=False, indent=indent)
        else:
            json.dump(records, f, indent=indent)
            f.write("\n")
    logger.info("wrote puzzle to %s", path)
