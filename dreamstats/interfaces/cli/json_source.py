"""
JSON export record source for the CLI.

Reads journal exports from disk and serves them through the DreamDataSource
protocol. Accepted layouts:
- a list of dream rows (interpretations in a separate file)
- an object {"dreams": [...], "interpretations": [...]}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from dreamstats.helpers.exceptions import DataSourceError

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise DataSourceError(f"Cannot read {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise DataSourceError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno})") from e


def _as_rows(data: Any, key: str, path: Path) -> list[Mapping[str, Any]]:
    if isinstance(data, Mapping):
        data = data.get(key, [])
    if not isinstance(data, list):
        raise DataSourceError(f"Expected a list of {key} in {path}")
    return data


class JsonFileSource:
    """DreamDataSource backed by JSON files."""

    def __init__(self, dreams_path: Path, interpretations_path: Path | None = None) -> None:
        export = _load_json(dreams_path)
        self._dream_rows = _as_rows(export, "dreams", dreams_path)

        if interpretations_path is not None:
            self._interpretation_rows = _as_rows(
                _load_json(interpretations_path), "interpretations", interpretations_path
            )
        elif isinstance(export, Mapping):
            self._interpretation_rows = _as_rows(export, "interpretations", dreams_path)
        else:
            self._interpretation_rows = []

        logger.info(
            f"Loaded {len(self._dream_rows)} dream rows and {len(self._interpretation_rows)} interpretation rows"
        )

    def fetch_dream_records(self, user_id: str | None) -> Sequence[Mapping[str, Any]]:
        """
        Rows owned by ``user_id``.

        With no ``user_id`` every row is returned; rows without a user_id
        column always match.
        """
        if user_id is None:
            return list(self._dream_rows)
        return [
            row
            for row in self._dream_rows
            if not isinstance(row, Mapping) or str(row.get("user_id", row.get("userId", user_id))) == user_id
        ]

    def fetch_interpretation_records(self, dream_ids: Sequence[str]) -> Sequence[Mapping[str, Any]]:
        wanted = set(dream_ids)
        return [
            row
            for row in self._interpretation_rows
            if isinstance(row, Mapping) and str(row.get("dream_id", row.get("dreamId"))) in wanted
        ]
