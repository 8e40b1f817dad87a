"""JSON persistence of trend history."""

from __future__ import annotations

import json
import math
import os
import tempfile
from contextlib import suppress
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from llmquota.history import History, Sample

STORE_VERSION = 1


def _unix(moment: datetime) -> int:
    return math.floor(moment.timestamp())


def _from_unix(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    return value


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _decode(data: Any) -> History:
    if data is None:
        return History()
    if not isinstance(data, dict):
        raise ValueError("history document must be an object")
    if _as_int(data.get("version", 0)) != STORE_VERSION:
        return History()
    windows = data.get("windows") or {}
    if not isinstance(windows, dict):
        raise ValueError("windows must be an object")

    history = History()
    for window_key, stored in windows.items():
        stored = stored or []
        if not isinstance(stored, list):
            raise ValueError("window samples must be a list")
        samples = []
        for entry in stored:
            entry = entry or {}
            if not isinstance(entry, dict):
                raise ValueError("sample must be an object")
            samples.append(
                Sample(
                    captured_at=_from_unix(_as_int(entry.get("captured_at", 0))),
                    used_pct=_as_float(entry.get("used_pct", 0)),
                    resets_at=_from_unix(_as_int(entry.get("resets_at", 0))),
                )
            )
        history.windows[window_key] = samples
    return history


class Store:
    """History file at a fixed path."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def load(self) -> History:
        """Read the history file; any problem yields an empty history."""
        try:
            return _decode(json.loads(self.path.read_bytes()))
        except (OSError, ValueError, TypeError, OverflowError):
            return History()

    def save(self, history: History) -> None:
        """Write the history file atomically (temporary file then rename)."""
        payload = {
            "version": STORE_VERSION,
            "windows": {
                window_key: [
                    {
                        "captured_at": _unix(sample.captured_at),
                        "used_pct": sample.used_pct,
                        "resets_at": _unix(sample.resets_at),
                    }
                    for sample in samples
                ]
                for window_key, samples in history.windows.items()
            },
        }
        data = json.dumps(payload, allow_nan=False, separators=(",", ":"))

        directory = self.path.parent
        directory.mkdir(mode=0o755, parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix="history-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(data)
            os.replace(tmp_name, self.path)
        except BaseException:
            with suppress(OSError):
                os.unlink(tmp_name)
            raise