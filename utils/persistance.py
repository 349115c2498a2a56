# JSON persistence for the appointment list (single file, overwrite on save)

from __future__ import annotations
from pathlib import Path
import json
from typing import List, Optional, Sequence

from pydantic import ValidationError

from avtale_calendar.calendar import Appointment
from utils.config import CONFIG
from utils.debug import debug_log


class StoreError(Exception):
    """Reading or writing the appointment file failed."""


def _store_path(path: str | Path | None) -> Path:
    return Path(path if path is not None else CONFIG["store_path"])


def save_appointments(appointments: Sequence[Appointment], path: Optional[str | Path] = None) -> Path:
    """Overwrite the store with the full list as pretty JSON. Returns the path written."""
    p = _store_path(path)
    data = [a.to_record() for a in appointments]
    try:
        with p.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise StoreError(f"could not write {p}: {e}") from e
    debug_log(f"Saved {len(data)} appointment(s) to {p}")
    return p


def load_appointments(path: Optional[str | Path] = None) -> List[Appointment]:
    """Read the store and return its appointments as a new list."""
    p = _store_path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            rows = json.load(f)
    except OSError as e:
        raise StoreError(f"could not read {p}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise StoreError(f"{p} is not valid JSON: {e}") from e

    if not isinstance(rows, list):
        raise StoreError(f"{p} must contain a JSON array, got {type(rows).__name__}")

    try:
        appointments = [Appointment.model_validate(r) for r in rows]
    except ValidationError as e:
        raise StoreError(f"{p} has an invalid appointment: {e}") from e
    debug_log(f"Loaded {len(appointments)} appointment(s) from {p}")
    return appointments
