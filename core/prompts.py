# Interactive field collectors: prompt, read one line, retry until it parses.

from __future__ import annotations
import re
from datetime import datetime

from avtale_calendar.calendar import Appointment
from utils.config import CONFIG
from utils.debug import debug_log

RETRY_MSG = "Prøv igjen"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def read_text(prompt: str) -> str:
    # input() drops the line ending only; blanks and inner/outer spaces are kept
    return input(prompt)


def read_int(prompt: str) -> int:
    while True:
        raw = input(prompt).strip()
        if _INT_RE.fullmatch(raw):
            return int(raw)
        debug_log(f"Rejected integer input {raw!r}")
        print(RETRY_MSG)


def read_datetime(prompt: str, fmt: str | None = None) -> datetime:
    """Naive datetime parsed with `fmt` (default: CONFIG input format). Not trimmed."""
    fmt = fmt or CONFIG["formats"]["input"]
    while True:
        raw = input(prompt)
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            debug_log(f"Rejected date input {raw!r}")
            print(RETRY_MSG)


def create_appointment() -> Appointment:
    title = read_text("Skriv inn tittelen på avtalen: ")
    location = read_text("Skriv inn stedet til avtalen: ")
    duration = read_int("Skriv inn varigheten til avtalen: ")
    start = read_datetime("Skriv inn startidspunktet for avtalen (YYYY-MM-DD HH:MM): ")
    # naive start gets the local zone attached by the model
    return Appointment(title=title, location=location, duration=duration, start=start)
