# Menu loop: numbered commands over an appointment list that is passed
# explicitly to every handler.
#
# StoreError from save/load is not handled here; it ends the loop and is
# reported by the CLI entry point.

from __future__ import annotations
import re
from pathlib import Path
from typing import Callable, Dict, List, Optional

from avtale_calendar.calendar import Appointment, format_listing
from core.prompts import RETRY_MSG, create_appointment
from utils.config import CONFIG
from utils.debug import debug_log
from utils.persistance import load_appointments, save_appointments

EXIT_CHOICE = 5
CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"

_CHOICE_RE = re.compile(r"\+?[0-9]+")


def _menu_lines(path: Path) -> List[str]:
    return [
        "Ny avtale [1]",
        "Lagre avtaler [2]",
        "Se avtaler [3]",
        f"Les avtaler fra {path} fil [4]",
        "Avslutt programmet [5]",
    ]


def parse_choice(raw: str) -> Optional[int]:
    """Menu choice as an unsigned byte (0-255); None when it does not parse."""
    text = raw.strip()
    if not _CHOICE_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


def cmd_create(appointments: List[Appointment], _path: Path) -> None:
    appointments.append(create_appointment())
    print("La til ny avtale")


def cmd_save(appointments: List[Appointment], path: Path) -> None:
    save_appointments(appointments, path)
    print("Lagret avtaler")


def cmd_list(appointments: List[Appointment], _path: Path) -> None:
    for line in format_listing(appointments):
        print(line)


def cmd_load(appointments: List[Appointment], path: Path) -> None:
    # append, not replace: loading twice duplicates every entry
    appointments.extend(load_appointments(path))
    print("Leste avtaler")


COMMANDS: Dict[int, Callable[[List[Appointment], Path], None]] = {
    1: cmd_create,
    2: cmd_save,
    3: cmd_list,
    4: cmd_load,
}


def _pause_and_clear() -> None:
    input("Trykk enter for neste kommando ...")
    if CONFIG["menu"].get("clear_screen", True):
        print(CLEAR_SCREEN, end="", flush=True)


def run_menu(appointments: Optional[List[Appointment]] = None,
             path: Optional[str | Path] = None) -> List[Appointment]:
    """Run until the user picks 5. Returns the (mutated) appointment list."""
    if appointments is None:
        appointments = []
    store = Path(path if path is not None else CONFIG["store_path"])

    while True:
        for line in _menu_lines(store):
            print(line)
        choice = parse_choice(input(": "))
        if choice is None:
            print(RETRY_MSG)
            continue
        if choice == EXIT_CHOICE:
            debug_log("Exit requested")
            break

        handler = COMMANDS.get(choice)
        if handler is not None:
            debug_log(f"Command {choice}: {handler.__name__}")
            handler(appointments, store)
        _pause_and_clear()

    return appointments
