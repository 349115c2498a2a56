from collections import deque
from datetime import datetime

import pytest

from avtale_calendar.calendar import Appointment
from utils.config import CONFIG


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    monkeypatch.setitem(CONFIG, "store_path", str(tmp_path / "avtale.json"))
    monkeypatch.setitem(CONFIG, "debug_mode", False)
    monkeypatch.setitem(CONFIG, "menu", {"clear_screen": False})


@pytest.fixture
def feed_input(monkeypatch):
    """Script builtins.input with a list of answers; records the prompts shown."""
    prompts = []

    def _install(answers):
        queue = deque(answers)

        def fake_input(prompt=""):
            prompts.append(prompt)
            if not queue:
                raise EOFError
            return queue.popleft()

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return _install


@pytest.fixture
def make_appointment():
    """Factory for appointments with usable defaults."""
    def _make(title="Tannlege", location="Sentrum", duration=30,
              start=datetime(2024, 3, 5, 14, 0)):
        return Appointment(title=title, location=location, duration=duration, start=start)

    return _make
