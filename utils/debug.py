# Debug logging to stderr, toggled by CONFIG["debug_mode"]

import sys
from datetime import datetime

from utils.config import CONFIG


def debug_log(msg: str) -> None:
    if not CONFIG.get("debug_mode", False):
        return
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[avtale {ts}] {msg}", file=sys.stderr)
