# Config flags and runtime settings

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


CONFIG = {
    "debug_mode": _env_flag("AVTALE_DEBUG", False),

    # JSON array of appointments, overwritten on every save
    "store_path": os.getenv("AVTALE_FILE", "avtale.json"),

    # strptime/strftime patterns
    "formats": {
        "input": "%Y-%m-%d %H:%M",       # typed by the user
        "storage": "%Y-%m-%d %H:%M:%S"   # written to / read from the store
    },

    "menu": {
        "clear_screen": _env_flag("AVTALE_CLEAR_SCREEN", True)
    }
}
