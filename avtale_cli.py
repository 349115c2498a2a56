# Interactive appointment tracker: entry point

import sys

from core.menu import run_menu
from utils.persistance import StoreError


def main() -> int:
    try:
        run_menu()
    except StoreError as e:
        print(f"Kunne ikke lese/lagre avtaler: {e}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        # stdin closed or Ctrl-C: same as picking "Avslutt", nothing is saved
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
