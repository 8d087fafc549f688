"""Entry point: python -m unicode_cleaner"""

from __future__ import annotations

import sys


def main() -> None:
    try:
        from unicode_cleaner.web.launcher import main as launch

        launch(sys.argv[1:])
    except SystemExit:
        raise
    except Exception:
        import traceback
        tb = traceback.format_exc()
        print(f"[Unicode Cleaner] Fatal startup error:\n{tb}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
