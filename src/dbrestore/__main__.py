"""Allow ``python -m dbrestore``."""

from dbrestore.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
