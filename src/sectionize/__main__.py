"""Entry point for ``python -m sectionize``."""

from sectionize.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
