"""console script entrypoint for the kettle CLI."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
