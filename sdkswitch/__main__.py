"""Module entrypoint for running sdkswitch as ``python -m sdkswitch``."""

from __future__ import annotations

from sdkswitch.cli import main


if __name__ == "__main__":
    main()
