"""Allow running as ``python -m huewheel``."""

from huewheel.cli.main import main

if __name__ == "__main__":
    main()
