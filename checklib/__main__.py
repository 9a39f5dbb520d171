"""Allow ``python -m checklib``."""

from checklib.cli import main

if __name__ == "__main__":
    main()
