"""Allow ``python -m spcore``."""

from spcore.cli import main

if __name__ == "__main__":
    main()
