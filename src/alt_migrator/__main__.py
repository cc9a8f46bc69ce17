"""Allow running as ``python -m alt_migrator``."""

from .cli import main

if __name__ == "__main__":
    main()
