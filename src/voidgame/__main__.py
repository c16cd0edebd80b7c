"""Run the Void CLI with ``python -m voidgame``."""
from voidgame.presentation.cli.app import main

if __name__ == "__main__":
    main()
