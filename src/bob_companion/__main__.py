"""Entry point for running as a module: python -m bob_companion"""

from bob_companion.cli.main import main

if __name__ == "__main__":
    main()
