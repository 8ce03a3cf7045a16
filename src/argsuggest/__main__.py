"""Entry point for ``python -m argsuggest``."""

from argsuggest.cli import main

if __name__ == "__main__":
    main()
