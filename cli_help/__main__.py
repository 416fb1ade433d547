"""
This allows the CLI to be run as a module with `python -m cli_help`.
"""
from .main import main

if __name__ == "__main__":
    main()
