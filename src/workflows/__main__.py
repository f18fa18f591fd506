"""Allow `python -m workflows`."""

from workflows.cli import main

if __name__ == "__main__":
    main()
