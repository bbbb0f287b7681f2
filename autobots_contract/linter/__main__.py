"""Module entrypoint for `python -m autobots_contract.linter`."""

from .run_lint import main


if __name__ == "__main__":
    main()
