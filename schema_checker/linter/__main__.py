"""Module entrypoint for `python -m schema_checker.linter`."""

from .run_lint import main


if __name__ == "__main__":
    main()
