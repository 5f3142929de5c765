"""Module entrypoint to run passman via `python -m passman`."""

from passman.cli import main


def run() -> None:
    """Dispatch to the console script handler."""

    main()


if __name__ == "__main__":  # pragma: no cover
    run()
