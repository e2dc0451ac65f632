"""Entry point for the taskmeter CLI.

Usage:
    python -m taskmeter.interfaces.cli.main

Or via installed entry point:
    taskmeter <command>
"""

from taskmeter.interfaces.cli import app


def main() -> None:
    """Run the taskmeter CLI application."""
    app()


if __name__ == "__main__":
    main()
