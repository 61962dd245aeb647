"""Entry point for the tasktrack CLI.

Usage:
    python -m tasktrack.interfaces.cli.main

Or via installed entry point:
    tasktrack <command>
"""

from tasktrack.interfaces.cli import app


def main() -> None:
    """Run the tasktrack CLI application."""
    app()


if __name__ == "__main__":
    main()
