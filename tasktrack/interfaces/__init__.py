"""Interface layer for tasktrack.

Subpackages:
    cli - Typer command line application
"""
