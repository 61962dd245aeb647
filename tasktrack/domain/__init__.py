"""Domain layer for tasktrack.

Pure models, business rules and ports. Nothing in this package performs I/O.

Subpackages:
    shared - Outcome envelope
    task - Work items, people, validation and the repository port
"""
