"""Infrastructure layer for tasktrack.

Subpackages:
    storage - JSON file persistence and seed data
    export - CSV/TSV export of task lists
"""
