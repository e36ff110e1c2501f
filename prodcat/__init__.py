"""Interactive product catalogue with search, sorting, matrix, sequence, statistics, temperature-report and geometry helpers."""

__version__ = "0.1.0"