"""Command-line interface for pysequent."""
