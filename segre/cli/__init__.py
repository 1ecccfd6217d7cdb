"""Command line interface for segre."""
