"""Command line interface for reckon."""
