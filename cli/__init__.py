"""Command line entry point for the water temperature logger."""
