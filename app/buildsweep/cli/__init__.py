"""Command-line interface for buildsweep."""
