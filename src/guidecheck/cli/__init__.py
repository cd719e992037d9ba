"""Command-line interface for Guidecheck."""
