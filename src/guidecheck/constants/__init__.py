"""Shared constants for Guidecheck."""
