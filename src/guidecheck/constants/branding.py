"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "GUIDECHECK"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ GUIDECHECK",
    "     // style guide rules, mechanically checked",
)
CHECK_SUMMARY_TITLE: str = "Check summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} style rule checker"))
