"""Fact kinds and fact-file format constants."""

from __future__ import annotations

PARAMETER_LIST: str = "ParameterList"
SELECTOR: str = "Selector"
DECLARATION: str = "Declaration"

# Accepted spellings of each kind in fact files, normalized to the canonical name.
FACT_KIND_ALIASES: dict[str, str] = {
    "parameterlist": PARAMETER_LIST,
    "parameter_list": PARAMETER_LIST,
    "parameter-list": PARAMETER_LIST,
    "selector": SELECTOR,
    "declaration": DECLARATION,
}

# camelCase attribute names emitted by some extractors.
FACT_ATTRIBUTE_ALIASES: dict[str, str] = {
    "targetsBareElement": "targets_bare_element",
}

FACT_FILE_SUFFIXES: frozenset[str] = frozenset({".json", ".yaml", ".yml"})
YAML_FACT_FILE_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})
FACTS_DOCUMENT_KEY: str = "facts"
LOCATION_KEYS: frozenset[str] = frozenset({"path", "line", "column"})
