"""Reader for fact files produced by an external extractor.

A fact file is JSON or YAML. Its top level is either a list of fact objects
or a mapping with a ``facts`` list and an optional ``path`` that becomes the
default location of every fact. Each fact object carries a ``kind`` plus the
attributes of that kind::

    path: src/styles/card.css
    facts:
      - kind: Selector
        targetsBareElement: true
        location: {line: 3, column: 1}
      - kind: Declaration
        property: margin-bottom
        location: {line: 4}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from guidecheck.constants.facts import (
    DECLARATION,
    FACT_ATTRIBUTE_ALIASES,
    FACT_FILE_SUFFIXES,
    FACT_KIND_ALIASES,
    FACTS_DOCUMENT_KEY,
    LOCATION_KEYS,
    PARAMETER_LIST,
    SELECTOR,
    YAML_FACT_FILE_SUFFIXES,
)
from guidecheck.exceptions import FactFileError
from guidecheck.model import (
    DeclarationFact,
    Fact,
    Location,
    OpaqueFact,
    ParameterListFact,
    SelectorFact,
)

logger = logging.getLogger(__name__)


def load_facts(path: Path) -> tuple[Fact, ...]:
    """Load every fact from a ``.json``, ``.yaml`` or ``.yml`` file."""
    suffix = path.suffix.lower()
    if suffix not in FACT_FILE_SUFFIXES:
        raise FactFileError(
            f"Unsupported fact file extension {path.suffix!r} for {path}; "
            f"expected one of: {', '.join(sorted(FACT_FILE_SUFFIXES))}"
        )

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FactFileError(f"Cannot read fact file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise FactFileError(f"Fact file {path} is not valid UTF-8: {exc}") from exc

    try:
        raw = yaml.safe_load(text) if suffix in YAML_FACT_FILE_SUFFIXES else json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise FactFileError(f"Failed to parse fact file {path}: {exc}") from exc

    facts = parse_facts(raw, source=str(path))
    logger.debug("Loaded %d facts from %s", len(facts), path)
    return facts


def parse_facts(raw: Any, *, source: str) -> tuple[Fact, ...]:
    """Build facts from an already-decoded fact document.

    ``source`` names the document in error messages and is the location path
    for facts that carry none when the document itself has no ``path``.
    """
    if raw is None:
        return ()

    default_path = source
    if isinstance(raw, dict):
        unknown = sorted(str(key) for key in raw if key not in (FACTS_DOCUMENT_KEY, "path"))
        if unknown:
            raise FactFileError(f"{source}: unknown top-level key(s): {', '.join(unknown)}")
        doc_path = raw.get("path")
        if doc_path is not None:
            if not isinstance(doc_path, str) or not doc_path.strip():
                raise FactFileError(f"{source}: `path` must be a non-empty string")
            default_path = doc_path
        entries = raw.get(FACTS_DOCUMENT_KEY, [])
        if entries is None:
            entries = []
    else:
        entries = raw

    if not isinstance(entries, list):
        raise FactFileError(f"{source}: facts must be a list")

    return tuple(
        _parse_fact(entry, source=f"{source}[{index}]", default_path=default_path)
        for index, entry in enumerate(entries)
    )


def _parse_fact(entry: Any, *, source: str, default_path: str) -> Fact:
    if not isinstance(entry, dict):
        raise FactFileError(f"{source}: fact must be a mapping, got {type(entry).__name__}")

    attributes = {FACT_ATTRIBUTE_ALIASES.get(str(key), str(key)): value for key, value in entry.items()}
    raw_kind = attributes.pop("kind", None)
    if not isinstance(raw_kind, str) or not raw_kind.strip():
        raise FactFileError(f"{source}: fact needs a non-empty string `kind`")
    location = _parse_location(attributes.pop("location", None), source=source, default_path=default_path)

    kind = FACT_KIND_ALIASES.get(raw_kind.strip().lower(), raw_kind.strip())
    if kind == PARAMETER_LIST:
        count = _require(attributes, "count", source)
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise FactFileError(f"{source}: `count` must be a non-negative integer")
        return ParameterListFact(count=count, location=location)
    if kind == SELECTOR:
        targets_bare_element = _require(attributes, "targets_bare_element", source)
        if not isinstance(targets_bare_element, bool):
            raise FactFileError(f"{source}: `targetsBareElement` must be a boolean")
        return SelectorFact(targets_bare_element=targets_bare_element, location=location)
    if kind == DECLARATION:
        prop = _require(attributes, "property", source)
        if not isinstance(prop, str) or not prop.strip():
            raise FactFileError(f"{source}: `property` must be a non-empty string")
        return DeclarationFact(property=prop, location=location)

    logger.debug("%s: keeping fact of unrecognized kind %r", source, kind)
    return OpaqueFact(kind=kind, data=attributes, location=location)


def _require(attributes: dict[str, Any], name: str, source: str) -> Any:
    if name not in attributes:
        raise FactFileError(f"{source}: missing required attribute `{name}`")
    return attributes[name]


def _parse_location(raw: Any, *, source: str, default_path: str) -> Location:
    """Build a location, filling the path from the document when absent."""
    if raw is None:
        return Location(path=default_path)
    if not isinstance(raw, dict):
        raise FactFileError(f"{source}: `location` must be a mapping")
    unknown = sorted(str(key) for key in raw if key not in LOCATION_KEYS)
    if unknown:
        raise FactFileError(f"{source}: unknown location key(s): {', '.join(unknown)}")

    path = raw.get("path", default_path)
    if not isinstance(path, str) or not path.strip():
        raise FactFileError(f"{source}: `location.path` must be a non-empty string")
    line = raw.get("line")
    column = raw.get("column")
    for name, value in (("line", line), ("column", column)):
        if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 1):
            raise FactFileError(f"{source}: `location.{name}` must be a positive integer")
    return Location(path=path, line=line, column=column)
