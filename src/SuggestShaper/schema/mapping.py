"""Conversion between raw mapping documents and ``IndexSchema``.

A mapping document is the JSON body used to create an index::

    {
        "settings": {"analysis": {"analyzer": {...}}},
        "mappings": {"post": {"properties": {...}}},
    }

The document type level under ``mappings`` is optional. Keys the schema model
does not cover are carried through unchanged.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping

from SuggestShaper.core.models import AnalyzerDefinition, FieldMapping, IndexSchema
from SuggestShaper.schema.augment import DEFAULT_TITLE_FIELD, augment

_FIELD_KEYS = {"type", "analyzer", "search_analyzer", "fields"}
_ANALYZER_KEYS = {"type", "tokenizer", "filter"}


def schema_from_mapping(doc: Mapping[str, Any], *, doc_type: str | None = None) -> IndexSchema:
    """Build an ``IndexSchema`` from a mapping document.

    Args:
        doc: Mapping document.
        doc_type: Optional document type level under ``mappings``.

    Returns:
        Parsed schema.

    Raises:
        TypeError: If a section has the wrong shape.
    """
    properties = _section(_properties_parent(doc, doc_type), "properties")
    analyzers = _section(_section(_section(doc, "settings"), "analysis"), "analyzer")
    return IndexSchema(
        fields={name: field_from_mapping(raw, name) for name, raw in properties.items()},
        analyzers={name: analyzer_from_mapping(raw, name) for name, raw in analyzers.items()},
    )


def schema_to_mapping(
    schema: IndexSchema,
    *,
    base: Mapping[str, Any] | None = None,
    doc_type: str | None = None,
) -> dict[str, Any]:
    """Write ``schema`` into a copy of ``base`` (or a fresh document).

    Args:
        schema: Schema to serialize.
        base: Document whose other keys are preserved. Not modified.
        doc_type: Optional document type level under ``mappings``.

    Returns:
        New mapping document.
    """
    out: dict[str, Any] = deepcopy(dict(base)) if base is not None else {}

    analysis = _child(_child(out, "settings"), "analysis")
    analysis["analyzer"] = {name: analyzer_to_mapping(a) for name, a in schema.analyzers.items()}

    parent = _child(out, "mappings")
    if doc_type:
        parent = _child(parent, doc_type)
    parent["properties"] = {name: field_to_mapping(f) for name, f in schema.fields.items()}
    return out


def augment_mapping(
    doc: Mapping[str, Any],
    *,
    title_field: str = DEFAULT_TITLE_FIELD,
    doc_type: str | None = None,
) -> dict[str, Any]:
    """Augment a raw mapping document with suggestion fields.

    Args:
        doc: Mapping document. Not modified.
        title_field: Primary title field name.
        doc_type: Optional document type level under ``mappings``.

    Returns:
        New, augmented mapping document.

    Raises:
        SchemaConflictError: See ``augment``.
        TypeError: If the document has the wrong shape.
    """
    schema = augment(schema_from_mapping(doc, doc_type=doc_type), title_field=title_field)
    return schema_to_mapping(schema, base=doc, doc_type=doc_type)


def field_from_mapping(raw: Any, name: str) -> FieldMapping:
    """Parse one field mapping."""
    if not isinstance(raw, Mapping):
        raise TypeError(f"Field mapping {name} must be an object")
    sub_fields = _section(raw, "fields")
    return FieldMapping(
        type=raw.get("type"),
        analyzer=raw.get("analyzer"),
        search_analyzer=raw.get("search_analyzer"),
        fields={sub: field_from_mapping(v, f"{name}.{sub}") for sub, v in sub_fields.items()},
        extra={k: v for k, v in raw.items() if k not in _FIELD_KEYS},
    )


def field_to_mapping(mapping: FieldMapping) -> dict[str, Any]:
    """Serialize one field mapping."""
    out: dict[str, Any] = {}
    if mapping.type is not None:
        out["type"] = mapping.type
    if mapping.analyzer is not None:
        out["analyzer"] = mapping.analyzer
    if mapping.search_analyzer is not None:
        out["search_analyzer"] = mapping.search_analyzer
    if mapping.fields:
        out["fields"] = {sub: field_to_mapping(f) for sub, f in mapping.fields.items()}
    out.update(deepcopy(dict(mapping.extra)))
    return out


def analyzer_from_mapping(raw: Any, name: str) -> AnalyzerDefinition:
    """Parse one analyzer definition."""
    if not isinstance(raw, Mapping):
        raise TypeError(f"Analyzer {name} must be an object")
    filters = raw.get("filter") or []
    if isinstance(filters, str):
        filters = [filters]
    return AnalyzerDefinition(
        type=raw.get("type"),
        tokenizer=raw.get("tokenizer"),
        filters=tuple(filters),
        extra={k: v for k, v in raw.items() if k not in _ANALYZER_KEYS},
    )


def analyzer_to_mapping(analyzer: AnalyzerDefinition) -> dict[str, Any]:
    """Serialize one analyzer definition."""
    out: dict[str, Any] = {}
    if analyzer.type is not None:
        out["type"] = analyzer.type
    if analyzer.tokenizer is not None:
        out["tokenizer"] = analyzer.tokenizer
    if analyzer.filters:
        out["filter"] = list(analyzer.filters)
    out.update(deepcopy(dict(analyzer.extra)))
    return out


def _properties_parent(doc: Mapping[str, Any], doc_type: str | None) -> Mapping[str, Any]:
    mappings = _section(doc, "mappings")
    return _section(mappings, doc_type) if doc_type else mappings


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"{key} must be an object")
    return value


def _child(parent: dict[str, Any], key: str) -> dict[str, Any]:
    # Writable counterpart of _section: a null or missing section becomes a new dict.
    value = parent.get(key)
    if value is None:
        value = {}
    elif not isinstance(value, Mapping):
        raise TypeError(f"{key} must be an object")
    elif not isinstance(value, dict):
        value = dict(value)
    parent[key] = value
    return value
