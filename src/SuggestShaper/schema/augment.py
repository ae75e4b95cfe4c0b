"""Schema augmentation for search-as-you-type suggestions.

Layers an edge n-gram ``suggest`` sub-field under the title field and a
top-level ``term_suggest`` field onto an existing index schema. Prefixes typed
by a user match the start of indexed terms, so no separate suggester structure
is needed.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from SuggestShaper.core.errors import SchemaConflictError
from SuggestShaper.core.models import AnalyzerDefinition, FieldMapping, IndexSchema
from SuggestShaper.utils.log import log

EDGE_NGRAM_ANALYZER_NAME = "edge_ngram_analyzer"
SUGGEST_SUBFIELD = "suggest"
TERM_SUGGEST_FIELD = "term_suggest"
DEFAULT_TITLE_FIELD = "title"

EDGE_NGRAM_ANALYZER = AnalyzerDefinition(
    type="custom",
    tokenizer="standard",
    filters=("lowercase", "edge_ngram"),
)

SUGGEST_FIELD_MAPPING = FieldMapping(
    type="text",
    analyzer=EDGE_NGRAM_ANALYZER_NAME,
    search_analyzer="standard",
)

# Analyzers shipped with the engine; fields may reference them without a
# registry entry.
BUILTIN_ANALYZERS = frozenset(
    {
        "standard",
        "simple",
        "whitespace",
        "stop",
        "keyword",
        "pattern",
        "fingerprint",
        "english",
    }
)


def augment(base: IndexSchema, *, title_field: str = DEFAULT_TITLE_FIELD) -> IndexSchema:
    """Return a new schema with suggestion fields and analyzers added.

    Augmentation is strictly additive and idempotent: fields and analyzers of
    ``base`` are kept unchanged, and an existing definition identical to the
    one being added is accepted as-is.

    Args:
        base: Schema to augment. Not modified.
        title_field: Name of the primary title field receiving the
            ``suggest`` sub-field. Created as a ``text`` field when missing.

    Returns:
        Augmented schema.

    Raises:
        SchemaConflictError: If ``edge_ngram_analyzer``, ``<title>.suggest`` or
            ``term_suggest`` already exist with a different definition.
    """
    analyzers = dict(base.analyzers)
    existing_analyzer = analyzers.get(EDGE_NGRAM_ANALYZER_NAME)
    if existing_analyzer is not None and existing_analyzer != EDGE_NGRAM_ANALYZER:
        raise SchemaConflictError(EDGE_NGRAM_ANALYZER_NAME, existing_analyzer, EDGE_NGRAM_ANALYZER)
    analyzers[EDGE_NGRAM_ANALYZER_NAME] = EDGE_NGRAM_ANALYZER

    fields = dict(base.fields)
    title = fields.get(title_field)
    if title is None:
        log.debug("Title field %s missing, creating it as text", title_field)
        title = FieldMapping(type="text")
    existing_sub = title.fields.get(SUGGEST_SUBFIELD)
    if existing_sub is not None and existing_sub != SUGGEST_FIELD_MAPPING:
        raise SchemaConflictError(f"{title_field}.{SUGGEST_SUBFIELD}", existing_sub, SUGGEST_FIELD_MAPPING)
    fields[title_field] = replace(title, fields={**title.fields, SUGGEST_SUBFIELD: SUGGEST_FIELD_MAPPING})

    existing_term = fields.get(TERM_SUGGEST_FIELD)
    if existing_term is not None and existing_term != SUGGEST_FIELD_MAPPING:
        raise SchemaConflictError(TERM_SUGGEST_FIELD, existing_term, SUGGEST_FIELD_MAPPING)
    fields[TERM_SUGGEST_FIELD] = SUGGEST_FIELD_MAPPING

    return IndexSchema(fields=fields, analyzers=analyzers)


def missing_analyzers(schema: IndexSchema, *, builtin: Iterable[str] = BUILTIN_ANALYZERS) -> tuple[str, ...]:
    """Return analyzer names referenced by fields but absent from the registry.

    Args:
        schema: Schema to check.
        builtin: Analyzer names provided by the engine itself.

    Returns:
        Unregistered analyzer names, in first-reference order.
    """
    known = set(schema.analyzers) | set(builtin)
    missing: list[str] = []
    for mapping in schema.fields.values():
        for name in mapping.analyzer_names():
            if name not in known and name not in missing:
                missing.append(name)
    return tuple(missing)
