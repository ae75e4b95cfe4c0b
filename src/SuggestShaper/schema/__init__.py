"""Index schema shaping for typeahead suggestions."""

from __future__ import annotations

from SuggestShaper.schema.augment import (
    EDGE_NGRAM_ANALYZER,
    EDGE_NGRAM_ANALYZER_NAME,
    SUGGEST_FIELD_MAPPING,
    TERM_SUGGEST_FIELD,
    augment,
    missing_analyzers,
)
from SuggestShaper.schema.mapping import augment_mapping, schema_from_mapping, schema_to_mapping

__all__ = [
    "EDGE_NGRAM_ANALYZER",
    "EDGE_NGRAM_ANALYZER_NAME",
    "SUGGEST_FIELD_MAPPING",
    "TERM_SUGGEST_FIELD",
    "augment",
    "augment_mapping",
    "missing_analyzers",
    "schema_from_mapping",
    "schema_to_mapping",
]
