"""Core value types shared by the schema, suggest and endpoint layers."""

from __future__ import annotations

from SuggestShaper.core.errors import (
    MalformedMappingError,
    MissingEndpointError,
    Outcome,
    SchemaConflictError,
    SuggestShaperError,
)
from SuggestShaper.core.models import (
    AnalyzerDefinition,
    Document,
    EndpointConfig,
    EndpointMode,
    FieldMapping,
    IndexSchema,
    ResolvedEndpoint,
    SelectionAction,
    SuggestionSet,
    Term,
)

__all__ = [
    "AnalyzerDefinition",
    "Document",
    "EndpointConfig",
    "EndpointMode",
    "FieldMapping",
    "IndexSchema",
    "MalformedMappingError",
    "MissingEndpointError",
    "Outcome",
    "ResolvedEndpoint",
    "SchemaConflictError",
    "SelectionAction",
    "SuggestShaperError",
    "SuggestionSet",
    "Term",
]
