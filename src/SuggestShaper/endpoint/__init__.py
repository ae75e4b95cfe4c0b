"""Endpoint resolution for the client-side typeahead widget."""

from __future__ import annotations

from SuggestShaper.endpoint.resolve import (
    DEFAULT_POST_STATUS,
    DEFAULT_POST_TYPES,
    DEFAULT_SEARCH_FIELDS,
    DEFAULT_SELECTION_ACTION,
    resolve,
    try_resolve,
)
from SuggestShaper.endpoint.status import RequirementsStatus, requirements_status

__all__ = [
    "DEFAULT_POST_STATUS",
    "DEFAULT_POST_TYPES",
    "DEFAULT_SEARCH_FIELDS",
    "DEFAULT_SELECTION_ACTION",
    "RequirementsStatus",
    "requirements_status",
    "resolve",
    "try_resolve",
]
