"""Suggestion extraction for indexed documents."""

from __future__ import annotations

from SuggestShaper.suggest.extract import apply_term_suggest, document_from_payload, extract_suggestions

__all__ = ["apply_term_suggest", "document_from_payload", "extract_suggestions"]
