"""Per-document suggestion tokens derived from taxonomy terms."""

from __future__ import annotations

from typing import Any, Mapping

from SuggestShaper.core.models import Document, SuggestionSet, Term
from SuggestShaper.schema.augment import TERM_SUGGEST_FIELD


def extract_suggestions(doc: Document) -> SuggestionSet:
    """Flatten a document's taxonomy term names into suggestion tokens.

    Taxonomies are visited in iteration order, then terms within each one.
    Duplicates are kept: a name present in two taxonomies appears twice.

    Args:
        doc: Document to read. Not modified.

    Returns:
        Ordered suggestion tokens, empty when the document has no terms.
    """
    return tuple(term.name for terms in doc.taxonomy_terms.values() for term in terms)


def apply_term_suggest(payload: Mapping[str, Any], doc: Document) -> dict[str, Any]:
    """Return a copy of an index payload carrying ``term_suggest``.

    The field is only present when the document has at least one suggestion;
    an empty set removes it rather than writing an empty list.

    Args:
        payload: Document body about to be written to the index.
        doc: Source document for the suggestions.

    Returns:
        New payload.
    """
    out = dict(payload)
    suggestions = extract_suggestions(doc)
    if suggestions:
        out[TERM_SUGGEST_FIELD] = list(suggestions)
    else:
        out.pop(TERM_SUGGEST_FIELD, None)
    return out


def document_from_payload(payload: Mapping[str, Any]) -> Document:
    """Build a ``Document`` from a raw sync payload.

    Reads the id from ``ID`` or ``id`` and taxonomy terms from ``terms``
    (taxonomy name to a list of term objects with ``term_id``/``id`` and
    ``name``, or to an object of such terms keyed by term id). Terms without a
    name are skipped.

    Raises:
        TypeError: If ``terms`` or one of its entries has the wrong shape.
    """
    raw_terms = payload.get("terms") or {}
    if not isinstance(raw_terms, Mapping):
        raise TypeError("terms must be an object of taxonomy -> term list")

    taxonomy_terms: dict[str, list[Term]] = {}
    for taxonomy, entries in raw_terms.items():
        if isinstance(entries, Mapping):
            entries = list(entries.values())
        elif not isinstance(entries, (list, tuple)):
            raise TypeError(f"terms.{taxonomy} must be a list or an object")
        terms: list[Term] = []
        for idx, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise TypeError(f"terms.{taxonomy}[{idx}] must be an object")
            name = entry.get("name")
            if not name:
                continue
            terms.append(Term(id=entry.get("term_id", entry.get("id", idx)), name=str(name)))
        taxonomy_terms[str(taxonomy)] = terms

    doc_id = payload.get("ID", payload.get("id", ""))
    fields = {k: v for k, v in payload.items() if k != "terms"}
    return Document(id=doc_id, fields=fields, taxonomy_terms=taxonomy_terms)
