"""Autosuggest feature facade for the indexing pipeline and front end.

Replaces implicit host hooks with explicit calls: the pipeline passes the
mapping document at index creation and each sync payload at document write,
and the page renderer asks for client options. Core failures come back as
typed outcomes so a misconfigured endpoint never aborts a document write.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from SuggestShaper.core.errors import MalformedMappingError, Outcome, SchemaConflictError
from SuggestShaper.core.models import EndpointConfig, ResolvedEndpoint
from SuggestShaper.endpoint.resolve import PostProcess, try_resolve
from SuggestShaper.endpoint.status import RequirementsStatus, requirements_status
from SuggestShaper.renderers.json import render_client_options
from SuggestShaper.schema.augment import DEFAULT_TITLE_FIELD
from SuggestShaper.schema.mapping import augment_mapping
from SuggestShaper.suggest.extract import apply_term_suggest, document_from_payload
from SuggestShaper.utils.log import log


@dataclass(slots=True)
class AutosuggestFeature:
    """Suggest relevant content as text is entered into a search field."""

    endpoint: EndpointConfig
    title_field: str = DEFAULT_TITLE_FIELD
    doc_type: Optional[str] = None
    post_process: Optional[PostProcess] = None

    slug = "autosuggest"
    title = "Autosuggest"
    # The suggest fields only exist after the index is recreated.
    requires_install_reindex = True

    def mapping(self, mapping_doc: Mapping[str, Any]) -> Outcome[dict[str, Any]]:
        """Augment the mapping document sent at index (re)creation.

        Args:
            mapping_doc: Raw mapping document. Not modified.

        Returns:
            Outcome holding the augmented document, or the schema conflict or
            malformed-document error.
        """
        try:
            augmented = augment_mapping(mapping_doc, title_field=self.title_field, doc_type=self.doc_type)
        except SchemaConflictError as error:
            log.warning("Autosuggest mapping skipped: %s", error)
            return Outcome.failure(error)
        except TypeError as error:
            log.warning("Autosuggest mapping skipped: %s", error)
            return Outcome.failure(MalformedMappingError(str(error)))
        log.debug("Autosuggest mapping applied title_field=%s doc_type=%s", self.title_field, self.doc_type)
        return Outcome.success(augmented)

    def sync_args(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Add ``term_suggest`` to a document payload before it is indexed.

        Never raises for a malformed ``terms`` section: the payload is returned
        unchanged and the problem is logged.

        Args:
            payload: Document body about to be written.

        Returns:
            New payload.
        """
        try:
            doc = document_from_payload(payload)
        except TypeError as error:
            log.warning("Term suggestions skipped for document %s: %s", payload.get("ID", payload.get("id")), error)
            return dict(payload)
        return apply_term_suggest(payload, doc)

    def resolve_endpoint(self) -> Outcome[ResolvedEndpoint]:
        """Resolve the endpoint, logging when the feature must stay disabled."""
        outcome = try_resolve(self.endpoint, post_process=self.post_process)
        if not outcome.ok:
            log.warning("Autosuggest disabled: %s", outcome.error)
        elif outcome.value is not None and outcome.value.requires_operator_acknowledgement:
            log.warning("Autosuggest endpoint %s is self-hosted and publicly reachable", outcome.value.url)
        return outcome

    def client_options(self) -> Outcome[dict[str, Any]]:
        """Return the client options object for the typeahead widget."""
        outcome = self.resolve_endpoint()
        if not outcome.ok or outcome.value is None:
            return Outcome(error=outcome.error)
        return Outcome.success(render_client_options(outcome.value))

    def requirements_status(self) -> RequirementsStatus:
        """Return the status and operator messages for this feature."""
        available = try_resolve(self.endpoint, post_process=self.post_process).ok
        return requirements_status(self.endpoint.mode, endpoint_available=available)
