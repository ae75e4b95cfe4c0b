from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True, slots=True)
class AnalyzerDefinition:
    """Text analysis pipeline registered under ``settings.analysis.analyzer``.

    Compared by structural equality, so registering an identical definition
    twice is a no-op.

    Attributes:
        type: Analyzer type, ``custom`` for user-defined chains.
        tokenizer: Tokenizer name, if the analyzer type takes one.
        filters: Ordered token filter names.
        extra: Analyzer keys not modelled above, kept verbatim.

    Not hashable: ``extra`` is a read-only view over a dict.
    """

    __hash__ = None  # type: ignore[assignment]

    type: Optional[str] = "custom"
    tokenizer: Optional[str] = None
    filters: tuple[str, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))


@dataclass(frozen=True, slots=True)
class FieldMapping:
    """Mapping of one index field.

    Attributes:
        type: Field datatype (``text``, ``keyword``...); None for object
            fields declared only through ``properties``.
        analyzer: Index-time analyzer name, if any.
        search_analyzer: Query-time analyzer name, if any.
        fields: Multi-field sub-mappings keyed by sub-field name.
        extra: Mapping keys not modelled above, kept verbatim.

    Not hashable, like the mapping views it holds.
    """

    __hash__ = None  # type: ignore[assignment]

    type: Optional[str] = "text"
    analyzer: Optional[str] = None
    search_analyzer: Optional[str] = None
    fields: Mapping[str, FieldMapping] = field(default_factory=dict)
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def analyzer_names(self) -> tuple[str, ...]:
        """Return analyzer names referenced by this field and its sub-fields."""
        names: list[str] = []
        for name in (self.analyzer, self.search_analyzer):
            if name:
                names.append(name)
        for sub in self.fields.values():
            names.extend(sub.analyzer_names())
        return tuple(names)


@dataclass(frozen=True, slots=True)
class IndexSchema:
    """Index field mappings plus the analyzer registry they reference.

    Both mappings keep insertion order and are read-only. Instances compare
    by value but are not hashable.
    """

    __hash__ = None  # type: ignore[assignment]

    fields: Mapping[str, FieldMapping] = field(default_factory=dict)
    analyzers: Mapping[str, AnalyzerDefinition] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "analyzers", MappingProxyType(dict(self.analyzers)))


@dataclass(frozen=True, slots=True)
class Term:
    """Taxonomy term attached to a document."""

    id: int | str
    name: str


@dataclass(frozen=True, slots=True)
class Document:
    """Content item as handed over by the host content system.

    Attributes:
        id: Document identifier.
        fields: Indexed field values.
        taxonomy_terms: Taxonomy name to ordered terms, in host iteration order.
    """

    __hash__ = None  # type: ignore[assignment]

    id: int | str
    fields: Mapping[str, Any] = field(default_factory=dict)
    taxonomy_terms: Mapping[str, Sequence[Term]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(
            self,
            "taxonomy_terms",
            MappingProxyType({name: tuple(terms) for name, terms in self.taxonomy_terms.items()}),
        )


# Ordered suggestion tokens; empty means the suggest field is omitted.
SuggestionSet = tuple[str, ...]


class EndpointMode(str, Enum):
    """Where the suggest endpoint lives."""

    MANAGED = "managed"
    SELF_HOSTED = "self_hosted"


class SelectionAction(str, Enum):
    """What the typeahead widget does when a suggestion is picked."""

    SEARCH = "search"
    NAVIGATE = "navigate"


@dataclass(frozen=True, slots=True)
class EndpointConfig:
    """Settings for one endpoint resolution.

    ``None`` on the pass-through fields means "unset, use the default".
    """

    mode: EndpointMode
    managed_host_base_url: str = ""
    index_name: str = ""
    self_hosted_endpoint_url: str = ""
    search_fields: Optional[Sequence[str]] = None
    post_types: Optional[Sequence[str]] = None
    post_status: Optional[str] = None
    selection_action: Optional[SelectionAction] = None


@dataclass(frozen=True, slots=True)
class ResolvedEndpoint:
    """Consumer-facing typeahead configuration.

    Attributes:
        url: Externally reachable search URL without trailing slash.
        search_fields: Fields the widget queries, in order.
        post_types: Content types to suggest, in order.
        post_status: Status filter for suggested content.
        selection_action: Behaviour on selection.
        requires_operator_acknowledgement: True when the endpoint is self-hosted
            and an operator warning must be shown before enabling.
    """

    url: str
    search_fields: tuple[str, ...]
    post_types: tuple[str, ...]
    post_status: str
    selection_action: SelectionAction
    requires_operator_acknowledgement: bool = False
