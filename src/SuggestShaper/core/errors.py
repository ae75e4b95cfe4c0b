"""Error types and typed results for suggestion shaping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class SuggestShaperError(ValueError):
    """Base class for SuggestShaper failures."""


class SchemaConflictError(SuggestShaperError):
    """Augmentation would overwrite an incompatible existing definition."""

    def __init__(self, name: str, existing: Any, wanted: Any) -> None:
        self.name = name
        self.existing = existing
        self.wanted = wanted
        super().__init__(f"{name} already exists with an incompatible definition: {existing!r}")


class MissingEndpointError(SuggestShaperError):
    """No reachable endpoint URL can be built for the configured mode."""

    def __init__(self, mode: Any, detail: str) -> None:
        self.mode = mode
        super().__init__(f"No autosuggest endpoint for mode={getattr(mode, 'value', mode)}: {detail}")


class MalformedMappingError(SuggestShaperError):
    """A mapping document section has the wrong shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Malformed mapping document: {detail}")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Typed success-or-failure result returned across the pipeline boundary."""

    value: Optional[T] = None
    error: Optional[SuggestShaperError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: SuggestShaperError) -> Outcome[T]:
        return cls(error=error)
