"""Feature requirements status shown to the operator."""

from __future__ import annotations

from dataclasses import dataclass

from SuggestShaper.core.models import EndpointMode

STATUS_WARNING = 1
STATUS_UNAVAILABLE = 2

UX_NOTICE = (
    "This feature modifies the site's default user experience by presenting a list of "
    "suggestions below detected search fields as text is entered into the field."
)
SELF_HOSTED_WARNING = (
    "You aren't using a managed search host so we can't be sure your host is properly secured. "
    "Autosuggest requires a publicly accessible endpoint, which can expose private content and "
    "allow data modification if improperly configured."
)
MISSING_ENDPOINT_MESSAGE = "Autosuggest stays disabled until an endpoint URL is configured."


@dataclass(frozen=True, slots=True)
class RequirementsStatus:
    """Status code plus operator-facing messages."""

    code: int
    messages: tuple[str, ...]


def requirements_status(mode: EndpointMode, *, endpoint_available: bool = True) -> RequirementsStatus:
    """Build the requirements status for the configured mode.

    The feature always reports a warning since it changes the search UX.
    Self-hosted mode adds the public endpoint security warning. An unusable
    endpoint makes the feature unavailable.

    Args:
        mode: Endpoint mode.
        endpoint_available: Whether an endpoint URL could be resolved.

    Returns:
        Status with ordered messages.
    """
    messages = [UX_NOTICE]
    if EndpointMode(mode) is EndpointMode.SELF_HOSTED:
        messages.append(SELF_HOSTED_WARNING)
    if not endpoint_available:
        messages.append(MISSING_ENDPOINT_MESSAGE)
        return RequirementsStatus(code=STATUS_UNAVAILABLE, messages=tuple(messages))
    return RequirementsStatus(code=STATUS_WARNING, messages=tuple(messages))
