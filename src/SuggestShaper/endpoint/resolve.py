"""Resolve the typeahead endpoint handed to the front-end widget."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from SuggestShaper.core.errors import MissingEndpointError, Outcome
from SuggestShaper.core.models import EndpointConfig, EndpointMode, ResolvedEndpoint, SelectionAction
from SuggestShaper.utils.log import log

DEFAULT_SEARCH_FIELDS: tuple[str, ...] = ("title.suggest", "term_suggest")
DEFAULT_POST_TYPES: tuple[str, ...] = ("post", "page")
DEFAULT_POST_STATUS = "published"
DEFAULT_SELECTION_ACTION = SelectionAction.NAVIGATE
MANAGED_SEARCH_PATH = "post/_search"

PostProcess = Callable[[ResolvedEndpoint], ResolvedEndpoint]


def resolve(cfg: EndpointConfig, *, post_process: Optional[PostProcess] = None) -> ResolvedEndpoint:
    """Resolve the public suggest URL and client options.

    The resolver only composes URLs; it performs no authentication. A
    self-hosted endpoint is a public read surface over the index, so the
    result asks the caller to show an operator warning before enabling.

    Args:
        cfg: Endpoint settings for this resolution.
        post_process: Optional pure transform applied to the result, used to
            adjust search fields, post types or the action.

    Returns:
        Resolved endpoint configuration.

    Raises:
        MissingEndpointError: If no URL can be built for ``cfg.mode``.
    """
    mode = EndpointMode(cfg.mode)
    if mode is EndpointMode.MANAGED:
        url = _managed_url(cfg)
    else:
        url = cfg.self_hosted_endpoint_url.strip().rstrip("/")
        if not url:
            raise MissingEndpointError(mode, "endpoint URL is not configured")

    action = DEFAULT_SELECTION_ACTION if cfg.selection_action is None else SelectionAction(cfg.selection_action)
    resolved = ResolvedEndpoint(
        url=url,
        search_fields=_ordered_set(cfg.search_fields, DEFAULT_SEARCH_FIELDS),
        post_types=_ordered_set(cfg.post_types, DEFAULT_POST_TYPES),
        post_status=cfg.post_status or DEFAULT_POST_STATUS,
        selection_action=action,
        requires_operator_acknowledgement=mode is EndpointMode.SELF_HOSTED,
    )
    log.debug("Resolved autosuggest endpoint mode=%s url=%s", mode.value, url)
    if post_process is not None:
        resolved = post_process(resolved)
    return resolved


def try_resolve(cfg: EndpointConfig, *, post_process: Optional[PostProcess] = None) -> Outcome[ResolvedEndpoint]:
    """Like ``resolve`` but returns a missing endpoint as a typed failure."""
    try:
        return Outcome.success(resolve(cfg, post_process=post_process))
    except MissingEndpointError as error:
        return Outcome.failure(error)


def _managed_url(cfg: EndpointConfig) -> str:
    base = cfg.managed_host_base_url.strip().rstrip("/")
    index = cfg.index_name.strip().strip("/")
    if not base:
        raise MissingEndpointError(EndpointMode.MANAGED, "managed host URL is not configured")
    if not index:
        raise MissingEndpointError(EndpointMode.MANAGED, "index name is not configured")
    return f"{base}/{index}/{MANAGED_SEARCH_PATH}"


def _ordered_set(values: Optional[Iterable[str]], default: tuple[str, ...]) -> tuple[str, ...]:
    """Deduplicate keeping first occurrence; ``None`` selects the default."""
    if values is None:
        return default
    out: list[str] = []
    for value in values:
        if value not in out:
            out.append(value)
    return tuple(out)
