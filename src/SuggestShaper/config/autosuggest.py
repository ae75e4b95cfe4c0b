"""Autosuggest domain configuration: endpoint mode and client options."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from SuggestShaper.config.common import (
    expect_optional_str,
    expect_optional_str_tuple,
    expect_str,
    get_optional_value,
    get_section,
)
from SuggestShaper.config.index import IndexConfig
from SuggestShaper.core.models import EndpointConfig, EndpointMode, SelectionAction
from SuggestShaper.schema.augment import DEFAULT_TITLE_FIELD, SUGGEST_SUBFIELD, TERM_SUGGEST_FIELD

_ALLOWED_MODES = {mode.value for mode in EndpointMode}
_ALLOWED_ACTIONS = {action.value for action in SelectionAction}


@dataclass(frozen=True, slots=True)
class AutosuggestConfig:
    """Store validated autosuggest endpoint settings.

    ``None`` on the client option fields means the resolver default applies.
    """

    mode: EndpointMode
    managed_host: str
    endpoint_url: str
    endpoint_url_env: str
    search_fields: tuple[str, ...] | None
    post_types: tuple[str, ...] | None
    post_status: str | None
    action: SelectionAction | None

    def to_endpoint_config(self, index: IndexConfig) -> EndpointConfig:
        """Build the resolver input for one resolution."""
        return EndpointConfig(
            mode=self.mode,
            managed_host_base_url=self.managed_host,
            index_name=index.name,
            self_hosted_endpoint_url=self.endpoint_url,
            search_fields=self._search_fields(index),
            post_types=self.post_types,
            post_status=self.post_status,
            selection_action=self.action,
        )

    def _search_fields(self, index: IndexConfig) -> tuple[str, ...] | None:
        # The default fields assume the title field is named "title".
        if self.search_fields is not None or index.title_field == DEFAULT_TITLE_FIELD:
            return self.search_fields
        return (f"{index.title_field}.{SUGGEST_SUBFIELD}", TERM_SUGGEST_FIELD)


def load_autosuggest(raw: Mapping[str, Any]) -> AutosuggestConfig:
    """Load autosuggest domain config from raw mapping.

    When ``endpoint_url_env`` names a set environment variable, its value
    replaces ``endpoint_url``.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If mode or action are unknown.
    """
    section = get_section(raw, "autosuggest", required=True)

    mode_raw = expect_str(get_optional_value(section, "mode", EndpointMode.SELF_HOSTED.value), "autosuggest.mode")
    mode_value = mode_raw.strip().lower().replace("-", "_")
    if mode_value not in _ALLOWED_MODES:
        raise ValueError(f"autosuggest.mode must be one of {sorted(_ALLOWED_MODES)}")

    action_raw = expect_optional_str(get_optional_value(section, "action", None), "autosuggest.action")
    action = None
    if action_raw is not None:
        action_value = action_raw.strip().lower()
        if action_value not in _ALLOWED_ACTIONS:
            raise ValueError(f"autosuggest.action must be one of {sorted(_ALLOWED_ACTIONS)}")
        action = SelectionAction(action_value)

    endpoint_url_env = expect_str(
        get_optional_value(section, "endpoint_url_env", ""), "autosuggest.endpoint_url_env"
    ).strip()
    endpoint_url = expect_str(get_optional_value(section, "endpoint_url", ""), "autosuggest.endpoint_url")
    if endpoint_url_env:
        endpoint_url = _load_endpoint_from_env(endpoint_url_env) or endpoint_url

    post_status = expect_optional_str(get_optional_value(section, "post_status", None), "autosuggest.post_status")

    return AutosuggestConfig(
        mode=EndpointMode(mode_value),
        managed_host=expect_str(get_optional_value(section, "managed_host", ""), "autosuggest.managed_host").strip(),
        endpoint_url=endpoint_url.strip(),
        endpoint_url_env=endpoint_url_env,
        search_fields=expect_optional_str_tuple(
            get_optional_value(section, "search_fields", None), "autosuggest.search_fields"
        ),
        post_types=expect_optional_str_tuple(get_optional_value(section, "post_types", None), "autosuggest.post_types"),
        post_status=post_status.strip() if post_status is not None else None,
        action=action,
    )


def check_autosuggest(config: AutosuggestConfig) -> None:
    """Validate autosuggest domain constraints.

    A missing endpoint URL or managed host is not a config error: the feature
    stays disabled and the resolver reports it.

    Raises:
        ValueError: If values violate autosuggest constraints.
    """
    if config.search_fields is not None and (not config.search_fields or not all(config.search_fields)):
        raise ValueError("autosuggest.search_fields must be null or a list of non-empty names")
    if config.post_types is not None and (not config.post_types or not all(config.post_types)):
        raise ValueError("autosuggest.post_types must be null or a list of non-empty names")
    if config.post_status is not None and not config.post_status:
        raise ValueError("autosuggest.post_status must not be empty")


def _load_endpoint_from_env(env_name: str) -> str:
    """Load endpoint URL from environment variable."""
    return os.getenv(env_name, "").strip()
