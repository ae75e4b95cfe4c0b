"""Service layer wiring the suggestion core to configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from SuggestShaper.endpoint.resolve import PostProcess
from SuggestShaper.services.feature import AutosuggestFeature

if TYPE_CHECKING:
    from SuggestShaper.config import AppConfig


def create_autosuggest_feature(
    config: AppConfig,
    post_process: PostProcess | None = None,
) -> AutosuggestFeature:
    """Create the autosuggest feature from application configuration.

    Args:
        config: Application configuration.
        post_process: Optional transform applied to every resolved endpoint.

    Returns:
        Configured AutosuggestFeature instance.
    """
    return AutosuggestFeature(
        endpoint=config.autosuggest.to_endpoint_config(config.index),
        title_field=config.index.title_field,
        doc_type=config.index.doc_type,
        post_process=post_process,
    )


__all__ = [
    "AutosuggestFeature",
    "create_autosuggest_feature",
]
