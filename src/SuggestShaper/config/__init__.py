from __future__ import annotations

"""Public configuration API for SuggestShaper."""

from SuggestShaper.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    check_cross_domain,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from SuggestShaper.config.autosuggest import AutosuggestConfig
from SuggestShaper.config.index import IndexConfig
from SuggestShaper.config.output import OutputConfig
from SuggestShaper.config.runtime import RuntimeConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    "AutosuggestConfig",
    "IndexConfig",
    "OutputConfig",
    "RuntimeConfig",
    "check_cross_domain",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
