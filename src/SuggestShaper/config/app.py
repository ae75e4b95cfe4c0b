from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from SuggestShaper.config.autosuggest import AutosuggestConfig, check_autosuggest, load_autosuggest
from SuggestShaper.config.index import IndexConfig, check_index, load_index
from SuggestShaper.config.output import OutputConfig, check_output, load_output
from SuggestShaper.config.runtime import RuntimeConfig, check_runtime, load_runtime
from SuggestShaper.schema.augment import SUGGEST_SUBFIELD

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    index: IndexConfig
    autosuggest: AutosuggestConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    index = load_index(raw)
    autosuggest = load_autosuggest(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_index(index)
    check_autosuggest(autosuggest)
    check_output(output)

    config = AppConfig(
        runtime=runtime,
        index=index,
        autosuggest=autosuggest,
        output=output,
    )
    check_cross_domain(config)
    return config


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_config_with_defaults(config_path: Path, default_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load config by merging defaults and optional override."""
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    merged = merge_config_dicts(base, override)
    return parse_config_dict(merged)


def check_cross_domain(config: AppConfig) -> None:
    """Validate cross-domain constraints."""
    for name in config.autosuggest.search_fields or ():
        parent, _, sub = name.partition(".")
        if sub == SUGGEST_SUBFIELD and parent != config.index.title_field:
            raise ValueError(
                f"autosuggest.search_fields references {name} but index.title_field is {config.index.title_field}"
            )


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
