"""Index domain configuration: which index and fields get shaped."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SuggestShaper.config.common import (
    expect_optional_str,
    expect_str,
    get_optional_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class IndexConfig:
    """Index naming and mapping layout.

    Attributes:
        name: Index name, used to build the managed endpoint URL.
        title_field: Field receiving the ``suggest`` sub-field.
        doc_type: Optional document type level under ``mappings``.
    """

    name: str
    title_field: str
    doc_type: str | None


def load_index(raw: Mapping[str, Any]) -> IndexConfig:
    """Load index domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "index", required=False)
    doc_type = expect_optional_str(get_optional_value(section, "doc_type", None), "index.doc_type")
    return IndexConfig(
        name=expect_str(get_optional_value(section, "name", ""), "index.name").strip(),
        title_field=expect_str(get_optional_value(section, "title_field", "title"), "index.title_field").strip(),
        doc_type=(doc_type.strip() or None) if doc_type is not None else None,
    )


def check_index(config: IndexConfig) -> None:
    """Validate index domain constraints.

    Raises:
        ValueError: If values violate index constraints.
    """
    if not config.title_field:
        raise ValueError("index.title_field must not be empty")
    if "." in config.title_field:
        raise ValueError("index.title_field must be a top-level field name")
