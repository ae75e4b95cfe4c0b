"""Command implementations for the SuggestShaper CLI.

Each command reads its input, calls the autosuggest feature, and hands the
result to the OutputWriter. Parameter handling lives in ``ui``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from SuggestShaper.renderers import OutputWriter, render_status
from SuggestShaper.services.feature import AutosuggestFeature
from SuggestShaper.utils.log import log


def read_json(path: Path) -> Any:
    """Read a JSON input file."""
    return json.loads(path.read_text(encoding="utf-8"))


@dataclass(slots=True)
class MappingCommand:
    """Augment a mapping document with suggestion fields."""

    feature: AutosuggestFeature
    output_writer: OutputWriter
    input_path: Path

    def execute(self) -> None:
        doc = read_json(self.input_path)
        if not isinstance(doc, dict):
            raise TypeError(f"{self.input_path} must contain a JSON object")
        outcome = self.feature.mapping(doc)
        if not outcome.ok or outcome.value is None:
            raise outcome.error or ValueError("Mapping augmentation failed")
        log.info("Mapping augmented: %s", self.input_path)
        self.output_writer.write_result(self.input_path.name, outcome.value)


@dataclass(slots=True)
class SyncCommand:
    """Shape one document payload, or a list of them, for indexing."""

    feature: AutosuggestFeature
    output_writer: OutputWriter
    input_path: Path

    def execute(self) -> None:
        data = read_json(self.input_path)
        payloads = data if isinstance(data, list) else [data]
        for idx, payload in enumerate(payloads):
            if not isinstance(payload, dict):
                raise TypeError(f"{self.input_path}[{idx}] must be a JSON object")
            shaped = self.feature.sync_args(payload)
            log.debug("Document %s term_suggest=%s", shaped.get("ID", shaped.get("id", idx)), shaped.get("term_suggest"))
            self.output_writer.write_result(f"{self.input_path.name}[{idx}]", shaped)
        log.info("Shaped %d document(s)", len(payloads))


@dataclass(slots=True)
class EndpointCommand:
    """Resolve and print the client options for the typeahead widget."""

    feature: AutosuggestFeature
    output_writer: OutputWriter

    def execute(self) -> None:
        outcome = self.feature.client_options()
        if not outcome.ok or outcome.value is None:
            raise outcome.error or ValueError("Endpoint resolution failed")
        self.output_writer.write_result("client_options", outcome.value)


@dataclass(slots=True)
class StatusCommand:
    """Print the feature requirements status and operator messages."""

    feature: AutosuggestFeature
    output_writer: OutputWriter

    def execute(self) -> None:
        status = self.feature.requirements_status()
        for message in status.messages:
            log.info(message)
        self.output_writer.write_result("status", render_status(status))
