"""JSON renderers.

Serializes resolved endpoints into the client options object consumed by the
typeahead widget, and provides the JsonFileWriter for command output.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from SuggestShaper.core.models import ResolvedEndpoint
from SuggestShaper.endpoint.status import RequirementsStatus
from SuggestShaper.renderers.base import OutputWriter
from SuggestShaper.utils.log import log


def render_client_options(resolved: ResolvedEndpoint) -> dict[str, Any]:
    """Render the flat client options object.

    Args:
        resolved: Resolved endpoint.

    Returns:
        Dict with exactly ``endpointUrl``, ``postType``, ``postStatus``,
        ``searchFields`` and ``action``.
    """
    return {
        "endpointUrl": resolved.url,
        "postType": list(resolved.post_types),
        "postStatus": resolved.post_status,
        "searchFields": list(resolved.search_fields),
        "action": resolved.selection_action.value,
    }


def render_status(status: RequirementsStatus) -> dict[str, Any]:
    """Render a requirements status."""
    return {"code": status.code, "messages": list(status.messages)}


def dumps(payload: Any) -> str:
    """Serialize a payload the way every writer does."""
    return json.dumps(payload, ensure_ascii=False, indent=2)


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to a JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []
        self.last_path: Path | None = None

    def write_result(self, name: str, payload: Mapping[str, Any]) -> None:
        self.all_results.append({"name": name, "result": dict(payload)})

    def finalize(self, action: str) -> None:
        """Write accumulated results to ``<base_dir>/json/<action>_<ts>.json``."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(dumps(self.all_results), encoding="utf-8")
        self.last_path = output_path
        log.info("JSON saved to %s", output_path)
