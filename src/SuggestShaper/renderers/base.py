"""Base classes for command output writers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Sequence


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_result(self, name: str, payload: Mapping[str, Any]) -> None:
        """Write one named command result.

        Args:
            name: Result label, e.g. the input file name.
            payload: JSON-serializable result.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name.
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_result(self, name: str, payload: Mapping[str, Any]) -> None:
        for writer in self.writers:
            writer.write_result(name, payload)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
