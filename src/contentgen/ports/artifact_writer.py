from __future__ import annotations

from typing import Any, Mapping, Protocol


class ArtifactWriter(Protocol):
    """
    Persists named JSON-ready payloads (projects, news, team, stats).
    """

    def write(self, artifacts: Mapping[str, Any]) -> list[str]:
        ...
