from __future__ import annotations

from typing import Protocol


class WarningSink(Protocol):
    """
    Receives non-fatal, per-item problems (e.g. an item folder without meta.txt).
    """

    def warn(self, message: str) -> None:
        ...
