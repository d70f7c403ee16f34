from __future__ import annotations

from typing import Protocol

from contentgen.domain.models import DirEntry


class ContentSource(Protocol):
    """
    Read-only view of the content tree. Paths are POSIX-style and relative
    to the content root (e.g. "projects/drone/meta.txt").

    Implementations raise FileNotFoundError for missing paths and let other
    OSErrors propagate.
    """

    def list_dir(self, path: str) -> list[DirEntry]:
        ...

    def read_text(self, path: str) -> str:
        ...

    def exists(self, path: str) -> bool:
        ...
