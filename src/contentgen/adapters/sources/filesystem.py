from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from contentgen.domain.models import DirEntry


@dataclass(frozen=True, slots=True)
class FilesystemSource:
    """
    ContentSource over a directory on disk.

    - Listings are sorted by name so runs are reproducible across platforms.
    - Text is decoded as UTF-8; undecodable bytes are replaced, a leading BOM is dropped.
    """
    root: Path
    encoding: str = "utf-8"

    def _resolve(self, path: str) -> Path:
        return self.root / path if path else self.root

    def list_dir(self, path: str) -> list[DirEntry]:
        entries: list[DirEntry] = []
        for child in sorted(self._resolve(path).iterdir(), key=lambda p: p.name):
            entries.append(DirEntry(name=child.name, is_dir=child.is_dir(), is_file=child.is_file()))
        return entries

    def read_text(self, path: str) -> str:
        data = self._resolve(path).read_bytes()
        return data.decode(self.encoding, errors="replace").lstrip("\ufeff")

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()
