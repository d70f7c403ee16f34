from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from contentgen.domain.models import DirEntry


@dataclass(slots=True)
class InMemorySource:
    """
    ContentSource backed by a dict of relative file path -> text.

    Directories are implied by the file paths; `dirs` adds empty ones.
    Useful for tests and for previewing content without touching disk.
    """
    files: Mapping[str, str] = field(default_factory=dict)
    dirs: set[str] = field(default_factory=set)

    def _all_dirs(self) -> set[str]:
        out = {""}
        for p in [*self.files, *self.dirs]:
            parts = p.strip("/").split("/")
            upto = len(parts) if p in self.dirs else len(parts) - 1
            for i in range(1, upto + 1):
                out.add("/".join(parts[:i]))
        return out

    def list_dir(self, path: str) -> list[DirEntry]:
        path = path.strip("/")
        dirs = self._all_dirs()
        if path not in dirs:
            if path in self.files:
                raise NotADirectoryError(path)
            raise FileNotFoundError(path)

        prefix = f"{path}/" if path else ""
        names: dict[str, DirEntry] = {}
        for d in dirs:
            if d and d.startswith(prefix) and "/" not in d[len(prefix):]:
                names[d[len(prefix):]] = DirEntry(name=d[len(prefix):], is_dir=True)
        for f in self.files:
            if f.startswith(prefix) and "/" not in f[len(prefix):]:
                names[f[len(prefix):]] = DirEntry(name=f[len(prefix):], is_file=True)
        return [names[n] for n in sorted(names)]

    def read_text(self, path: str) -> str:
        try:
            return self.files[path.strip("/")]
        except KeyError:
            raise FileNotFoundError(path) from None

    def exists(self, path: str) -> bool:
        path = path.strip("/")
        return path in self.files or path in self._all_dirs()
