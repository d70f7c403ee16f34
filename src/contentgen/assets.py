from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from contentgen.domain.schema import DEFAULT_PUBLIC_PREFIX, IMAGE_EXTENSIONS
from contentgen.ports import ContentSource


def image_candidates(stem: str, extensions: Sequence[str] = IMAGE_EXTENSIONS) -> tuple[str, ...]:
    """
    image_candidates("cover") -> ("cover.png", "cover.jpg", "cover.jpeg", "cover.webp")
    """
    return tuple(f"{stem}.{ext}" for ext in extensions)


def public_path(prefix: str, *parts: str) -> str:
    """
    Join a public URL path under prefix, e.g. ("/content", "news", "launch") -> "/content/news/launch".
    """
    base = prefix.rstrip("/")
    return "/".join([base, *(p.strip("/") for p in parts)])


@dataclass(frozen=True, slots=True)
class AssetResolver:
    """
    Picks the first existing file among ordered candidates.

    Candidate order is the format preference; the result is the public path
    the front-end serves the file from, not the filesystem path.
    """
    source: ContentSource
    prefix: str = DEFAULT_PUBLIC_PREFIX

    def resolve(self, collection: str, slug: str, candidates: Sequence[str]) -> Optional[str]:
        for name in candidates:
            if self.source.exists(f"{collection}/{slug}/{name}"):
                return public_path(self.prefix, collection, slug, name)
        return None
