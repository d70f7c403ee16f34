from __future__ import annotations

from typing import Final

# Directory / file conventions of the content tree
META_FILE: Final[str] = "meta.txt"
GALLERY_DIR: Final[str] = "gallery"
STATS_FILE: Final[str] = "stats/stats.txt"

PROJECTS: Final[str] = "projects"
NEWS: Final[str] = "news"
TEAM: Final[str] = "team"
STATS: Final[str] = "stats"

# Extension preference for cover/photo images, first match wins
IMAGE_EXTENSIONS: Final[tuple[str, ...]] = ("png", "jpg", "jpeg", "webp")

# Canonical metadata keys read from meta.txt
META_TITLE: Final[str] = "title"
META_DATE: Final[str] = "date"
META_TAGS: Final[str] = "tags"
META_STATUS: Final[str] = "status"
META_LINKS: Final[str] = "links"
META_AUTHOR: Final[str] = "author"
META_NAME: Final[str] = "name"
META_ROLE: Final[str] = "role"
META_EMAIL: Final[str] = "email"
META_DESCRIPTION: Final[str] = "description"

DEFAULT_STATUS: Final[str] = "active"
DEFAULT_ORGANIZATION: Final[str] = "Skylink"
DEFAULT_PUBLIC_PREFIX: Final[str] = "/content"

# Ordered: the first keyword contained in a role decides its score
ROLE_PRIORITY: Final[tuple[tuple[str, int], ...]] = (
    ("president", 3),
    ("leader", 2),
    ("head", 1),
)
