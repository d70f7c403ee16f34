from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Union

from contentgen.domain.schema import DEFAULT_STATUS

StatValue = Union[int, float, str]
StatsMap = dict[str, StatValue]


# -------------------------
# Directory listing
# -------------------------

@dataclass(frozen=True, slots=True)
class DirEntry:
    """
    One entry of a directory listing as seen by a ContentSource.
    """
    name: str
    is_dir: bool = False
    is_file: bool = False


# -------------------------
# Content records
# -------------------------

@dataclass(frozen=True, slots=True)
class ProjectRecord:
    """
    A project folder under projects/<slug>/.

    Optional fields are None when absent and are written as JSON null.
    """
    slug: str
    title: str
    path: str
    date: Optional[str] = None
    tags: Sequence[str] = field(default_factory=tuple)
    status: str = DEFAULT_STATUS
    links: Optional[str] = None
    cover: Optional[str] = None
    gallery: Sequence[str] = field(default_factory=tuple)
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "date": self.date,
            "tags": list(self.tags),
            "status": self.status,
            "links": self.links,
            "cover": self.cover,
            "gallery": list(self.gallery),
            "description": self.description,
            "path": self.path,
        }


@dataclass(frozen=True, slots=True)
class NewsRecord:
    """
    A news item under news/<slug>/.
    """
    slug: str
    title: str
    author: str
    path: str
    date: Optional[str] = None
    links: Optional[str] = None
    cover: Optional[str] = None
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "title": self.title,
            "date": self.date,
            "author": self.author,
            "links": self.links,
            "cover": self.cover,
            "description": self.description,
            "path": self.path,
        }


@dataclass(frozen=True, slots=True)
class TeamMember:
    """
    A team member under team/<slug>/. Text fields default to "" rather than null.
    """
    slug: str
    name: str
    role: str = ""
    email: str = ""
    links: str = ""
    photo: Optional[str] = None
    bio: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "name": self.name,
            "role": self.role,
            "email": self.email,
            "links": self.links,
            "photo": self.photo,
            "bio": self.bio,
        }


# -------------------------
# Run bookkeeping
# -------------------------

@dataclass(frozen=True, slots=True)
class BuildReport:
    """
    Per-collection counters, logged at the end of a run.
    """
    collection: str
    scanned: int = 0
    loaded: int = 0
    skipped_missing_meta: int = 0
    skipped_unreadable: int = 0
    skipped_not_directory: int = 0


@dataclass(frozen=True, slots=True)
class ContentBundle:
    """
    The four artifacts produced by a single run.
    """
    projects: Sequence[ProjectRecord] = field(default_factory=tuple)
    news: Sequence[NewsRecord] = field(default_factory=tuple)
    team: Sequence[TeamMember] = field(default_factory=tuple)
    stats: StatsMap = field(default_factory=dict)
    reports: Sequence[BuildReport] = field(default_factory=tuple)

    def artifacts(self) -> dict[str, Any]:
        """
        Map artifact name -> payload; records are turned into dicts by the writer.
        """
        return {
            "projects": list(self.projects),
            "news": list(self.news),
            "team": list(self.team),
            "stats": dict(self.stats),
        }
