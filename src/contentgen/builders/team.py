from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from contentgen.assets import AssetResolver, image_candidates
from contentgen.builders.base import load_items
from contentgen.collation import polish_sort_key
from contentgen.domain.models import BuildReport, TeamMember
from contentgen.domain.schema import (
    DEFAULT_PUBLIC_PREFIX,
    META_DESCRIPTION,
    META_EMAIL,
    META_LINKS,
    META_NAME,
    META_ROLE,
    ROLE_PRIORITY,
    TEAM,
)
from contentgen.ports import ContentSource, WarningSink

PHOTO_CANDIDATES = image_candidates("photo")


def role_score(role: str, priority: Sequence[tuple[str, int]] = ROLE_PRIORITY) -> int:
    """
    Score of the first keyword (in table order) contained in the role, else 0.

    "Head of the President's Office" scores 3: "president" is listed before "head".
    """
    lowered = role.lower()
    return next((score for keyword, score in priority if keyword in lowered), 0)


def sort_team(members: Sequence[TeamMember]) -> list[TeamMember]:
    return sorted(members, key=lambda m: (-role_score(m.role), polish_sort_key(m.name)))


@dataclass(frozen=True, slots=True)
class TeamBuilder:
    prefix: str = DEFAULT_PUBLIC_PREFIX
    collection: str = TEAM

    def build(self, source: ContentSource, *, warnings: WarningSink) -> tuple[list[TeamMember], BuildReport]:
        items, report = load_items(source, self.collection, warnings=warnings)
        resolver = AssetResolver(source=source, prefix=self.prefix)

        members = [
            TeamMember(
                slug=item.slug,
                name=item.meta.get(META_NAME, item.slug),
                role=item.meta.get(META_ROLE, ""),
                email=item.meta.get(META_EMAIL, ""),
                links=item.meta.get(META_LINKS, ""),
                photo=resolver.resolve(self.collection, item.slug, PHOTO_CANDIDATES),
                bio=item.meta.get(META_DESCRIPTION, ""),
            )
            for item in items
        ]
        return sort_team(members), report
