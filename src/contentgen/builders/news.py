from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Sequence

from contentgen.assets import AssetResolver, image_candidates, public_path
from contentgen.builders.base import compare_dates_desc, load_items
from contentgen.domain.models import BuildReport, NewsRecord
from contentgen.domain.schema import (
    DEFAULT_ORGANIZATION,
    DEFAULT_PUBLIC_PREFIX,
    META_AUTHOR,
    META_DATE,
    META_DESCRIPTION,
    META_LINKS,
    META_TITLE,
    NEWS,
)
from contentgen.ports import ContentSource, WarningSink

COVER_CANDIDATES = image_candidates("cover")


def compare_news(a: NewsRecord, b: NewsRecord) -> int:
    # Only a pair where both are dated compares by date; any other pair by slug.
    if a.date and b.date:
        return compare_dates_desc(a.date, b.date)
    return (a.slug > b.slug) - (a.slug < b.slug)


def sort_news(records: Sequence[NewsRecord]) -> list[NewsRecord]:
    return sorted(records, key=cmp_to_key(compare_news))


@dataclass(frozen=True, slots=True)
class NewsBuilder:
    prefix: str = DEFAULT_PUBLIC_PREFIX
    organization: str = DEFAULT_ORGANIZATION
    collection: str = NEWS

    def build(self, source: ContentSource, *, warnings: WarningSink) -> tuple[list[NewsRecord], BuildReport]:
        items, report = load_items(source, self.collection, warnings=warnings)
        resolver = AssetResolver(source=source, prefix=self.prefix)

        records: list[NewsRecord] = []
        for item in items:
            meta = item.meta
            records.append(
                NewsRecord(
                    slug=item.slug,
                    title=meta.get(META_TITLE, item.slug),
                    date=meta.get(META_DATE),
                    author=meta.get(META_AUTHOR, self.organization),
                    links=meta.get(META_LINKS),
                    cover=resolver.resolve(self.collection, item.slug, COVER_CANDIDATES),
                    description=meta.get(META_DESCRIPTION, ""),
                    path=public_path(self.prefix, self.collection, item.slug) + "/",
                )
            )
        return sort_news(records), report
