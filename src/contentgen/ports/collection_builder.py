from __future__ import annotations

from typing import Any, Protocol, Sequence

from contentgen.domain.models import BuildReport
from contentgen.ports.content_source import ContentSource
from contentgen.ports.warning_sink import WarningSink


class CollectionBuilder(Protocol):
    """
    Turns one collection root into a sorted sequence of records.
    """

    @property
    def collection(self) -> str: ...

    def build(self, source: ContentSource, *, warnings: WarningSink) -> tuple[Sequence[Any], BuildReport]:
        ...
