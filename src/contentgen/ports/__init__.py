from .artifact_writer import ArtifactWriter
from .collection_builder import CollectionBuilder
from .content_source import ContentSource
from .warning_sink import WarningSink

__all__ = [
    "ArtifactWriter",
    "CollectionBuilder",
    "ContentSource",
    "WarningSink",
]
