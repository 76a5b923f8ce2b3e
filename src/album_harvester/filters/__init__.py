from .deduplication import Deduplicator
from .release_filter import ReleaseFilter

__all__ = ["Deduplicator", "ReleaseFilter"]
