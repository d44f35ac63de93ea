from .versioned_content import VersionedContentStore, serialize_notes

__all__ = ["VersionedContentStore", "serialize_notes"]
