from .errors import ManifestError, ManifestUnavailable, EntryNotFound
from .loader import load_manifest
from .models import AssetTag, ManifestEntry, ManifestIndex, TagType
from .resolver import (
    ManifestResolver,
    resolve_tags,
    import_closure,
    stylesheet_closure,
)

__all__ = [
    "ManifestError",
    "ManifestUnavailable",
    "EntryNotFound",
    "load_manifest",
    "AssetTag",
    "ManifestEntry",
    "ManifestIndex",
    "TagType",
    "ManifestResolver",
    "resolve_tags",
    "import_closure",
    "stylesheet_closure",
]
