import logging
from collections.abc import Mapping
from typing import Any, Iterator, Optional

from .errors import EntryNotFound
from .models import AssetTag, ManifestEntry, ManifestIndex, TagType

logger = logging.getLogger(__name__)

ASYNC_CSS_OPTION = "async"
ASYNC_CSS_DEFAULTS = {
    "media": "print",
    "onload": "this.media='all'",
}


def _walk(index: ManifestIndex, root: str) -> Iterator[tuple[str, Optional[ManifestEntry]]]:
    """
    Depth-first, pre-order walk of the import graph starting at ``root``.

    Yields ``(key, entry)`` for the root and for every key reachable through
    ``imports``, each key once. ``entry`` is None for keys missing from the index.
    """
    visited = {root}

    entry = index.get(root)
    yield root, entry
    stack = [iter(entry.imports if entry is not None else ())]

    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue
        if child in visited:
            continue
        visited.add(child)

        entry = index.get(child)
        yield child, entry
        if entry is not None:
            stack.append(iter(entry.imports))


def import_closure(index: ManifestIndex, root: str) -> dict[str, ManifestEntry]:
    """
    Collect the entries transitively imported by ``root``.

    :param index: The manifest index.
    :param root: Manifest key to start from. It is not part of the result.
    :return: Ordered mapping of manifest key to entry, for entries with an output file.
    """
    return {
        key: entry
        for key, entry in _walk(index, root)
        if key != root and entry is not None and entry.file
    }


def stylesheet_closure(index: ManifestIndex, root: str) -> list[str]:
    """
    Collect the stylesheet output paths of ``root`` and everything it imports.

    An entry's own ``css`` comes before the stylesheets of its imports.

    :param index: The manifest index.
    :param root: Manifest key to start from.
    :return: Distinct stylesheet paths in discovery order.
    """
    css_files: dict[str, None] = {}
    for _, entry in _walk(index, root):
        if entry is None:
            continue
        for file in entry.css:
            css_files.setdefault(file, None)
    return list(css_files)


def _css_attributes(css_options: Mapping[str, Any]) -> dict[str, Any]:
    options = dict(css_options)
    if options.pop(ASYNC_CSS_OPTION, False):
        for name, value in ASYNC_CSS_DEFAULTS.items():
            options.setdefault(name, value)
    return {"rel": "stylesheet", **options}


def resolve_tags(
        index: ManifestIndex,
        requested_key: str,
        css_options: Optional[Mapping[str, Any]] = None,
        js_options: Optional[Mapping[str, Any]] = None,
) -> dict[str, AssetTag]:
    """
    Compute the tags needed to load ``requested_key`` in a browser.

    The result starts with the entry script, followed by modulepreload links for
    every imported chunk, followed by the stylesheets of the whole import graph.
    Script and preload tags are keyed by manifest key, stylesheets by output path.

    :param index: The manifest index.
    :param requested_key: Manifest key of the entry point.
    :param css_options: Extra stylesheet attributes. ``async`` enables deferred loading.
    :param js_options: Extra attributes for the script and preload tags.
    :return: Ordered mapping of dedup key to tag.
    :raises EntryNotFound: If the key is missing or has no output file.
    """
    css_options = css_options or {}
    js_options = js_options or {}

    entry = index.get(requested_key)
    if entry is None or not entry.file:
        logger.debug("Manifest entry not found: %s", requested_key)
        raise EntryNotFound(requested_key)

    tags = {
        requested_key: AssetTag(
            type=TagType.SCRIPT,
            url=entry.file,
            attributes={
                "crossorigin": True,
                "integrity": entry.integrity,
                "type": "module",
                **js_options,
            },
        )
    }

    for key, imported in import_closure(index, requested_key).items():
        tags.setdefault(key, AssetTag(
            type=TagType.PRELOAD,
            url=imported.file,
            attributes={
                "crossorigin": True,
                "integrity": imported.integrity,
                "rel": "modulepreload",
                **js_options,
            },
        ))

    css_attributes = _css_attributes(css_options)
    for file in stylesheet_closure(index, requested_key):
        tags.setdefault(file, AssetTag(
            type=TagType.STYLESHEET,
            url=file,
            attributes=dict(css_attributes),
        ))

    logger.debug("Resolved %d tags for %s", len(tags), requested_key)
    return tags


class ManifestResolver:
    """Resolves asset tags against one loaded :class:`ManifestIndex`."""

    def __init__(self, index: ManifestIndex) -> None:
        self._index = index

    @property
    def index(self) -> ManifestIndex:
        return self._index

    def resolve_tags(
            self,
            requested_key: str,
            css_options: Optional[Mapping[str, Any]] = None,
            js_options: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, AssetTag]:
        return resolve_tags(self._index, requested_key, css_options, js_options)
