from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Optional

import pydantic


class TagType(Enum):
    SCRIPT = "js"
    PRELOAD = "link"
    STYLESHEET = "css"


@dataclass(frozen=True)
class AssetTag:
    """A single asset tag produced by the resolver.

    ``url`` is relative to the build output directory; consumers rebase it
    onto their public base URL.
    """
    type: TagType
    url: str
    attributes: dict[str, Any] = field(default_factory=dict)


class ManifestEntry(pydantic.BaseModel):
    """One entry of a Vite ``manifest.json``.

    Only the fields needed to build tags are modelled, the remaining
    bundler fields (``src``, ``isEntry``, ``dynamicImports``...) are ignored.
    """

    file: Optional[str] = None
    integrity: Optional[str] = None
    imports: list[str] = pydantic.Field(default_factory=list)
    css: list[str] = pydantic.Field(default_factory=list)

    model_config = pydantic.ConfigDict(extra="ignore", frozen=True)

    @pydantic.field_validator("imports", "css", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v


class ManifestIndex(Mapping):
    """Read-only mapping of manifest key to :class:`ManifestEntry`."""

    def __init__(self, entries: Optional[Mapping[str, ManifestEntry]] = None) -> None:
        self._entries = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ManifestIndex":
        """
        Build an index from decoded manifest JSON.

        :param data: Mapping of manifest key to raw entry dictionaries.
        :return: The validated index.
        :raises pydantic.ValidationError: If an entry does not match the schema.
        """
        return cls({
            key: ManifestEntry.model_validate(value)
            for key, value in data.items()
        })

    def __getitem__(self, key: str) -> ManifestEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ManifestIndex({len(self)} entries)"
