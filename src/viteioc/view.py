"""
Tag consumers.

A view receives the tags produced by the manifest resolver and turns them into
markup. :class:`HtmlAssetView` is a minimal in-memory implementation; web
framework integrations provide their own :class:`AssetView`.
"""

import html
import logging
from collections.abc import Mapping
from typing import Any, Optional, Protocol, runtime_checkable

from .manifest.models import AssetTag, TagType
from .utils import join_url

logger = logging.getLogger(__name__)


@runtime_checkable
class AssetView(Protocol):
    """Protocol for objects able to register asset tags for a page."""

    def register_js_file(self, url: str, options: Mapping[str, Any], key: Optional[str] = None) -> None:
        ...

    def register_css_file(self, url: str, options: Mapping[str, Any], key: Optional[str] = None) -> None:
        ...

    def register_link_tag(self, options: Mapping[str, Any], key: Optional[str] = None) -> None:
        ...


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """
    Render tag attributes.

    ``None`` and ``False`` values are omitted, ``True`` renders a bare attribute.
    """
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(html.escape(name))
        else:
            parts.append(f'{html.escape(name)}="{html.escape(str(value), quote=True)}"')
    return "".join(f" {part}" for part in parts)


class HtmlAssetView:
    """
    Collects registered assets and renders them as HTML.

    Links and stylesheets go to the head, scripts to the end of the body.
    Registering the same key twice keeps the first registration.
    """

    def __init__(self) -> None:
        self.head: dict[str, str] = {}
        self.body: dict[str, str] = {}

    def register_js_file(self, url: str, options: Mapping[str, Any], key: Optional[str] = None) -> None:
        self.body.setdefault(
            key or url,
            f"<script{render_attributes({'src': url, **options})}></script>"
        )

    def register_css_file(self, url: str, options: Mapping[str, Any], key: Optional[str] = None) -> None:
        self.head.setdefault(
            key or url,
            f"<link{render_attributes({'href': url, **options})}>"
        )

    def register_link_tag(self, options: Mapping[str, Any], key: Optional[str] = None) -> None:
        self.head.setdefault(
            key or options.get("href") or str(len(self.head)),
            f"<link{render_attributes(options)}>"
        )

    def render_head(self) -> str:
        return "\n".join(self.head.values())

    def render_body(self) -> str:
        return "\n".join(self.body.values())


def register_tags(
        view: AssetView,
        tags: Mapping[str, AssetTag],
        base_url: str,
        include_primary: bool = True
) -> Optional[str]:
    """
    Register resolved tags on a view, in order.

    :param view: The view receiving the tags.
    :param tags: Ordered tags as returned by the resolver.
    :param base_url: Public URL the build output is served from.
    :param include_primary: When False the entry script is not registered; its
        URL is only returned.
    :return: The public URL of the entry script, if any.
    """
    primary_url = None

    for key, tag in tags.items():
        url = join_url(base_url, tag.url)

        if tag.type is TagType.SCRIPT and primary_url is None:
            primary_url = url
            if not include_primary:
                continue

        if tag.type is TagType.SCRIPT:
            view.register_js_file(url, tag.attributes, key)
        elif tag.type is TagType.STYLESHEET:
            view.register_css_file(url, tag.attributes, key)
        elif tag.type is TagType.PRELOAD:
            view.register_link_tag({"href": url, **tag.attributes}, key)

    logger.debug("Registered %d tags on %s", len(tags), type(view).__name__)
    return primary_url
