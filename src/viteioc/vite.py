"""
The Vite asset component.

:class:`Vite` is the long lived component holding configuration, the loaded
manifest and the shared HTTP client. Each incoming request works through its
own :class:`ViteScope`, which registers assets on a view and remembers whether
the dev server answered for the rest of that request.
"""

import logging
from collections.abc import Mapping
from functools import partial
from logging import Logger
from typing import Any, Callable, Optional

import httpx

from .components.metadata import metadata
from .config.models import ViteConfig
from .dev_server import DevServerProbe
from .manifest.loader import load_manifest
from .manifest.models import AssetTag, ManifestIndex
from .manifest.resolver import ASYNC_CSS_OPTION, ManifestResolver
from .utils import join_url
from .view import AssetView, HtmlAssetView, register_tags

logger = logging.getLogger(__name__)


def normalize_key(path: str) -> str:
    """Manifest keys are relative to the project root, without a leading slash."""
    return path.lstrip("/")


class Vite:
    """Serves Vite entry points from the dev server or the build manifest."""

    def __init__(
            self,
            config: Optional[ViteConfig] = None,
            manifest: Optional[Callable[[], ManifestIndex]] = None,
            http_client: Optional[httpx.Client] = None,
            logger: Optional[Logger] = None,
            resolver: Optional[Callable[[], ManifestResolver]] = None
    ) -> None:
        self.config = config or ViteConfig()
        self.logger = logger or logging.getLogger(__name__)

        self._manifest = manifest or partial(load_manifest, self.config.manifest_path)
        self._resolver_factory = resolver or (lambda: ManifestResolver(self._manifest()))
        self._resolver: Optional[ManifestResolver] = None

        self._http_client = http_client
        self._owns_client = False

        self.__metadata__ = metadata(
            name="vite",
            version="1.0.0",
            description=self.__doc__,
            config=ViteConfig
        )

    @property
    def resolver(self) -> ManifestResolver:
        if self._resolver is None:
            self._resolver = self._resolver_factory()
        return self._resolver

    @property
    def http_client(self) -> Optional[httpx.Client]:
        return self._http_client

    async def initialize(self) -> None:
        if self.config.use_dev_server and self.config.check_dev_server and self._http_client is None:
            self.logger.debug("Opening HTTP client for dev server probing")
            self._http_client = httpx.Client(timeout=self.config.probe_timeout)
            self._owns_client = True

        if self.config.preload_manifest and not self.config.use_dev_server:
            index = self.resolver.index
            self.logger.info("Vite manifest loaded with %d entries", len(index))

    async def shutdown(self) -> None:
        if self._owns_client and self._http_client is not None:
            self.logger.debug("Closing dev server HTTP client")
            self._http_client.close()
            self._http_client = None
            self._owns_client = False

    def css_options(self, css_options: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        options = dict(css_options or {})
        if self.config.async_css:
            options.setdefault(ASYNC_CSS_OPTION, True)
        return options

    def tags(
            self,
            path: str,
            css_options: Optional[Mapping[str, Any]] = None,
            js_options: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, AssetTag]:
        """
        Resolve the tags of an entry point from the manifest.

        :raises EntryNotFound: If the entry is not part of the manifest.
        :raises ManifestUnavailable: If the manifest cannot be loaded.
        """
        return self.resolver.resolve_tags(
            normalize_key(path),
            self.css_options(css_options),
            js_options
        )

    def new_probe(self) -> DevServerProbe:
        return DevServerProbe(
            self.config.dev_base_url_internal,
            timeout=self.config.probe_timeout,
            client=self._http_client
        )

    def scope(self, view: Optional[AssetView] = None) -> "ViteScope":
        return ViteScope(self, view=view)


class ViteScope:
    """Asset registration for a single request."""

    def __init__(self, vite: Vite, view: Optional[AssetView] = None) -> None:
        self.vite = vite
        self.view = view if view is not None else HtmlAssetView()
        self.probe = vite.new_probe()

    @property
    def config(self) -> ViteConfig:
        return self.vite.config

    def is_dev_server_running(self) -> bool:
        if not self.config.use_dev_server:
            return False

        if not self.config.check_dev_server:
            return True

        return self.probe.is_running()

    def register(
            self,
            path: str,
            css_options: Optional[Mapping[str, Any]] = None,
            js_options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Register an entry point and everything it needs on the view.

        :param path: Manifest key of the entry point, a leading slash is ignored.
        :param css_options: Extra stylesheet attributes, ``async`` enables deferred loading.
        :param js_options: Extra script attributes.
        """
        path = normalize_key(path)

        if self.is_dev_server_running():
            self.register_from_dev_server(path, js_options)
            return

        self.register_from_manifest(path, css_options, js_options)

    def register_from_dev_server(self, path: str, options: Optional[Mapping[str, Any]] = None) -> None:
        path = normalize_key(path)
        url = join_url(self.config.dev_base_url, path)
        options = dict(options or {})
        options.setdefault("type", "module")

        self.vite.logger.debug("Registering %s from dev server", path)
        self.view.register_js_file(url, options, path)

    def register_from_manifest(
            self,
            path: str,
            css_options: Optional[Mapping[str, Any]] = None,
            js_options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        tags = self.vite.tags(path, css_options, js_options)
        register_tags(self.view, tags, self.config.base_url)

    def url(
            self,
            path: str,
            css_options: Optional[Mapping[str, Any]] = None,
            js_options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Return the public URL of an entry script.

        Preloads and stylesheets of the entry are still registered on the view.
        """
        path = normalize_key(path)

        if self.is_dev_server_running():
            return join_url(self.config.dev_base_url, path)

        tags = self.vite.tags(path, css_options, js_options)
        return register_tags(self.view, tags, self.config.base_url, include_primary=False)
