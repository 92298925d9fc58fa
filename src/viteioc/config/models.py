from pathlib import Path
from typing import Optional, Callable

import pydantic
from pydantic_settings import PydanticBaseSettingsSource, BaseSettings

from .base import Settings
from ..utils import expanded_path

_sources: list[
    Callable[
        [type[BaseSettings]],
        PydanticBaseSettingsSource]
] = []


class ViteConfig(pydantic.BaseModel):
    """Settings of the Vite asset component."""
    __prefix__ = "vite"

    base_url: str = pydantic.Field(
        default="/dist/",
        description="Public URL of the build output when the dev server is not used"
    )
    dev_base_url: str = pydantic.Field(
        default="http://localhost:5173/",
        description="Public URL of the dev server"
    )
    dev_base_url_internal: Optional[str] = pydantic.Field(
        default=None,
        description="URL of the dev server as seen from this process; defaults to dev_base_url"
    )
    manifest_path: Path = pydantic.Field(
        default=Path("dist/.vite/manifest.json"),
        description="File system path to the Vite-built manifest.json"
    )
    use_dev_server: bool = pydantic.Field(
        default=False,
        description="Whether the dev server should be used at all"
    )
    check_dev_server: bool = pydantic.Field(
        default=True,
        description="Whether to ping the dev server before using it"
    )
    async_css: bool = pydantic.Field(
        default=False,
        description="Load stylesheets without blocking rendering unless the caller says otherwise"
    )
    preload_manifest: bool = pydantic.Field(
        default=False,
        description="Load the manifest when the component initializes instead of on first use"
    )
    probe_timeout: float = pydantic.Field(
        default=1.0,
        gt=0,
        description="Timeout in seconds of the dev server liveness request"
    )

    @pydantic.field_validator("manifest_path", mode="before")
    @classmethod
    def validate_manifest_path(cls, v):
        return expanded_path(v)

    @pydantic.model_validator(mode="after")
    def default_internal_url(self) -> "ViteConfig":
        if self.dev_base_url_internal is None:
            self.dev_base_url_internal = self.dev_base_url
        return self


class ViteAppConfig(Settings):
    config_path: Path = pydantic.Field(
        default=Path("vite.yaml"),
        description="Path to the YAML configuration file",
        exclude=True
    )

    context: Optional[str] = pydantic.Field(
        default=None,
        description="Environment context (loads .{context}.env file)",
        exclude=True
    )

    @classmethod
    def add_sources(
            cls,
            *sources: Callable[[type[BaseSettings]], PydanticBaseSettingsSource],
            index: int = -1,
    ) -> None:
        # if index is -1, append to the end
        if index == -1:
            _sources.extend(sources)
        else:
            _sources[index:index] = sources

    @classmethod
    def clear_sources(cls) -> None:
        _sources.clear()

    @classmethod
    def settings_customise_sources(
            cls,
            settings_cls,
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings
        ) + tuple(map(lambda s: s(settings_cls), _sources))

    @pydantic.field_validator("config_path", mode="before")
    @classmethod
    def validate_config_path(cls, v):
        return expanded_path(v)
