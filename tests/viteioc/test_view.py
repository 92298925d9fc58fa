from unittest.mock import MagicMock, call

import pytest

from viteioc.manifest.models import AssetTag, ManifestIndex, TagType
from viteioc.manifest.resolver import resolve_tags
from viteioc.view import AssetView, HtmlAssetView, register_tags, render_attributes


class TestRenderAttributes:
    """Tests for render_attributes function."""

    def test_string_values(self):
        assert render_attributes({"rel": "stylesheet", "href": "/a.css"}) == ' rel="stylesheet" href="/a.css"'

    def test_boolean_values(self):
        assert render_attributes({"crossorigin": True, "defer": False}) == " crossorigin"

    def test_none_omitted(self):
        assert render_attributes({"integrity": None}) == ""

    def test_escapes_values(self):
        assert render_attributes({"onload": "this.media='all'"}) == ' onload="this.media=&#x27;all&#x27;"'


class TestHtmlAssetView:
    """Tests for HtmlAssetView."""

    def test_is_asset_view(self):
        assert isinstance(HtmlAssetView(), AssetView)

    def test_register_js_file(self):
        view = HtmlAssetView()
        view.register_js_file("/dist/main.js", {"type": "module"})
        assert view.render_body() == '<script src="/dist/main.js" type="module"></script>'

    def test_register_css_file(self):
        view = HtmlAssetView()
        view.register_css_file("/dist/main.css", {"rel": "stylesheet"})
        assert view.render_head() == '<link href="/dist/main.css" rel="stylesheet">'

    def test_register_link_tag(self):
        view = HtmlAssetView()
        view.register_link_tag({"href": "/dist/dep.js", "rel": "modulepreload"})
        assert view.render_head() == '<link href="/dist/dep.js" rel="modulepreload">'

    def test_first_registration_wins(self):
        view = HtmlAssetView()
        view.register_js_file("/dist/a.js", {}, key="entry")
        view.register_js_file("/dist/b.js", {}, key="entry")
        assert view.render_body() == '<script src="/dist/a.js"></script>'

    def test_keeps_registration_order(self):
        view = HtmlAssetView()
        view.register_link_tag({"href": "/b.js", "rel": "modulepreload"})
        view.register_css_file("/a.css", {"rel": "stylesheet"})
        assert view.render_head().splitlines() == [
            '<link href="/b.js" rel="modulepreload">',
            '<link href="/a.css" rel="stylesheet">',
        ]


class TestRegisterTags:
    """Tests for register_tags function."""

    @pytest.fixture
    def tags(self, manifest_data):
        return resolve_tags(ManifestIndex.from_dict(manifest_data), "src/main.js")

    def test_dispatches_by_type(self, tags):
        view = MagicMock()

        register_tags(view, tags, "/dist/")

        view.register_js_file.assert_called_once_with(
            "/dist/assets/main.abc.js",
            tags["src/main.js"].attributes,
            "src/main.js"
        )
        assert view.register_link_tag.call_args_list == [
            call({"href": "/dist/assets/shared.123.js", **tags["_shared.js"].attributes}, "_shared.js"),
            call({"href": "/dist/assets/dep.def.js", **tags["src/dep.js"].attributes}, "src/dep.js"),
        ]
        assert [c.args[0] for c in view.register_css_file.call_args_list] == [
            "/dist/assets/main.css",
            "/dist/assets/shared.css",
            "/dist/assets/dep.css",
        ]

    def test_returns_primary_url(self, tags):
        assert register_tags(HtmlAssetView(), tags, "/dist") == "/dist/assets/main.abc.js"

    def test_without_primary(self, tags):
        view = MagicMock()

        url = register_tags(view, tags, "https://cdn.example.com/build/", include_primary=False)

        assert url == "https://cdn.example.com/build/assets/main.abc.js"
        view.register_js_file.assert_not_called()
        assert view.register_link_tag.call_count == 2
        assert view.register_css_file.call_count == 3

    def test_renders_html(self, tags):
        view = HtmlAssetView()
        register_tags(view, tags, "/dist/")

        assert view.render_body() == (
            '<script src="/dist/assets/main.abc.js" crossorigin '
            'integrity="sha384-main" type="module"></script>'
        )
        assert view.render_head().splitlines()[0] == (
            '<link href="/dist/assets/shared.123.js" crossorigin rel="modulepreload">'
        )

    def test_empty_tags(self):
        assert register_tags(HtmlAssetView(), {}, "/dist/") is None

    def test_script_only_collection(self):
        view = HtmlAssetView()
        tags = {"a": AssetTag(type=TagType.SCRIPT, url="a.js", attributes={"type": "module"})}

        register_tags(view, tags, "/")

        assert view.render_body() == '<script src="/a.js" type="module"></script>'
