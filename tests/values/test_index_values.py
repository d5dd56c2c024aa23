"""Tests for index front matter and index content values."""

from textwrap import dedent

import pytest

from docs_client.config import DocsClientConfig
from docs_client.schema import schema_field
from docs_client.schema.index_schema import IndexSchemaValue
from docs_client.values import DirectoryMetaValue, IndexContentValue, IndexMetaValue

INDEX_TEXT = dedent("""\
    ---
    icon: 🧭
    layout: wide
    private: true
    schema:
      author:
        type: relation
        path: ../authors
    ---

    # Guide

    How to use the project.
    """)


@pytest.fixture
def config():
    return DocsClientConfig(default_index_icon="📁", index_meta_includes=["layout", "icon"])


class TestIndexMetaValue:
    def test_icon_schema_and_whitelisted_extras(self, config):
        meta = IndexMetaValue.from_yaml_text("icon: 🧭\nlayout: wide\nprivate: true", config)
        assert meta.icon == "🧭"
        assert meta.extras == {"layout": "wide"}
        assert not meta.has_schema

    def test_default_icon(self, config):
        assert IndexMetaValue.from_record({}, config).icon == "📁"
        assert IndexMetaValue.from_record({"icon": 5}, config).icon == "📁"

    def test_missing_schema_is_derived_from_custom_schema(self, config):
        meta = IndexMetaValue.from_record({}, config, {"tags": schema_field("multi-text")})
        assert meta.index_schema.field("tags").type.value == "multi-text"

    def test_serialization_order(self, config):
        meta = IndexMetaValue.from_record(
            {"layout": "wide", "schema": {"t": {"type": "text"}}, "icon": "x"}, config
        )
        assert list(meta.to_dict()) == ["icon", "schema", "layout"]

    def test_with_schema_accepts_mapping(self, config):
        meta = IndexMetaValue.empty(config).with_schema({"n": {"type": "number"}})
        assert meta.has_schema
        assert meta.index_schema.field("n").required is False

    def test_with_extra_rejects_reserved_keys(self, config):
        with pytest.raises(ValueError):
            IndexMetaValue.empty(config).with_extra("schema", {})


class TestIndexContentValue:
    def test_from_markdown(self, config):
        content = IndexContentValue.from_markdown(INDEX_TEXT, config)
        assert content.title == "Guide"
        assert content.description == "How to use the project."
        assert content.meta.icon == "🧭"
        assert content.meta.index_schema.relation("author").path == "../authors"

    def test_to_text_drops_unlisted_keys(self, config):
        text = IndexContentValue.from_markdown(INDEX_TEXT, config).to_text()
        assert "private" not in text
        assert text.startswith("---\nicon: 🧭\nschema:\n  author:\n")
        assert text.endswith("---\n\n# Guide\n\nHow to use the project.\n")
        assert text.index("schema:") < text.index("layout: wide")

    def test_to_text_round_trip(self, config):
        content = IndexContentValue.from_markdown(INDEX_TEXT, config)
        assert IndexContentValue.from_markdown(content.to_text(), config) == content

    def test_empty(self, config):
        content = IndexContentValue.empty("docs", config)
        assert content.title == "docs"
        assert content.body == "# docs"
        assert content.meta.icon == "📁"
        assert len(content.meta.index_schema) == 0

    def test_directory_meta_overrides_icon_and_schema(self, config):
        directory_meta = DirectoryMetaValue.from_json('{"icon": "⭐", "schema": {"n": {"type": "number"}}}')
        content = IndexContentValue.from_markdown(INDEX_TEXT, config, directory_meta=directory_meta)
        assert content.meta.icon == "⭐"
        assert content.meta.index_schema.field_names == ["n"]
        assert content.title == "Guide"

    def test_updates(self, config):
        content = IndexContentValue.from_markdown(INDEX_TEXT, config)
        assert content.with_title("Handbook").title == "Handbook"
        assert content.with_description("Short.").description == "Short."
        updated = content.with_meta(lambda meta: meta.with_icon("🔥"))
        assert updated.meta.icon == "🔥"
        assert content.meta.icon == "🧭"
        assert content.with_meta(updated.meta).meta.icon == "🔥"


class TestDirectoryMetaValue:
    def test_invalid_json_is_ignored(self):
        assert DirectoryMetaValue.from_json("{not json") is None
        assert DirectoryMetaValue.from_json("[1, 2]") is None
        assert DirectoryMetaValue.from_json('{"icon": 3}') is None

    def test_partial(self):
        meta = DirectoryMetaValue.from_json('{"icon": "⭐"}')
        assert meta.icon == "⭐"
        assert meta.index_schema() is None

    def test_to_json(self):
        meta = DirectoryMetaValue(icon="⭐", schema_={"n": {"type": "number"}})
        assert DirectoryMetaValue.from_json(meta.to_json()) == meta
        assert isinstance(meta.index_schema(), IndexSchemaValue)
