#!/usr/bin/env python3
import pytest
from pydantic import ValidationError

from frontdocs.core.collection import Collection
from frontdocs.core.filesystem import LocalFileSystem
from frontdocs.core.metadata_config import MetadataConfig


def test_builtin_defaults():
    cfg = MetadataConfig()
    assert dict(cfg.defaults) == {
        "from": "Unknown author",
        "subject": "Unknown subject",
        "status": "published",
        "tags": (),
    }
    assert cfg.multi_valued == frozenset({"tags"})


def test_keys_and_multi_valued_names_are_lower_cased():
    cfg = MetadataConfig(defaults={"Author": "a", "CATEGORIES": ["x"]}, multi_valued=["Categories"])
    assert dict(cfg.defaults) == {"author": "a", "categories": ("x",)}
    assert cfg.is_multi_valued("categories")
    assert cfg.is_multi_valued("CATEGORIES")
    assert not cfg.is_multi_valued("author")


def test_single_multi_valued_name_as_string():
    cfg = MetadataConfig(defaults={}, multi_valued="tags")
    assert cfg.multi_valued == frozenset({"tags"})


@pytest.mark.parametrize("value,expected", [
    ("a, b", ("a", "b")),
    ("", ()),
    (["  a ", "b"], ("a", "b")),
    (("x",), ("x",)),
])
def test_multi_valued_defaults_become_tuples(value, expected):
    cfg = MetadataConfig(defaults={"tags": value})
    assert cfg.defaults["tags"] == expected


def test_single_valued_list_default_is_joined():
    cfg = MetadataConfig(defaults={"subject": ["a", "b"]})
    assert cfg.defaults["subject"] == "a, b"


@pytest.mark.parametrize("defaults", [
    {"from": 3},
    {"tags": 3},
    {"tags": ["ok", 1]},
    {"": "empty key"},
    {"Tags": [], "tags": []},
    ["not", "a", "mapping"],
])
def test_invalid_defaults_rejected(defaults):
    with pytest.raises(ValidationError):
        MetadataConfig(defaults=defaults)


def test_invalid_multi_valued_name_rejected():
    with pytest.raises(ValidationError):
        MetadataConfig(multi_valued=["tags", ""])


def test_config_is_frozen():
    cfg = MetadataConfig()
    with pytest.raises(ValidationError):
        cfg.defaults = {}


def test_defaults_mapping_is_read_only():
    cfg = MetadataConfig()
    with pytest.raises(TypeError):
        cfg.defaults["from"] = "hijacked"
    with pytest.raises(TypeError):
        del cfg.defaults["subject"]
    with pytest.raises(AttributeError):
        cfg.defaults["tags"].append("leak")
    assert cfg.defaults["from"] == "Unknown author"


def test_collection_documents_cannot_change_shared_defaults(tmp_path):
    (tmp_path / "a.txt").write_text("", encoding="utf-8")
    (tmp_path / "b.txt").write_text("", encoding="utf-8")
    blog = Collection(tmp_path, filesystem=LocalFileSystem(), sort_key=lambda d: d.path.name)

    with pytest.raises(TypeError):
        blog.config.defaults["from"] = "hijacked"
    first, second = blog.load()
    first.metadata["tags"].append("only-first")

    assert second.metadata["from"] == "Unknown author"
    assert second.metadata["tags"] == []
    assert blog.config.defaults["tags"] == ()


def test_model_dump_json_uses_plain_lists():
    dumped = MetadataConfig(defaults={"tags": "a, b", "from": "me"}).model_dump(mode="json")
    assert dumped["defaults"] == {"tags": ["a", "b"], "from": "me"}
    assert dumped["multi_valued"] == ["tags"]


def test_fresh_metadata_is_a_mutable_copy():
    cfg = MetadataConfig()
    md = cfg.fresh_metadata()
    md["tags"].append("x")
    md["from"] = "someone"
    assert cfg.defaults["tags"] == ()
    assert cfg.defaults["from"] == "Unknown author"


def test_caller_mapping_is_not_aliased():
    source = {"tags": ["a"]}
    cfg = MetadataConfig(defaults=source)
    source["tags"].append("b")
    assert cfg.defaults["tags"] == ("a",)


def test_from_config_section():
    cfg = MetadataConfig.from_config({"defaults": {"from": "Me"}, "multi_valued": []})
    assert dict(cfg.defaults) == {"from": "Me"}
    assert cfg.multi_valued == frozenset()


def test_from_config_none_uses_builtins():
    assert MetadataConfig.from_config(None) == MetadataConfig()
