#!/usr/bin/env python3
import json
import logging
from pathlib import Path
import pytest

import frontdocs.core.app as app
import frontdocs.core.config as cfg
from frontdocs.cli.__main__ import main
from frontdocs.cli.listing import select_documents
from frontdocs.core.document.document import Document


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every CLI call in an empty project dir with no global config or cached context."""
    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "no-global.json", raising=False)
    monkeypatch.setattr(app, "_CTX", None)
    monkeypatch.chdir(tmp_path)
    for name in ("FRONTDOCS_ARTICLES_PATH", "FRONTDOCS_FILE_PATTERN", "FRONTDOCS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FRONTDOCS_LOG_LEVEL", "ERROR")
    logger = logging.getLogger("frontdocs")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


# --- list --- #

def test_list_prints_published_documents(tmp_path: Path, capsys):
    root = tmp_path / "posts"
    _write(root / "a.txt", "subject: Alpha\nfrom: ann\ntags: x, y\n\nbody")
    _write(root / "b.txt", "subject: Beta\n\nbody")

    rc = main(["list", "--path", str(root), "--sort", "subject"])

    out = capsys.readouterr().out
    assert rc == 0
    assert "a.txt | Alpha | ann | x, y" in out
    assert "b.txt | Beta | Unknown author | -" in out
    assert out.index("Alpha") < out.index("Beta")
    assert "2 document(s)." in out


def test_list_filters_by_tag(tmp_path: Path, capsys):
    root = tmp_path / "posts"
    _write(root / "a.txt", "subject: Alpha\ntags: x\n\n")
    _write(root / "b.txt", "subject: Beta\ntags: y\n\n")

    assert main(["list", "-p", str(root), "--tag", "y"]) == 0
    out = capsys.readouterr().out
    assert "Beta" in out and "Alpha" not in out


def test_list_uses_configured_articles_path(tmp_path: Path, capsys):
    _write(tmp_path / "frontdocs.json", json.dumps({"articles_path": str(tmp_path / "cfg-posts")}))
    _write(tmp_path / "cfg-posts" / "a.txt", "subject: From config\n\n")

    assert main(["list"]) == 0
    assert "From config" in capsys.readouterr().out


def test_list_empty_directory_is_created(tmp_path: Path, capsys):
    root = tmp_path / "fresh"
    assert main(["list", "--path", str(root)]) == 0
    assert root.is_dir()
    assert "No published documents found" in capsys.readouterr().out


# --- show --- #

def test_show_prints_yaml_metadata_and_body(tmp_path: Path, capsys):
    p = _write(tmp_path / "post.txt", "Subject: Hi\ntags: a, b\n\nHello\nworld")

    assert main(["show", str(p)]) == 0
    out = capsys.readouterr().out
    assert "subject: Hi" in out
    assert "- a\n- b" in out
    assert out.rstrip().endswith("Hello\nworld")


def test_show_missing_file_fails(tmp_path: Path, capsys):
    assert main(["show", str(tmp_path / "missing.txt")]) == 1
    assert "does not exist" in capsys.readouterr().out


def test_show_directory_fails_cleanly(tmp_path: Path, capsys):
    target = tmp_path / "somedir"
    target.mkdir()
    assert main(["show", str(target)]) == 1
    assert str(target) in capsys.readouterr().out


# --- config --- #

def test_config_show_prints_effective_json(tmp_path: Path, capsys):
    _write(tmp_path / "frontdocs.json", json.dumps({
        "articles_path": "posts",
        "metadata": {"defaults": {"From": "Me", "tags": "a, b"}, "multi_valued": ["Tags"]},
    }))

    assert main(["config", "show"]) == 0
    shown = json.loads(capsys.readouterr().out)

    assert shown["file_pattern"] == r"\.txt$"
    assert shown["logging"]["level"] == "ERROR"
    assert shown["articles_path"] == str((tmp_path / "posts").resolve())
    assert shown["metadata"]["multi_valued"] == ["tags"]
    assert shown["metadata"]["defaults"]["from"] == "Me"
    assert shown["metadata"]["defaults"]["tags"] == ["a", "b"]
    assert shown["metadata"]["defaults"]["subject"] == "Unknown subject"
    assert "From" not in shown["metadata"]["defaults"]


def test_config_path_prints_resolved_directory(tmp_path: Path, capsys):
    assert main(["config", "path"]) == 0
    assert capsys.readouterr().out.strip() == str((tmp_path / "articles").resolve())


def test_commands_that_do_not_load_leave_article_directory_alone(tmp_path: Path, capsys):
    p = _write(tmp_path / "post.txt", "subject: Hi\n\nbody")
    assert main(["config", "show"]) == 0
    assert main(["show", str(p)]) == 0
    assert not (tmp_path / "articles").exists()


def test_mixed_case_project_default_overrides_builtin(tmp_path: Path, capsys):
    _write(tmp_path / "frontdocs.json", json.dumps({"metadata": {"defaults": {"From": "Me"}}}))
    _write(tmp_path / "articles" / "a.txt", "subject: Post\n\nbody")

    assert main(["list"]) == 0
    assert "a.txt | Post | Me | -" in capsys.readouterr().out


def test_invalid_metadata_config_reports_errors(tmp_path: Path, capsys):
    _write(tmp_path / "frontdocs.json", json.dumps({"metadata": {"defaults": {"from": 1}}}))
    assert main(["list"]) == 1
    out = capsys.readouterr().out
    assert "Invalid configuration:" in out
    assert "'from' must be a string" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: frontdocs" in capsys.readouterr().out


# --- select_documents --- #

def test_select_documents_reverse_without_sort():
    docs = [Document(metadata={"subject": s}) for s in ("a", "b", "c")]
    assert [d.get("subject") for d in select_documents(docs, reverse=True)] == ["c", "b", "a"]


def test_select_documents_tag_on_single_valued_field():
    docs = [Document(metadata={"tags": "solo"}), Document(metadata={"tags": ["solo", "x"]}), Document()]
    assert len(select_documents(docs, tag="solo")) == 2
