"""Tests for sidedoc.assembler."""

from __future__ import annotations

import pytest

from sidedoc.assembler import DocumentAssembler
from sidedoc.models import Fragment


def _highlighted(docs: str, code: str = "x") -> Fragment:
    return Fragment(docs_text=docs, code_text=code, code_html=f"<pre>{code}</pre>")


def test_assemble_numbers_fragments_from_one() -> None:
    fragments = [_highlighted("# Title\n", "a"), _highlighted("Some *prose*.\n", "b")]

    document = DocumentAssembler().assemble("src/pkg/main.go", fragments, ["src/pkg/main.go"])

    assert [fragment.index for fragment in document.fragments] == [1, 2]
    assert document.fragments[0].docs_html == "<h1>Title</h1>"
    assert document.fragments[1].docs_html == "<p>Some <em>prose</em>.</p>"
    assert [fragment.code_html for fragment in document.fragments] == ["<pre>a</pre>", "<pre>b</pre>"]


def test_assemble_sets_title_and_source_listing() -> None:
    sources = ["a.go", "lib/b.go"]

    document = DocumentAssembler().assemble("lib/b.go", [_highlighted("")], sources)

    assert document.title == "b.go"
    assert document.source == "lib/b.go"
    assert list(document.sources) == sources
    assert document.multiple is True


def test_single_source_is_not_multiple() -> None:
    document = DocumentAssembler().assemble("a.go", [_highlighted("")], ["a.go"])

    assert document.multiple is False


def test_empty_documentation_renders_empty() -> None:
    document = DocumentAssembler().assemble("a.go", [_highlighted("")], ["a.go"])

    assert document.fragments[0].docs_html == ""


def test_each_fragment_renders_independently() -> None:
    fragments = [
        _highlighted("Intro paragraph\n"),
        _highlighted("* first\n* second\n"),
        _highlighted("## Later heading\n"),
    ]

    document = DocumentAssembler().assemble("a.go", fragments, ["a.go"])

    assert "<ul>" in document.fragments[1].docs_html
    assert document.fragments[2].docs_html == "<h2>Later heading</h2>"


def test_fenced_code_extension_enabled_by_default() -> None:
    document = DocumentAssembler().assemble(
        "a.go", [_highlighted("```\nraw <code>\n```\n")], ["a.go"]
    )

    assert "<pre><code>" in document.fragments[0].docs_html
    assert "&lt;code&gt;" in document.fragments[0].docs_html


def test_custom_extensions_replace_defaults() -> None:
    assembler = DocumentAssembler(extensions=[])

    assert assembler.extensions == []
    assert assembler.render_docs("\"quoted\"\n") == "<p>\"quoted\"</p>"


def test_unhighlighted_fragment_is_rejected() -> None:
    with pytest.raises(ValueError):
        DocumentAssembler().assemble("a.go", [Fragment(docs_text="", code_text="x\n")], ["a.go"])
