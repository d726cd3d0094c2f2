"""Unit tests for prompt construction."""

import pytest_check as check

from docgenie.qa.prompt import build_prompt, page_excerpts


class TestPageExcerpts:
    def test_pages_are_numbered_from_one(self) -> None:
        excerpts = page_excerpts(["alpha", "beta"])

        check.equal(excerpts, ["Page 1: alpha", "Page 2: beta"])

    def test_each_excerpt_is_truncated(self) -> None:
        """No page contributes more than the excerpt limit."""
        excerpts = page_excerpts(["a" * 5000, "b" * 1200, "c" * 10])

        check.equal(excerpts[0], "Page 1: " + "a" * 1200)
        check.equal(excerpts[1], "Page 2: " + "b" * 1200)
        check.equal(excerpts[2], "Page 3: " + "c" * 10)

    def test_custom_limit(self) -> None:
        assert page_excerpts(["abcdef"], max_chars=3) == ["Page 1: abc"]


class TestBuildPrompt:
    def test_embeds_question_and_document_name(self) -> None:
        prompt = build_prompt("Who signed it?", "contract.pdf", ["Signed by Jane"])

        check.is_in("Document: contract.pdf", prompt)
        check.is_in("Question: Who signed it?", prompt)
        check.is_in("Page 1: Signed by Jane", prompt)
        check.is_in("Not found in the document.", prompt)

    def test_excerpts_are_separated_by_blank_lines(self) -> None:
        prompt = build_prompt("q", "doc.pdf", ["one", "two"])

        assert "Page 1: one\n\nPage 2: two" in prompt

    def test_long_page_is_cut_in_prompt(self) -> None:
        prompt = build_prompt("q", "doc.pdf", ["x" * 1199 + "END" + "y" * 500])

        check.is_false("END" in prompt)
        check.is_in("x" * 1199 + "E\n", prompt)

    def test_no_pages(self) -> None:
        prompt = build_prompt("q", "empty.pdf", [])

        assert "Context (excerpts by page):\n\n" in prompt
