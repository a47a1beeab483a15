import dataclasses

import pytest

from snipkeep.application.services.candidate_builder import CandidateBuilder
from snipkeep.domain.interfaces.renderer_interface import IRenderer
from snipkeep.domain.services.language_registry import LanguageRegistry


class ExplodingRenderer(IRenderer):
    def __init__(self, header_fails_for=(), code_fails_for=()):
        self.header_fails_for = set(header_fails_for)
        self.code_fails_for = set(code_fails_for)

    def render_header(self, snippet, language):
        if snippet.index in self.header_fails_for:
            raise RuntimeError("header boom")
        return ["H", str(snippet.index)]

    def render_code(self, snippet):
        if snippet.index in self.code_fails_for:
            raise RuntimeError("code boom")
        return ["C", str(snippet.index)]


def test_one_candidate_per_snippet_with_plain_match_text(stub_renderer, two_snippets):
    builder = CandidateBuilder(stub_renderer, LanguageRegistry.builtin())
    candidates = builder.build(two_snippets)

    assert len(candidates) == len(two_snippets)
    assert [c.text for c in candidates] == [s.get_header() for s in two_snippets]
    assert all("\x1b" not in c.text for c in candidates)
    assert all("\x1b" in c.text_highlight for c in candidates)


def test_unknown_language_uses_default_profile(stub_renderer, snippet_factory):
    registry = LanguageRegistry.builtin()
    builder = CandidateBuilder(stub_renderer, registry)

    candidates = builder.build([snippet_factory(1, "hello", "brainfuck", code="++[>+<-].")])

    assert len(candidates) == 1
    assert stub_renderer.header_calls == [(1, registry.default.name)]
    assert candidates[0].snippet.language == "brainfuck"
    assert "brainfuck" in candidates[0].text


def test_many_unknown_languages_drop_nothing(stub_renderer, snippet_factory):
    snippets = [snippet_factory(i, f"d{i}", f"lang{i}") for i in range(1, 21)]
    candidates = CandidateBuilder(stub_renderer, LanguageRegistry.builtin()).build(snippets)
    assert len(candidates) == 20


def test_render_failure_degrades_to_empty_strings(snippet_factory):
    renderer = ExplodingRenderer(header_fails_for={2}, code_fails_for={1})
    builder = CandidateBuilder(renderer, LanguageRegistry.builtin())

    first, second, third = builder.build(
        [snippet_factory(i, f"d{i}", "python") for i in (1, 2, 3)]
    )

    assert first.code_highlight == "" and first.text_highlight == "H1"
    assert second.text_highlight == "" and second.code_highlight == "C2"
    assert third.text_highlight == "H3" and third.code_highlight == "C3"
    assert second.text == "#2. d2 | python"


def test_empty_code_gives_empty_preview(stub_renderer, snippet_factory):
    candidate = CandidateBuilder(stub_renderer, LanguageRegistry.builtin()).build(
        [snippet_factory(1, "empty", "python", code="")]
    )[0]
    assert candidate.code_highlight == ""


@pytest.mark.parametrize("style", ["\x1b[31m", "\x1b[48;5;17m", ""])
def test_match_text_is_independent_of_styling(style, two_snippets, renderer_factory):
    builder = CandidateBuilder(renderer_factory(style=style), LanguageRegistry.builtin())
    assert [c.text for c in builder.build(two_snippets)] == [s.get_header() for s in two_snippets]


def test_building_twice_is_idempotent_on_match_text(stub_renderer, two_snippets):
    builder = CandidateBuilder(stub_renderer, LanguageRegistry.builtin())
    first = [c.text for c in builder.build(two_snippets)]
    second = [c.text for c in builder.build(two_snippets)]
    assert first == second


def test_candidates_hold_copies(stub_renderer, two_snippets):
    candidates = CandidateBuilder(stub_renderer, LanguageRegistry.builtin()).build(two_snippets)
    two_snippets[0].description = "mutated after build"
    assert candidates[0].snippet.description == "reverse list"
    with pytest.raises(dataclasses.FrozenInstanceError):
        candidates[0].text = "x"
