"""Tests for malakbrush.core.prompt_builder — prompt composition.

Tests cover:
- The ``prompt --enhancement`` format.
- Default style fallback for unknown and missing styles.
- Rejection of empty prompts before composition.
- The immutable GenerationRequest produced by build_request.
"""

from __future__ import annotations

import dataclasses

import pytest

from malakbrush.core.prompt_builder import build_prompt, build_request
from malakbrush.core.styles import STYLE_ENHANCEMENTS, Style
from malakbrush.core.validation import InvalidInputError

NEON = STYLE_ENHANCEMENTS[Style.NEON]


class TestBuildPrompt:
    """Test build_prompt output."""

    def test_synthwave_scenario(self):
        """A neon cat in synthwave style should compile to the documented prompt."""
        assert build_prompt("a neon cat", "synthwave") == (
            "a neon cat --Synthwave style with purple and pink sunset, retro futuristic, "
            "neon grid, ultra high resolution"
        )

    def test_unknown_style_uses_neon(self):
        """An unknown style key should compose with the neon enhancement."""
        assert build_prompt("x", "unknown-style") == f"x --{NEON}"

    def test_missing_style_uses_neon(self):
        """Omitting the style should compose with the neon enhancement."""
        assert build_prompt("x") == f"x --{NEON}"

    @pytest.mark.parametrize("style", list(Style))
    def test_every_style_appends_its_enhancement(self, style):
        """Each style should append exactly its own enhancement."""
        assert build_prompt("city", style.value) == f"city --{STYLE_ENHANCEMENTS[style]}"

    def test_prompt_text_is_not_modified(self):
        """The user's text should be forwarded verbatim."""
        assert build_prompt("  spaced out  ", "neon").startswith("  spaced out   --")

    @pytest.mark.parametrize("prompt", ["", "   ", None])
    def test_empty_prompt_rejected(self, prompt):
        """Empty prompts should raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            build_prompt(prompt, "neon")


class TestBuildRequest:
    """Test build_request output."""

    def test_request_holds_resolved_style(self):
        """The request should carry the resolved Style member."""
        request = build_request("a neon cat", "vaporwave")
        assert request.prompt == "a neon cat"
        assert request.style is Style.VAPORWAVE

    def test_request_is_immutable(self):
        """GenerationRequest should be frozen."""
        request = build_request("a neon cat", "neon")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.prompt = "something else"

    def test_composed_prompt_matches_build_prompt(self):
        """The request's composed prompt should equal build_prompt's output."""
        request = build_request("a neon cat", "anime")
        assert request.composed_prompt == build_prompt("a neon cat", "anime")
