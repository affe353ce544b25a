"""Tests for malakbrush.core.styles — style table and fallback policy.

Tests cover:
- Every style has an enhancement and a label.
- Exact lookups for known keys.
- Silent fallback to the default style for unknown, empty and missing keys.
- Read-only enhancement table.
"""

from __future__ import annotations

import pytest

from malakbrush.core.styles import (
    DEFAULT_STYLE,
    STYLE_ENHANCEMENTS,
    STYLE_LABELS,
    Style,
    get_enhancement,
    list_styles,
    resolve_style,
)


class TestStyleTable:
    """Verify the fixed style enhancement table."""

    def test_default_style_is_neon(self):
        """The documented default style is neon."""
        assert DEFAULT_STYLE is Style.NEON

    def test_every_style_has_enhancement(self):
        """Each Style member should map to non-empty enhancement text."""
        for style in Style:
            assert STYLE_ENHANCEMENTS[style]

    def test_every_style_has_label(self):
        """Each Style member should have a display label."""
        assert set(STYLE_LABELS) == set(Style)

    def test_synthwave_enhancement_text(self):
        """The synthwave enhancement should match the canned description."""
        assert STYLE_ENHANCEMENTS[Style.SYNTHWAVE] == (
            "Synthwave style with purple and pink sunset, retro futuristic, "
            "neon grid, ultra high resolution"
        )

    def test_table_is_read_only(self):
        """The enhancement table must not be mutable at runtime."""
        with pytest.raises(TypeError):
            STYLE_ENHANCEMENTS[Style.NEON] = "something else"


class TestResolveStyle:
    """Verify style key resolution."""

    @pytest.mark.parametrize("key", ["neon", "anime", "cyberpunk", "synthwave", "vaporwave"])
    def test_known_keys_resolve(self, key):
        """Known keys should resolve to their own Style."""
        assert resolve_style(key).value == key

    @pytest.mark.parametrize("key", ["unknown-style", "NEON", " neon", "watercolour"])
    def test_unknown_keys_fall_back_to_default(self, key):
        """Unrecognised keys should fall back to the default, not raise."""
        assert resolve_style(key) is DEFAULT_STYLE

    @pytest.mark.parametrize("key", [None, ""])
    def test_missing_keys_fall_back_to_default(self, key):
        """Missing or empty keys should use the default style."""
        assert resolve_style(key) is DEFAULT_STYLE

    def test_style_member_passes_through(self):
        """A Style member should be returned unchanged."""
        assert resolve_style(Style.VAPORWAVE) is Style.VAPORWAVE

    def test_get_enhancement_uses_fallback(self):
        """get_enhancement should return the neon text for an unknown key."""
        assert get_enhancement("unknown-style") == STYLE_ENHANCEMENTS[Style.NEON]


class TestListStyles:
    """Verify the style listing served to clients."""

    def test_lists_all_styles_in_order(self):
        """The listing should contain every style in declaration order."""
        ids = [entry["id"] for entry in list_styles()]
        assert ids == ["neon", "anime", "cyberpunk", "synthwave", "vaporwave"]

    def test_only_default_is_flagged(self):
        """Exactly one entry, the default, should be flagged is_default."""
        defaults = [entry["id"] for entry in list_styles() if entry["is_default"]]
        assert defaults == ["neon"]

    def test_entries_carry_label_and_enhancement(self):
        """Each entry should expose its label and enhancement text."""
        entry = list_styles()[1]
        assert entry["label"] == "Anime Neon"
        assert entry["enhancement"] == STYLE_ENHANCEMENTS[Style.ANIME]
