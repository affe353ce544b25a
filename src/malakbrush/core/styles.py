"""Art style presets and their prompt enhancements.

Each style is a short key (``"neon"``, ``"synthwave"`` ...) that selects a
canned description appended to the user's prompt.  The table is a
process-wide constant: it is built once at import time and wrapped in a
read-only mapping so request handlers can share it without copying.

Fallback Policy
---------------
Unknown, empty, or missing style keys resolve to :data:`DEFAULT_STYLE`
instead of raising.  The UI only offers known keys, so an unknown key means
an out-of-date or hand-written client; serving the default image is
preferred over rejecting the request.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType

logger = logging.getLogger(__name__)


class Style(str, Enum):
    """Available art styles, keyed by the identifier clients send."""

    NEON = "neon"
    ANIME = "anime"
    CYBERPUNK = "cyberpunk"
    SYNTHWAVE = "synthwave"
    VAPORWAVE = "vaporwave"


DEFAULT_STYLE = Style.NEON

STYLE_ENHANCEMENTS: MappingProxyType[Style, str] = MappingProxyType(
    {
        Style.NEON: (
            "Neon cyberpunk style with glowing cyan and magenta lights, futuristic, "
            "ultra high resolution"
        ),
        Style.ANIME: (
            "Anime art style with neon lighting, vibrant colors, cyberpunk aesthetic, "
            "ultra high resolution"
        ),
        Style.CYBERPUNK: (
            "Dark cyberpunk cityscape with neon signs, rainy streets, futuristic atmosphere, "
            "ultra high resolution"
        ),
        Style.SYNTHWAVE: (
            "Synthwave style with purple and pink sunset, retro futuristic, neon grid, "
            "ultra high resolution"
        ),
        Style.VAPORWAVE: (
            "Vaporwave aesthetic with pastel neon colors, glitch art, nostalgic 80s vibes, "
            "ultra high resolution"
        ),
    }
)

# Human-readable names shown in the style picker.
STYLE_LABELS: MappingProxyType[Style, str] = MappingProxyType(
    {
        Style.NEON: "Neon Cyberpunk",
        Style.ANIME: "Anime Neon",
        Style.CYBERPUNK: "Dark Cyberpunk",
        Style.SYNTHWAVE: "Synthwave",
        Style.VAPORWAVE: "Vaporwave",
    }
)


def resolve_style(key: str | Style | None) -> Style:
    """Map a raw style key to a :class:`Style`, falling back to the default.

    Args:
        key: Style identifier as sent by the client.  ``None``, empty
            strings and unknown identifiers are all accepted.

    Returns:
        The matching style, or :data:`DEFAULT_STYLE` when there is no match.
    """
    if isinstance(key, Style):
        return key
    if key:
        try:
            return Style(key)
        except ValueError:
            pass
    logger.debug("Unrecognised style %r, using default %r", key, DEFAULT_STYLE.value)
    return DEFAULT_STYLE


def get_enhancement(key: str | Style | None) -> str:
    """Return the enhancement text for *key*, applying the default fallback."""
    return STYLE_ENHANCEMENTS[resolve_style(key)]


def list_styles() -> list[dict]:
    """Return every style as a JSON-ready dictionary, in declaration order.

    Returns:
        List of dictionaries with ``id``, ``label``, ``enhancement`` and
        ``is_default`` keys.
    """
    return [
        {
            "id": style.value,
            "label": STYLE_LABELS[style],
            "enhancement": STYLE_ENHANCEMENTS[style],
            "is_default": style is DEFAULT_STYLE,
        }
        for style in Style
    ]
