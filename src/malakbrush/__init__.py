"""Malak Brush - Neon art generation through a hosted image API."""

__version__ = "0.1.0"

from malakbrush.core.config import BrushConfig, config
from malakbrush.core.generation import generate_image
from malakbrush.core.relay import ProviderRelay

__all__ = [
    "BrushConfig",
    "config",
    "generate_image",
    "ProviderRelay",
]
