"""
json_matcher/paths.py — budowa ścieżek w notacji nawiasowej.

Korzeń dokumentu to pusty napis; kolejne segmenty są doklejane:
  pole "users" → "[users]", indeks 0 → "[users][0]".
"""

from __future__ import annotations


ROOT = ""


def field_path(base: str, name: str) -> str:
    """Ścieżka pola obiektu: base + "[name]"."""
    return f"{base}[{name}]"


def index_path(base: str, index: int) -> str:
    """Ścieżka elementu tablicy: base + "[index]"."""
    return f"{base}[{index}]"
