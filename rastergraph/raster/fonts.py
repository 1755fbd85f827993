from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import threading

from PIL import ImageFont

from rastergraph.config import FontConfig
from rastergraph.errors import FontLoadError


LOGGER = logging.getLogger(__name__)

SANS_FONT_PATTERNS = (
    "arialmt",
    "arial",
    "helvetica",
    "dejavusans",
    "dejavu sans",
    "liberationsans",
    "liberation sans",
    "freesans",
)

FontFace = ImageFont.FreeTypeFont | ImageFont.ImageFont

_LOCK = threading.Lock()
_ASSET: FontAsset | None = None


@dataclass(frozen=True)
class FontAsset:
    face: FontFace
    size_px: float
    source: str
    config: FontConfig


def get_font_asset(config: FontConfig | None = None) -> FontAsset:
    """Return the process-wide font, parsing it on first use.

    Concurrent first calls parse the font once; later calls only read the
    published asset. ``config`` defaults to ``FontConfig.from_env()`` for the
    initialising call. A non-None ``config`` that differs from the one the
    asset was built from raises ``FontLoadError`` until ``reset_font_asset``.
    """
    asset = _ASSET
    if asset is None:
        with _LOCK:
            if _ASSET is None:
                _publish(_load_asset(config if config is not None else FontConfig.from_env()))
            asset = _ASSET
        assert asset is not None
    if config is not None and config != asset.config:
        raise FontLoadError(
            f"font already initialised from {asset.source} at {asset.size_px}px; "
            "call reset_font_asset() before using a different font config"
        )
    return asset


def reset_font_asset() -> None:
    with _LOCK:
        _publish(None)


def _publish(asset: FontAsset | None) -> None:
    global _ASSET
    _ASSET = asset


def _load_asset(config: FontConfig) -> FontAsset:
    size = max(1, int(round(config.size_px)))
    font_path = config.path if config.path is not None else _resolve_font_path()
    if font_path is None:
        LOGGER.debug("no system sans font found, using the Pillow bundled face")
        return FontAsset(face=ImageFont.load_default(size=size), size_px=float(size), source="pillow-default", config=config)
    try:
        face = ImageFont.truetype(str(font_path), size=size)
    except OSError as exc:
        raise FontLoadError(f"failed to load font {font_path}: {exc}") from exc
    LOGGER.debug("loaded font %s at %spx", font_path, size)
    return FontAsset(face=face, size_px=float(size), source=str(font_path), config=config)


def _resolve_font_path() -> Path | None:
    font_dirs = [
        Path.home() / "Library" / "Fonts",
        Path("/Library/Fonts"),
        Path("/System/Library/Fonts"),
        Path("/System/Library/Fonts/Supplemental"),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
    ]

    candidates: list[Path] = []
    for base in font_dirs:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf"):
            candidates.extend(sorted(base.rglob(ext)))

    by_stem: dict[str, Path] = {}
    for path in candidates:
        by_stem.setdefault(path.stem.lower().replace(" ", ""), path)
    for pattern in SANS_FONT_PATTERNS:
        p = pattern.replace(" ", "")
        for stem in (p, p + "-regular"):
            if stem in by_stem:
                return by_stem[stem]
    return None
