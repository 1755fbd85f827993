from __future__ import annotations

import logging
import os
from pathlib import Path

import numpy as np
from PIL import Image


LOGGER = logging.getLogger(__name__)

PNG_SUFFIX = ".png"


def resolve_output_path(path: str | os.PathLike[str], *, overwrite_existing: bool = True) -> Path:
    """Return the PNG path to write for ``path``.

    A missing ``.png`` suffix is appended. Without ``overwrite_existing`` an
    existing file is kept and the first free ``<stem>_<n>.png`` is chosen.
    """
    target = Path(path)
    if target.suffix.lower() != PNG_SUFFIX:
        target = target.with_name(target.name + PNG_SUFFIX)
    if overwrite_existing or not target.exists():
        return target
    n = 1
    while True:
        candidate = target.with_name(f"{target.stem}_{n}{target.suffix}")
        if not candidate.exists():
            return candidate
        n += 1


def write_png(frame_rgba: np.ndarray, path: str | os.PathLike[str], *, overwrite_existing: bool = True) -> Path:
    if frame_rgba.dtype != np.uint8:
        raise ValueError("frame_rgba must be uint8")
    if frame_rgba.ndim != 3 or frame_rgba.shape[2] != 4:
        raise ValueError("frame_rgba must have shape (H, W, 4)")
    target = resolve_output_path(path, overwrite_existing=overwrite_existing)
    Image.fromarray(np.ascontiguousarray(frame_rgba)).save(target, format="PNG")
    LOGGER.info("wrote %dx%d chart to %s", frame_rgba.shape[1], frame_rgba.shape[0], target)
    return target
