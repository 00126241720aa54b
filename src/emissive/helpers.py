from __future__ import annotations
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import cv2
import numpy as np
import os

if TYPE_CHECKING:
    from .policies import ColorPolicy


# Errors

class EmissiveError(Exception):
    """Base class for everything a bake can fail with."""


class MissingInputError(EmissiveError, FileNotFoundError):
    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        super().__init__(f"Input texture not found: {self.path}")


class ProcessingError(EmissiveError):
    """Decode, transform or encode failure. The cause is chained."""


# Config dataclasses

@dataclass(frozen=True)
class BakeConfig:
    name: str
    input_path: Path
    output_path: Path
    policy: "ColorPolicy"
    blur_sigma: Optional[float] = None   # None or <= 0 => no blur
    description: str = ""

    @property
    def blurred(self) -> bool:
        return self.blur_sigma is not None and self.blur_sigma > 0

    def with_root(self, root: str | os.PathLike) -> "BakeConfig":
        root = Path(root)
        return replace(
            self,
            input_path=root / self.input_path,
            output_path=root / self.output_path,
        )


# I/O & filesystem helpers

def ensure_dir(path: str | os.PathLike) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def load_image_rgb(path: str | os.PathLike) -> np.ndarray:
    """
    Load an image as an (H, W, 3) uint8 RGB array.
    Alpha is dropped and grayscale is expanded, so the buffer always has 3 channels.
    EXIF orientation is ignored: the stored width and height are kept.
    """
    path = Path(path)
    if not path.is_file():
        raise MissingInputError(path)
    img_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR | cv2.IMREAD_IGNORE_ORIENTATION)
    if img_bgr is None:
        raise ProcessingError(f"Could not decode image: {path}")
    return np.ascontiguousarray(cv2.cvtColor(img_bgr, cv2.COLOR_BGR2RGB))


def save_image_rgb(path: str | os.PathLike, img_rgb: np.ndarray) -> Path:
    """Encode an (H, W, 3) uint8 RGB array to `path`, overwriting it."""
    path = Path(path)
    if img_rgb.ndim != 3 or img_rgb.shape[2] != 3 or img_rgb.dtype != np.uint8:
        raise ProcessingError(
            f"Expected (H, W, 3) uint8 buffer, got {img_rgb.shape} {img_rgb.dtype}"
        )
    ensure_dir(path.parent)
    try:
        ok = cv2.imwrite(str(path), cv2.cvtColor(img_rgb, cv2.COLOR_RGB2BGR))
    except cv2.error as e:
        raise ProcessingError(f"Could not encode image to {path}: {e}") from e
    if not ok:
        raise ProcessingError(f"Could not write image: {path}")
    return path
