from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import sys

import cv2
import numpy as np

from .helpers import (
    BakeConfig,
    EmissiveError,
    MissingInputError,
    ProcessingError,
    load_image_rgb,
    save_image_rgb,
)


@dataclass
class BakeResult:
    config: BakeConfig
    source: np.ndarray        # decoded input, RGB uint8
    mask: np.ndarray          # classified buffer before blur
    output: np.ndarray        # what was written
    output_path: Path

    @property
    def emissive_pixels(self) -> int:
        return int(np.count_nonzero(self.mask.any(axis=-1)))


class EmissiveBaker:
    """Load -> classify/remap -> (optional) blur -> save, for one BakeConfig."""

    def __init__(self, config: BakeConfig) -> None:
        self.config = config
        if config.blur_sigma is not None and config.blur_sigma < 0:
            raise ValueError("blur_sigma must be >= 0")

    def load(self) -> np.ndarray:
        return load_image_rgb(self.config.input_path)

    def classify(self, img_rgb: np.ndarray) -> np.ndarray:
        return self.config.policy.run(img_rgb)

    def blur(self, img_rgb: np.ndarray) -> np.ndarray:
        if not self.config.blurred:
            return img_rgb
        # ksize (0, 0): OpenCV derives the kernel from sigma
        return cv2.GaussianBlur(img_rgb, (0, 0), self.config.blur_sigma)

    def save(self, img_rgb: np.ndarray) -> Path:
        return save_image_rgb(self.config.output_path, img_rgb)

    def run(self) -> BakeResult:
        src = self.load()
        try:
            mask = self.classify(src)
            out = self.blur(mask)
        except Exception as e:
            raise ProcessingError(f"Transform failed: {e}") from e
        if out.shape != src.shape:
            raise ProcessingError(f"Output shape {out.shape} differs from input {src.shape}")
        try:
            path = self.save(out)
        except OSError as e:
            raise ProcessingError(f"Could not write {self.config.output_path}: {e}") from e
        return BakeResult(config=self.config, source=src, mask=mask, output=out, output_path=path)


def bake(config: BakeConfig) -> Optional[BakeResult]:
    """
    Run one bake and report to the console. Never raises for missing input or
    processing failures: prints a diagnostic and returns None instead.
    """
    print(f"[bake] {config.name}: {config.input_path} -> {config.output_path}")
    try:
        result = EmissiveBaker(config).run()
    except MissingInputError as e:
        print(f"[ERROR] {config.name}: file not found at '{e.path}'. "
              f"Check that the texture is in place.", file=sys.stderr)
        return None
    except (EmissiveError, ValueError) as e:
        print(f"[ERROR] {config.name}: {e}", file=sys.stderr)
        return None

    h, w = result.output.shape[:2]
    print(f"[OK] {config.name}: wrote {result.output_path} "
          f"({w}x{h}, {result.emissive_pixels} emissive pixels)")
    return result
