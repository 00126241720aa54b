"""Shared fixtures for emissive bake tests."""

from __future__ import annotations

import struct
from pathlib import Path

import cv2
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from emissive.helpers import save_image_rgb


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_rgb(rng):
    """Small random texture, odd sizes so width/height mix-ups show up."""
    return rng.integers(0, 256, size=(9, 13, 3), dtype=np.uint8)


@pytest.fixture
def write_texture(tmp_path):
    """Write an RGB array as a lossless PNG under tmp_path and return its path."""

    def _write(img_rgb: np.ndarray, rel: str = "Emissive/texture.png") -> Path:
        return save_image_rgb(tmp_path / rel, img_rgb)

    return _write


def _exif_orientation_segment(orientation: int) -> bytes:
    """APP1 segment holding a little-endian TIFF IFD with a single Orientation tag."""
    tiff = (
        b"II*\x00" + struct.pack("<I", 8)
        + struct.pack("<H", 1)
        + struct.pack("<HHIHH", 0x0112, 3, 1, orientation, 0)
        + struct.pack("<I", 0)
    )
    payload = b"Exif\x00\x00" + tiff
    return b"\xff\xe1" + struct.pack(">H", len(payload) + 2) + payload


@pytest.fixture
def write_exif_jpeg(tmp_path):
    """Write an RGB array as a JPEG tagged with an EXIF orientation."""

    def _write(img_rgb: np.ndarray, rel: str, orientation: int = 6) -> Path:
        ok, buf = cv2.imencode(".jpg", cv2.cvtColor(img_rgb, cv2.COLOR_RGB2BGR))
        assert ok
        data = buf.tobytes()
        pos = 2
        if data[2:4] == b"\xff\xe0":  # keep JFIF APP0 first
            pos = 4 + int.from_bytes(data[4:6], "big")
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data[:pos] + _exif_orientation_segment(orientation) + data[pos:])
        return path

    return _write
