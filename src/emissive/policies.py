from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

Channels = Tuple[np.ndarray, np.ndarray, np.ndarray]
Gain = Tuple[float, float, float]


def luma(r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
    """ITU-R BT.601 weighted brightness."""
    return r * 0.299 + g * 0.587 + b * 0.114


def _gain(r: np.ndarray, g: np.ndarray, b: np.ndarray, gain: Gain) -> Channels:
    return (
        np.minimum(255.0, r * gain[0]),
        np.minimum(255.0, g * gain[1]),
        np.minimum(255.0, b * gain[2]),
    )


class ColorPolicy:
    """
    Per-pixel emissive classifier.

    Subclasses implement `classify` (bool mask) and optionally `remap`
    (replacement color for kept pixels, identity by default). Both receive
    float64 channel planes and must be pure and elementwise, so the same code
    handles a whole image or a single pixel.

    `run` keeps remapped pixels, zeroes the rest, then rounds half-to-even and
    clips to uint8.
    """

    name = "policy"

    def classify(self, r: np.ndarray, g: np.ndarray, b: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def remap(self, r: np.ndarray, g: np.ndarray, b: np.ndarray) -> Channels:
        return r, g, b

    def scores(self, r: np.ndarray, g: np.ndarray, b: np.ndarray) -> Dict[str, np.ndarray]:
        """Derived per-pixel scores, for inspection."""
        return {}

    def run(self, img_rgb: np.ndarray) -> np.ndarray:
        if img_rgb.ndim != 3 or img_rgb.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) RGB buffer, got shape {img_rgb.shape}")
        rgb = img_rgb.astype(np.float64)
        r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

        keep = np.asarray(self.classify(r, g, b), dtype=bool)
        out = np.stack(np.broadcast_arrays(*self.remap(r, g, b), r)[:3], axis=-1)
        out = np.where(keep[..., None], out, 0.0)
        return np.clip(np.rint(out), 0, 255).astype(np.uint8)

    def apply_pixel(self, r: int, g: int, b: int) -> Tuple[int, int, int]:
        px = np.array([[[r, g, b]]], dtype=np.uint8)
        out = self.run(px)[0, 0]
        return int(out[0]), int(out[1]), int(out[2])

    def __repr__(self) -> str:
        params = getattr(self, "p", None)
        return f"{type(self).__name__}({params!r})" if params is not None else type(self).__name__


# Ice: near-white -> fixed deep-sky-blue

@dataclass(frozen=True)
class IceParams:
    threshold: int = 250                      # every channel must reach this
    color: Tuple[int, int, int] = (0, 191, 255)


class IcePolicy(ColorPolicy):
    name = "ice"

    def __init__(self, params: Optional[IceParams] = None) -> None:
        self.p = params or IceParams()

    def classify(self, r, g, b):
        t = self.p.threshold
        return (r >= t) & (g >= t) & (b >= t)

    def remap(self, r, g, b):
        return tuple(np.full_like(r, c) for c in self.p.color)


# Ice chroma: blue-dominant neon and deep ice, snow rejected

@dataclass(frozen=True)
class IceChromaParams:
    blue_over_red: float = 1.25
    blue_over_green: float = 1.1
    neon_luma: float = 140.0     # bright blue panels
    deep_blue_min: float = 70.0  # dark blue underside


class IceChromaPolicy(ColorPolicy):
    name = "ice-chroma"

    def __init__(self, params: Optional[IceChromaParams] = None) -> None:
        self.p = params or IceChromaParams()

    def scores(self, r, g, b):
        return {
            "luma": luma(r, g, b),
            "blue_spectrum": (b > r * self.p.blue_over_red) & (b > g * self.p.blue_over_green),
        }

    def classify(self, r, g, b):
        s = self.scores(r, g, b)
        neon = s["blue_spectrum"] & (s["luma"] > self.p.neon_luma)
        deep = s["blue_spectrum"] & (b > self.p.deep_blue_min)
        return neon | deep


# Mythic: purple / cyan split with per-branch gains, cyan wins ties

@dataclass(frozen=True)
class MythicParams:
    purple_min: float = 10.0
    cyan_min: float = 15.0
    cyan_gain: Gain = (0.05, 1.25, 1.35)
    purple_gain: Gain = (1.1, 0.05, 1.2)


class MythicPolicy(ColorPolicy):
    name = "mythic"

    def __init__(self, params: Optional[MythicParams] = None) -> None:
        self.p = params or MythicParams()

    def scores(self, r, g, b):
        purple = (r + b) / 2 - g
        cyan = (g + b) / 2 - r
        return {
            "purple_score": purple,
            "cyan_score": cyan,
            "is_purple": purple > self.p.purple_min,
            "is_cyan": cyan > self.p.cyan_min,
        }

    def classify(self, r, g, b):
        s = self.scores(r, g, b)
        return s["is_purple"] | s["is_cyan"]

    def remap(self, r, g, b):
        is_cyan = self.scores(r, g, b)["is_cyan"]
        cyan = _gain(r, g, b, self.p.cyan_gain)
        purple = _gain(r, g, b, self.p.purple_gain)
        return tuple(np.where(is_cyan, c, p) for c, p in zip(cyan, purple))


# Desert: orange glow ramp on R - B

@dataclass(frozen=True)
class DesertParams:
    saturation_floor: float = 85.0   # R - B at which the ramp starts
    saturation_span: float = 45.0    # ramp width to full intensity
    red_gain: float = 1.6
    green_gain: float = 0.9


class DesertPolicy(ColorPolicy):
    name = "desert"

    def __init__(self, params: Optional[DesertParams] = None) -> None:
        self.p = params or DesertParams()

    def intensity(self, r, g, b) -> np.ndarray:
        return np.clip((r - b - self.p.saturation_floor) / self.p.saturation_span, 0.0, 1.0)

    def scores(self, r, g, b):
        return {"saturation": r - b, "intensity": self.intensity(r, g, b)}

    def classify(self, r, g, b):
        return self.intensity(r, g, b) > 0

    def remap(self, r, g, b):
        k = self.intensity(r, g, b)
        return (
            np.minimum(255.0, r * self.p.red_gain * k),
            np.minimum(255.0, g * self.p.green_gain * k),
            np.zeros_like(b),
        )


# Void v1: purple neon, original color kept

@dataclass(frozen=True)
class VoidNeonParams:
    purple_min: float = 55.0
    channel_min: float = 60.0    # R or B must exceed this


class VoidNeonPolicy(ColorPolicy):
    name = "void-neon"

    def __init__(self, params: Optional[VoidNeonParams] = None) -> None:
        self.p = params or VoidNeonParams()

    def scores(self, r, g, b):
        return {"purple_score": (r + b) / 2 - g}

    def classify(self, r, g, b):
        purple = self.scores(r, g, b)["purple_score"]
        lit = (r > self.p.channel_min) | (b > self.p.channel_min)
        return (purple > self.p.purple_min) & lit


# Void v5: ratio-based vibrant purple plus white-hot core

@dataclass(frozen=True)
class VoidVibrantParams:
    blue_over_green: float = 3.0
    red_over_green: float = 1.8
    saturation_min: float = 130.0
    core_min: Tuple[int, int, int] = (200, 150, 200)


class VoidVibrantPolicy(ColorPolicy):
    name = "void-vibrant"

    def __init__(self, params: Optional[VoidVibrantParams] = None) -> None:
        self.p = params or VoidVibrantParams()

    def scores(self, r, g, b):
        cr, cg, cb = self.p.core_min
        return {
            "vibrant_purple": (b > g * self.p.blue_over_green) & (r > g * self.p.red_over_green),
            "high_saturation": (r + b) > self.p.saturation_min,
            "core": (r > cr) & (g > cg) & (b > cb),
        }

    def classify(self, r, g, b):
        # high_saturation is reported by scores() but does not gate the mask.
        s = self.scores(r, g, b)
        return s["vibrant_purple"] | s["core"]


# Void v8 / v10: plain luma threshold

@dataclass(frozen=True)
class LumaParams:
    threshold: float = 120.0


class LumaPolicy(ColorPolicy):
    name = "luma"

    def __init__(self, params: Optional[LumaParams] = None) -> None:
        self.p = params or LumaParams()

    def scores(self, r, g, b):
        return {"luma": luma(r, g, b)}

    def classify(self, r, g, b):
        return luma(r, g, b) > self.p.threshold


# Void v11: purple passes at lower brightness than everything else

@dataclass(frozen=True)
class VoidHybridParams:
    blue_over_green: float = 2.5
    purple_luma: float = 105.0
    bright_luma: float = 125.0


class VoidHybridPolicy(ColorPolicy):
    name = "void-hybrid"

    def __init__(self, params: Optional[VoidHybridParams] = None) -> None:
        self.p = params or VoidHybridParams()

    def classify(self, r, g, b):
        y = luma(r, g, b)
        by_purple = (b > g * self.p.blue_over_green) & (y > self.p.purple_luma)
        return by_purple | (y > self.p.bright_luma)


# Void v13: strict purple, strict cyan edge, bright core

@dataclass(frozen=True)
class VoidStrictParams:
    purple_blue_over_green: float = 2.0
    purple_red_over_green: float = 1.8
    purple_luma: float = 65.0
    cyan_blue_over_red: float = 1.5
    cyan_green_over_red: float = 1.2
    cyan_luma: float = 160.0
    core_luma: float = 180.0


class VoidStrictPolicy(ColorPolicy):
    name = "void-strict"

    def __init__(self, params: Optional[VoidStrictParams] = None) -> None:
        self.p = params or VoidStrictParams()

    def classify(self, r, g, b):
        p = self.p
        y = luma(r, g, b)
        purple = (b > g * p.purple_blue_over_green) & (r > g * p.purple_red_over_green) & (y > p.purple_luma)
        cyan_edge = (b > r * p.cyan_blue_over_red) & (g > r * p.cyan_green_over_red) & (y > p.cyan_luma)
        return purple | cyan_edge | (y > p.core_luma)
