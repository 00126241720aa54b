"""Named bake configurations, one per emissive script."""
from __future__ import annotations
from pathlib import Path
from typing import Dict, List

from .helpers import BakeConfig
from .policies import (
    DesertPolicy,
    IceChromaPolicy,
    IcePolicy,
    LumaParams,
    LumaPolicy,
    MythicPolicy,
    VoidHybridPolicy,
    VoidNeonPolicy,
    VoidStrictPolicy,
    VoidVibrantPolicy,
)

EMISSIVE_DIR = Path("Emissive")
VOID_INPUT = EMISSIVE_DIR / "texture.png"
VOID_OUTPUT = EMISSIVE_DIR / "emissive-void.png"

CORE_VARIANTS = ("ice", "mythic", "void-v1", "void-v5", "void-v10")

_REGISTRY: Dict[str, BakeConfig] = {}


def register(config: BakeConfig) -> BakeConfig:
    if config.name in _REGISTRY:
        raise ValueError(f"Variant already registered: {config.name}")
    _REGISTRY[config.name] = config
    return config


def get_variant(name: str) -> BakeConfig:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown variant '{name}'. Known: {', '.join(variant_names())}") from None


def variant_names() -> List[str]:
    return list(_REGISTRY)


register(BakeConfig(
    name="ice",
    input_path=EMISSIVE_DIR / "texture.jpg",
    output_path=EMISSIVE_DIR / "emissive-ice.png",
    policy=IcePolicy(),
    description="Near-white highlights recolored to deep sky blue",
))
register(BakeConfig(
    name="mythic",
    input_path=EMISSIVE_DIR / "texture.jpeg",
    output_path=EMISSIVE_DIR / "emissive-mythic.png",
    policy=MythicPolicy(),
    blur_sigma=3.0,
    description="Purple and cyan energy, boosted and softened",
))
register(BakeConfig(
    name="void-v1",
    input_path=VOID_INPUT,
    output_path=VOID_OUTPUT,
    policy=VoidNeonPolicy(),
    blur_sigma=0.5,
    description="Saturated purple neon, original color kept",
))
register(BakeConfig(
    name="void-v5",
    input_path=VOID_INPUT,
    output_path=VOID_OUTPUT,
    policy=VoidVibrantPolicy(),
    description="Ratio-picked vibrant purple plus white-hot veins, unblurred",
))
register(BakeConfig(
    name="void-v10",
    input_path=VOID_INPUT,
    output_path=VOID_OUTPUT,
    policy=LumaPolicy(LumaParams(threshold=120.0)),
    blur_sigma=1.0,
    description="Everything brighter than luma 120",
))

# Earlier and sibling scripts from the same family.
register(BakeConfig(
    name="ice-chroma",
    input_path=EMISSIVE_DIR / "texture.JPG",
    output_path=EMISSIVE_DIR / "emissive-ice.png",
    policy=IceChromaPolicy(),
    blur_sigma=2.0,
    description="Blue-dominant neon and deep ice, snow rejected",
))
register(BakeConfig(
    name="desert",
    input_path=EMISSIVE_DIR / "texture-ia.jpeg",
    output_path=EMISSIVE_DIR / "emissive-desert.png",
    policy=DesertPolicy(),
    blur_sigma=4.0,
    description="Orange glow ramped on red-minus-blue",
))
register(BakeConfig(
    name="void-v8",
    input_path=VOID_INPUT,
    output_path=VOID_OUTPUT,
    policy=LumaPolicy(LumaParams(threshold=145.0)),
    blur_sigma=0.8,
    description="Everything brighter than luma 145",
))
register(BakeConfig(
    name="void-v11",
    input_path=VOID_INPUT,
    output_path=VOID_OUTPUT,
    policy=VoidHybridPolicy(),
    blur_sigma=1.0,
    description="Bright pixels, plus purple at a lower brightness",
))
register(BakeConfig(
    name="void-v13",
    input_path=VOID_INPUT,
    output_path=VOID_OUTPUT,
    policy=VoidStrictPolicy(),
    blur_sigma=0.6,
    description="Strict purple, strict cyan edges and the brightest core",
))
