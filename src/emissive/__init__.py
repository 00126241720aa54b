from .helpers import (
    BakeConfig, EmissiveError, MissingInputError, ProcessingError,
    ensure_dir, load_image_rgb, save_image_rgb,
)
from .policies import (
    ColorPolicy, luma,
    IcePolicy, IceParams,
    IceChromaPolicy, IceChromaParams,
    MythicPolicy, MythicParams,
    DesertPolicy, DesertParams,
    VoidNeonPolicy, VoidNeonParams,
    VoidVibrantPolicy, VoidVibrantParams,
    LumaPolicy, LumaParams,
    VoidHybridPolicy, VoidHybridParams,
    VoidStrictPolicy, VoidStrictParams,
)
from .pipeline import EmissiveBaker, BakeResult, bake
from .variants import CORE_VARIANTS, get_variant, register, variant_names

__all__ = [
    "BakeConfig", "EmissiveError", "MissingInputError", "ProcessingError",
    "ensure_dir", "load_image_rgb", "save_image_rgb",
    "ColorPolicy", "luma",
    "IcePolicy", "IceParams",
    "IceChromaPolicy", "IceChromaParams",
    "MythicPolicy", "MythicParams",
    "DesertPolicy", "DesertParams",
    "VoidNeonPolicy", "VoidNeonParams",
    "VoidVibrantPolicy", "VoidVibrantParams",
    "LumaPolicy", "LumaParams",
    "VoidHybridPolicy", "VoidHybridParams",
    "VoidStrictPolicy", "VoidStrictParams",
    "EmissiveBaker", "BakeResult", "bake",
    "CORE_VARIANTS", "get_variant", "register", "variant_names",
]
