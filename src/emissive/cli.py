from __future__ import annotations
import argparse
from typing import Callable, List, Optional

from .pipeline import bake
from .variants import get_variant, variant_names
from .viz import Visualizer


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Bake emissive masks from texture images")
    p.add_argument("variant", nargs="?", help="Variant to bake (see --list)")
    p.add_argument("--list", action="store_true", help="List known variants and exit")
    p.add_argument("--show", action="store_true", help="Display source and result")
    return p


def _print_variants() -> None:
    for name in variant_names():
        cfg = get_variant(name)
        blur = f"blur {cfg.blur_sigma}" if cfg.blurred else "no blur"
        print(f"{name:<11} {cfg.input_path} -> {cfg.output_path} ({blur})")
        if cfg.description:
            print(f"{'':<11} {cfg.description}")


def run_variant(name: str, show: bool = False) -> None:
    result = bake(get_variant(name))
    if show and result is not None:
        Visualizer().preview(result)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_argparser()
    args = parser.parse_args(argv)

    if args.list:
        _print_variants()
        return
    if args.variant is None:
        parser.error("Provide a variant name or --list")
    if args.variant not in variant_names():
        parser.error(f"Unknown variant '{args.variant}'. Known: {', '.join(variant_names())}")
    run_variant(args.variant, show=args.show)


def _entry(name: str) -> Callable[[], None]:
    def entry() -> None:
        run_variant(name)
    entry.__name__ = f"bake_{name.replace('-', '_')}"
    entry.__doc__ = f"Bake the '{name}' emissive map with its fixed settings."
    return entry


bake_ice = _entry("ice")
bake_mythic = _entry("mythic")
bake_void_v1 = _entry("void-v1")
bake_void_v5 = _entry("void-v5")
bake_void_v10 = _entry("void-v10")
