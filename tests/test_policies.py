"""Per-pixel decision rules for every policy."""

import numpy as np
import pytest

from emissive.policies import (
    ColorPolicy,
    DesertPolicy,
    IceChromaPolicy,
    IceParams,
    IcePolicy,
    LumaParams,
    LumaPolicy,
    MythicPolicy,
    VoidHybridPolicy,
    VoidNeonPolicy,
    VoidStrictPolicy,
    VoidVibrantPolicy,
    luma,
)

BLACK = (0, 0, 0)


class TestIce:
    def test_near_white_becomes_sky_blue(self):
        assert IcePolicy().apply_pixel(250, 250, 250) == (0, 191, 255)
        assert IcePolicy().apply_pixel(255, 255, 255) == (0, 191, 255)

    def test_any_channel_below_threshold_is_black(self):
        policy = IcePolicy()
        assert policy.apply_pixel(249, 255, 255) == BLACK
        assert policy.apply_pixel(255, 249, 255) == BLACK
        assert policy.apply_pixel(255, 255, 249) == BLACK

    def test_whole_image_matches_rule(self, random_rgb):
        img = random_rgb.copy()
        img[0, :] = 252
        out = IcePolicy().run(img)
        hit = (img >= 250).all(axis=-1)
        assert (out[hit] == (0, 191, 255)).all()
        assert (out[~hit] == 0).all()

    def test_custom_params(self):
        policy = IcePolicy(IceParams(threshold=200, color=(10, 20, 30)))
        assert policy.apply_pixel(200, 210, 220) == (10, 20, 30)


class TestMythic:
    def test_purple_branch(self):
        assert MythicPolicy().apply_pixel(100, 80, 100) == (110, 4, 120)

    def test_purple_branch_clamps(self):
        assert MythicPolicy().apply_pixel(250, 20, 250) == (255, 1, 255)

    def test_cyan_branch(self):
        assert MythicPolicy().apply_pixel(20, 100, 100) == (1, 125, 135)

    def test_cyan_wins_when_both_match(self):
        s = MythicPolicy().scores(np.float64(40), np.float64(60), np.float64(200))
        assert s["is_purple"] and s["is_cyan"]
        assert MythicPolicy().apply_pixel(40, 60, 200) == (2, 75, 255)

    def test_neutral_is_black(self):
        assert MythicPolicy().apply_pixel(100, 100, 100) == BLACK

    def test_thresholds_are_strict(self):
        # purple score exactly 10, cyan score negative
        assert MythicPolicy().apply_pixel(100, 90, 100) == BLACK


class TestVoidNeon:
    def test_red_alone_is_not_enough(self):
        assert VoidNeonPolicy().apply_pixel(70, 0, 0) == BLACK

    def test_neon_passes_through(self):
        assert VoidNeonPolicy().apply_pixel(200, 50, 200) == (200, 50, 200)
        assert VoidNeonPolicy().apply_pixel(130, 0, 0) == (130, 0, 0)

    def test_score_just_under_threshold(self):
        assert VoidNeonPolicy().apply_pixel(120, 10, 0) == BLACK


class TestVoidVibrant:
    def test_vibrant_purple_kept_even_with_low_saturation(self):
        s = VoidVibrantPolicy().scores(np.float64(40), np.float64(10), np.float64(50))
        assert not s["high_saturation"]
        assert VoidVibrantPolicy().apply_pixel(40, 10, 50) == (40, 10, 50)

    def test_blue_ratio_must_hold(self):
        assert VoidVibrantPolicy().apply_pixel(40, 10, 29) == BLACK

    def test_core(self):
        assert VoidVibrantPolicy().apply_pixel(210, 160, 210) == (210, 160, 210)
        assert VoidVibrantPolicy().apply_pixel(201, 151, 200) == BLACK


class TestLuma:
    def test_luma_weights(self):
        assert luma(255.0, 0.0, 0.0) == pytest.approx(76.245)
        assert luma(0.0, 255.0, 0.0) == pytest.approx(149.685)

    def test_threshold(self):
        policy = LumaPolicy()
        assert policy.apply_pixel(121, 121, 121) == (121, 121, 121)
        assert policy.apply_pixel(119, 119, 119) == BLACK
        assert policy.apply_pixel(255, 0, 0) == BLACK
        assert policy.apply_pixel(0, 255, 0) == (0, 255, 0)

    def test_custom_threshold(self):
        assert LumaPolicy(LumaParams(threshold=145.0)).apply_pixel(140, 140, 140) == BLACK

    def test_image_matches_rule(self, random_rgb):
        out = LumaPolicy().run(random_rgb)
        f = random_rgb.astype(np.float64)
        keep = luma(f[..., 0], f[..., 1], f[..., 2]) > 120
        assert (out[keep] == random_rgb[keep]).all()
        assert (out[~keep] == 0).all()


class TestSupplemental:
    def test_desert_full_intensity(self):
        assert DesertPolicy().apply_pixel(200, 100, 50) == (255, 90, 0)

    def test_desert_ramp(self):
        assert DesertPolicy().apply_pixel(200, 100, 85) == (213, 60, 0)

    def test_desert_below_floor(self):
        assert DesertPolicy().apply_pixel(100, 50, 50) == BLACK

    def test_ice_chroma(self):
        policy = IceChromaPolicy()
        assert policy.apply_pixel(50, 60, 200) == (50, 60, 200)
        assert policy.apply_pixel(200, 200, 210) == BLACK  # snow
        assert policy.apply_pixel(20, 30, 60) == BLACK

    def test_void_hybrid(self):
        policy = VoidHybridPolicy()
        assert policy.apply_pixel(150, 60, 255) == (150, 60, 255)
        assert policy.apply_pixel(200, 200, 200) == (200, 200, 200)
        assert policy.apply_pixel(100, 40, 200) == BLACK

    def test_void_strict(self):
        policy = VoidStrictPolicy()
        assert policy.apply_pixel(150, 50, 200) == (150, 50, 200)
        assert policy.apply_pixel(190, 190, 190) == (190, 190, 190)
        assert policy.apply_pixel(170, 170, 170) == BLACK


ALL_POLICIES = [
    IcePolicy(), IceChromaPolicy(), MythicPolicy(), DesertPolicy(), VoidNeonPolicy(),
    VoidVibrantPolicy(), LumaPolicy(), VoidHybridPolicy(), VoidStrictPolicy(),
]


@pytest.mark.parametrize("policy", ALL_POLICIES, ids=lambda p: p.name)
def test_shape_and_dtype_preserved(policy, random_rgb):
    out = policy.run(random_rgb)
    assert out.shape == random_rgb.shape
    assert out.dtype == np.uint8
    assert out.size == 9 * 13 * 3


@pytest.mark.parametrize("policy", ALL_POLICIES, ids=lambda p: p.name)
def test_input_not_modified(policy, random_rgb):
    before = random_rgb.copy()
    policy.run(random_rgb)
    assert (random_rgb == before).all()


def test_rejects_non_rgb():
    with pytest.raises(ValueError):
        LumaPolicy().run(np.zeros((4, 4, 4), dtype=np.uint8))


def test_base_policy_is_abstract():
    with pytest.raises(NotImplementedError):
        ColorPolicy().run(np.zeros((1, 1, 3), dtype=np.uint8))
