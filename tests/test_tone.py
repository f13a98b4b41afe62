import numpy as np
import pytest

from glyphart.tone import adjust_channel, adjust_tone


def _ramp():
    """Every channel value once, with a varying alpha."""
    values = np.arange(256, dtype=np.uint8)
    pixels = np.zeros((1, 256, 4), dtype=np.uint8)
    pixels[0, :, 0] = values
    pixels[0, :, 1] = values[::-1]
    pixels[0, :, 2] = values
    pixels[0, :, 3] = values[::-1]
    return pixels


def test_neutral_settings_are_identity():
    pixels = _ramp()
    np.testing.assert_array_equal(adjust_tone(pixels, 1.0, 1.0), pixels)


@pytest.mark.parametrize("value", [0, 1, 64, 127, 128, 200, 254, 255])
def test_adjust_channel_neutral_is_identity(value):
    assert adjust_channel(value, 1.0, 1.0) == value


def test_input_not_modified():
    pixels = _ramp()
    original = pixels.copy()
    adjust_tone(pixels, 2.5, 0.3)
    np.testing.assert_array_equal(pixels, original)


def test_alpha_untouched():
    pixels = _ramp()
    result = adjust_tone(pixels, 3.0, 0.2)
    np.testing.assert_array_equal(result[..., 3], pixels[..., 3])


def test_zero_contrast_flattens_to_mid_grey():
    result = adjust_tone(_ramp(), 0.0, 1.0)
    assert np.all(result[..., :3] == 128)


def test_zero_brightness_is_black():
    result = adjust_tone(_ramp(), 1.0, 0.0)
    assert np.all(result[..., :3] == 0)


def test_high_contrast_saturates():
    assert adjust_channel(32, 2.0, 1.0) == 0
    assert adjust_channel(200, 2.0, 1.0) == 255


def test_brightness_scales_and_clamps():
    assert adjust_channel(200, 1.0, 0.5) == 100
    assert adjust_channel(200, 1.0, 10.0) == 255
    assert adjust_channel(200, 1.0, -1.0) == 0


def test_vector_matches_scalar():
    pixels = _ramp()
    result = adjust_tone(pixels, 1.7, 0.8)
    for value in range(256):
        assert result[0, value, 0] == adjust_channel(value, 1.7, 0.8)


def test_empty_buffer():
    pixels = np.zeros((0, 5, 4), dtype=np.uint8)
    assert adjust_tone(pixels, 2.0, 2.0).shape == (0, 5, 4)


@pytest.mark.parametrize(
    "contrast, brightness",
    [(1.0, float("inf")), (float("inf"), 1.0), (float("nan"), 1.0), (1.0, float("nan")), (float("-inf"), 2.0)],
)
def test_non_finite_multipliers_stay_in_range(contrast, brightness):
    pixels = _ramp()
    result = adjust_tone(pixels, contrast, brightness)
    assert result.dtype == np.uint8
    np.testing.assert_array_equal(result[..., 3], pixels[..., 3])
    for value in (0, 128, 255):
        assert result[0, value, 0] == adjust_channel(value, contrast, brightness)


def test_undefined_products_become_black():
    # 0 * inf and 0 * nan
    assert adjust_channel(0, 1.0, float("inf")) == 0
    assert adjust_channel(128, float("nan"), 1.0) == 0
    assert adjust_channel(128, float("inf"), 1.0) == 255
    assert adjust_channel(200, 1.0, float("inf")) == 255
