import dataclasses
import logging
import numpy as np
import pytest
from core.image import Image, make_image
from core.indexing import get_pixel
from core.transforms import (
    ChannelValueArgs, InvalidChannelCountError,
    copy_image, rgb_to_grayscale, shift_image, scale_image, clamp_image, rgb_to_hsv, hsv_to_rgb,
)

def _rgb(*pixels):
    """1-row RGB image from a list of (r, g, b) tuples."""
    arr = np.array([pixels], dtype=np.float32)
    return Image.from_array(arr)

def test_copy_fidelity_and_independence():
    im = Image.from_array(np.random.rand(4, 5, 3).astype(np.float32))
    cp = copy_image(im)
    assert cp.shape == im.shape
    assert np.array_equal(cp.data, im.data)
    assert cp.data is not im.data
    cp.data[0] = 42.0
    assert im.data[0] != 42.0

def test_grayscale_shape_and_values():
    im = _rgb((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0), (1.0, 1.0, 1.0))
    before = im.data.copy()
    gray = rgb_to_grayscale(im)
    assert (gray.w, gray.h, gray.c) == (4, 1, 1)
    assert np.allclose(gray.data, [0.299, 0.587, 0.114, 1.0], atol=1e-6)
    assert np.array_equal(im.data, before)

@pytest.mark.parametrize("c", [1, 2, 4])
def test_grayscale_precondition(c):
    im = make_image(3, 3, c)
    with pytest.raises(InvalidChannelCountError) as exc:
        rgb_to_grayscale(im)
    assert exc.value.expected == 3
    assert exc.value.actual == c
    assert isinstance(exc.value, ValueError)

def test_shift_only_touches_channel():
    im = Image.from_array(np.random.rand(3, 4, 3).astype(np.float32))
    before = im.to_array()
    shift_image(im, 1, 0.25)
    after = im.to_array()
    assert np.allclose(after[..., 1], before[..., 1] + 0.25, atol=1e-6)
    assert np.array_equal(after[..., 0], before[..., 0])
    assert np.array_equal(after[..., 2], before[..., 2])

def test_scale_only_touches_channel():
    im = Image.from_array(np.random.rand(3, 4, 3).astype(np.float32))
    before = im.to_array()
    scale_image(im, 2, 0.5)
    after = im.to_array()
    assert np.allclose(after[..., 2], before[..., 2] * 0.5, atol=1e-6)
    assert np.array_equal(after[..., :2], before[..., :2])

@pytest.mark.parametrize("op", [shift_image, scale_image])
@pytest.mark.parametrize("c", [-1, 3])
def test_channel_adjust_out_of_range_channel_is_noop(op, c):
    im = Image.from_array(np.random.rand(2, 2, 3).astype(np.float32))
    before = im.data.copy()
    op(im, c, 2.0)
    assert np.array_equal(im.data, before)

def test_channel_value_args_is_frozen():
    args = ChannelValueArgs(1, 0.5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        args.c = 2

def test_clamp_range():
    arr = np.array([[[-0.5, 0.25, 1.5], [0.0, 1.0, 2.0]]], dtype=np.float32)
    im = Image.from_array(arr)
    clamp_image(im)
    out = im.to_array()
    assert np.all(out >= 0.0) and np.all(out <= 1.0)
    assert np.array_equal(out, [[[0.0, 0.25, 1.0], [0.0, 1.0, 1.0]]])

def test_rgb_to_hsv_known_values_in_place():
    im = _rgb((1.0, 0.0, 0.0), (1.0, 1.0, 1.0), (0.5, 0.5, 0.5))
    rgb_to_hsv(im)
    assert np.allclose(im.to_array()[0], [[0.0, 1.0, 1.0], [0.0, 0.0, 1.0], [0.0, 0.0, 0.5]])

def test_hsv_roundtrip_image():
    rng = np.random.default_rng(0)
    arr = rng.random((6, 7, 3)).astype(np.float32)
    im = Image.from_array(arr)
    rgb_to_hsv(im)
    hue = im.to_array()[..., 0]
    assert np.all((hue >= 0.0) & (hue < 1.0))
    hsv_to_rgb(im)
    assert np.allclose(im.to_array(), arr, atol=1e-5)

@pytest.mark.parametrize("op", [rgb_to_hsv, hsv_to_rgb])
@pytest.mark.parametrize("c", [1, 4])
def test_hsv_precondition_no_partial_mutation(op, c):
    im = Image.from_array(np.random.rand(2, 2, c).astype(np.float32))
    before = im.data.copy()
    with pytest.raises(InvalidChannelCountError):
        op(im)
    assert np.array_equal(im.data, before)

def test_hsv_to_rgb_out_of_range_warning():
    im = _rgb((1.5, 1.0, 1.0), (0.25, 1.0, 1.0))
    with pytest.warns(RuntimeWarning, match="1 hue value"):
        hsv_to_rgb(im, warn_out_of_range=True)

def test_hsv_to_rgb_silent_by_default(recwarn):
    im = _rgb((1.5, 1.0, 1.0))
    hsv_to_rgb(im)
    assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]

def test_transforms_log_at_debug(caplog):
    im = _rgb((0.2, 0.4, 0.6))
    with caplog.at_level(logging.DEBUG, logger="core.transforms"):
        shift_image(im, 0, 0.1)
        rgb_to_hsv(im)
    assert "shift_image" in caplog.text
    assert "rgb_to_hsv" in caplog.text

def test_in_place_ops_preserve_shape():
    im = Image.from_array(np.random.rand(3, 3, 3).astype(np.float32))
    size = im.data.size
    for op in (clamp_image, rgb_to_hsv, hsv_to_rgb):
        op(im)
        assert im.shape == (3, 3, 3)
        assert im.data.size == size
    assert get_pixel(im, 0, 0, 0) == get_pixel(im, -1, -1, -1)

def test_copy_fidelity_from_float64_source():
    im = Image.from_array(np.array([[0.1, 0.2, 0.3]]))
    cp = copy_image(im)
    assert cp.data.dtype == im.data.dtype
    assert np.array_equal(cp.data, im.data)

def test_copy_and_clamp_log_at_debug(caplog):
    im = _rgb((0.2, 1.4, -0.6))
    with caplog.at_level(logging.DEBUG, logger="core.transforms"):
        copy_image(im)
        clamp_image(im)
    assert "copy_image" in caplog.text
    assert "clamp_image" in caplog.text
