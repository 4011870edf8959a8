"""
Tests for the filter contract and the edge, color map and solid color filters.
"""

import cv2
import numpy as np
import pytest

from framefilters.core.errors import InvalidParameterError, ObjectDisposedError
from framefilters.filters import (
    ColorMapFilter,
    EdgeFilter,
    ImageFilter,
    SolidColorFilter,
)


class TestImageFilterContract:
    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            ImageFilter("base")

    def test_inplace_flags(self):
        assert EdgeFilter().inplace_capable is True
        assert ColorMapFilter().inplace_capable is True
        assert SolidColorFilter((0, 0, 0)).inplace_capable is False

    def test_buffers_created_lazily(self, pattern_image):
        f = EdgeFilter()
        assert f._gray_buffers is None
        assert f._bgr_buffers is None
        f.apply(pattern_image)
        assert f._gray_buffers is not None
        assert len(f._gray_buffers) == 6
        assert f._bgr_buffers is None

    def test_get_buffer_bgr_reuses(self):
        f = SolidColorFilter((1, 2, 3))
        a = f.get_buffer_bgr((10, 10), 0)
        b = f.get_buffer_bgr((10, 10), 0)
        assert a is b
        assert a.shape == (10, 10, 3)

    def test_dispose_twice(self, pattern_image):
        f = EdgeFilter()
        f.apply(pattern_image)
        f.dispose()
        f.dispose()
        assert f.is_disposed
        assert f._gray_buffers is None

    def test_dispose_leaves_other_filters_alone(self, pattern_image):
        a = EdgeFilter()
        b = a.duplicate()
        expected = b.apply(pattern_image)
        a.apply(pattern_image)
        a.dispose()
        a.dispose()
        np.testing.assert_array_equal(b.apply(pattern_image), expected)

    def test_process_after_dispose_raises(self, pattern_image):
        for f in (EdgeFilter(), ColorMapFilter(), SolidColorFilter((0, 0, 0))):
            f.dispose()
            with pytest.raises(ObjectDisposedError):
                f.apply(pattern_image)

    def test_context_manager_disposes(self, pattern_image):
        with EdgeFilter() as f:
            f.apply(pattern_image)
        assert f.is_disposed

    def test_repr(self):
        assert repr(EdgeFilter(name="edges")) == "EdgeFilter(name='edges', inplace=True)"


class TestEdgeFilter:
    def test_solid_image_has_no_edges(self, solid_image):
        f = EdgeFilter(50, 150, 3)
        dest = np.full_like(solid_image, 99)
        f.process(solid_image, dest)
        assert dest.shape == (64, 64, 3)
        assert not dest.any()

    def test_matches_per_channel_canny(self, pattern_image):
        f = EdgeFilter(50, 150, 3)
        result = f.apply(pattern_image)
        for channel in range(3):
            plane = np.ascontiguousarray(pattern_image[:, :, channel])
            expected = cv2.Canny(plane, 50, 150, apertureSize=3)
            np.testing.assert_array_equal(result[:, :, channel], expected)

    def test_inplace_matches_out_of_place(self, pattern_image):
        f = EdgeFilter()
        tmp = np.zeros_like(pattern_image)
        f.process(pattern_image, tmp)

        img = pattern_image.copy()
        f.process(img, img)
        np.testing.assert_array_equal(img, tmp)

    def test_repeated_calls_identical(self, pattern_image):
        f = EdgeFilter()
        first = f.apply(pattern_image)
        second = f.apply(pattern_image)
        np.testing.assert_array_equal(first, second)

    def test_source_not_mutated(self, pattern_image):
        original = pattern_image.copy()
        EdgeFilter().apply(pattern_image)
        np.testing.assert_array_equal(pattern_image, original)

    def test_size_change_reallocates_buffers(self, pattern_image, solid_image):
        f = EdgeFilter()
        f.apply(pattern_image)
        first = f.get_buffer_gray((64, 48), 0)
        result = f.apply(solid_image)
        assert result.shape == solid_image.shape
        assert f._gray_buffers.size == (64, 64)
        assert f.get_buffer_gray((64, 48), 0) is not first

    def test_invalid_aperture_propagates_cv2_error(self, pattern_image):
        f = EdgeFilter(50, 150, 4)
        with pytest.raises(cv2.error):
            f.apply(pattern_image)

    def test_duplicate(self, pattern_image):
        f = EdgeFilter(30, 90, 5, name="custom")
        f.apply(pattern_image)
        copy = f.duplicate()
        assert isinstance(copy, EdgeFilter)
        assert (copy.low_threshold, copy.high_threshold, copy.aperture_size) == (30, 90, 5)
        assert copy.name == "custom"
        assert copy._gray_buffers is None
        np.testing.assert_array_equal(copy.apply(pattern_image), f.apply(pattern_image))
        assert copy._gray_buffers is not f._gray_buffers
        assert copy.get_buffer_gray((64, 48), 0) is not f.get_buffer_gray((64, 48), 0)


class TestColorMapFilter:
    def test_matches_apply_color_map(self, pattern_image):
        f = ColorMapFilter(cv2.COLORMAP_HOT)
        expected = cv2.applyColorMap(pattern_image, cv2.COLORMAP_HOT)
        np.testing.assert_array_equal(f.apply(pattern_image), expected)

    def test_inplace_matches_out_of_place(self, pattern_image):
        f = ColorMapFilter()
        tmp = np.zeros_like(pattern_image)
        f.process(pattern_image, tmp)

        img = pattern_image.copy()
        f.process(img, img)
        np.testing.assert_array_equal(img, tmp)

    def test_repeated_calls_identical(self, pattern_image):
        f = ColorMapFilter()
        np.testing.assert_array_equal(f.apply(pattern_image), f.apply(pattern_image))

    def test_no_scratch_buffers(self, pattern_image):
        f = ColorMapFilter()
        f.apply(pattern_image)
        assert f._bgr_buffers is None
        assert f._gray_buffers is None

    def test_from_name(self):
        assert ColorMapFilter.from_name("jet").colormap == cv2.COLORMAP_JET
        assert ColorMapFilter.from_name("COLORMAP_BONE").colormap == cv2.COLORMAP_BONE

    def test_from_name_unknown(self):
        with pytest.raises(InvalidParameterError, match="Unknown color map"):
            ColorMapFilter.from_name("not-a-map")

    def test_duplicate(self, pattern_image):
        f = ColorMapFilter(cv2.COLORMAP_OCEAN)
        copy = f.duplicate()
        assert copy is not f
        assert copy.colormap == cv2.COLORMAP_OCEAN
        np.testing.assert_array_equal(copy.apply(pattern_image), f.apply(pattern_image))


class TestSolidColorFilter:
    def test_fills_destination(self):
        rng = np.random.default_rng(1)
        source = rng.integers(0, 256, size=(32, 32, 3), dtype=np.uint8)
        dest = np.zeros_like(source)
        SolidColorFilter((255, 0, 0)).process(source, dest)
        assert (dest == np.array([255, 0, 0], dtype=np.uint8)).all()

    def test_source_untouched(self, pattern_image):
        original = pattern_image.copy()
        SolidColorFilter((1, 2, 3)).apply(pattern_image)
        np.testing.assert_array_equal(pattern_image, original)

    def test_duplicate(self):
        f = SolidColorFilter((10, 20, 30))
        copy = f.duplicate()
        assert copy is not f
        assert copy.color == (10, 20, 30)
        assert copy.inplace_capable is False
