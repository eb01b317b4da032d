"""Tests for colocount.io.tiff."""

import numpy as np
import tifffile

from colocount.io.tiff import read_tiff, read_tiff_metadata


class TestReadTiff:
    def test_read_rgb_frame(self, rgb_frame_path, single_frame_stack):
        result = read_tiff(rgb_frame_path)
        np.testing.assert_array_equal(result, single_frame_stack[0])

    def test_read_rgb_stack(self, rgb_stack_path, two_frame_stack):
        result = read_tiff(rgb_stack_path)
        assert result.shape == (2, 4, 4, 3)
        np.testing.assert_array_equal(result, two_frame_stack)

    def test_read_8bit_mask(self, tmp_path):
        data = np.zeros((32, 32), dtype=np.uint8)
        data[4:8, 4:8] = 255
        p = tmp_path / "mask.tif"
        tifffile.imwrite(str(p), data)
        result = read_tiff(p)
        assert result.dtype == np.uint8
        np.testing.assert_array_equal(result, data)


class TestReadTiffMetadata:
    def test_stack_metadata(self, rgb_stack_path):
        meta = read_tiff_metadata(rgb_stack_path)
        assert meta["shape"] == (2, 4, 4, 3)
        assert meta["dtype"] == "uint8"
        assert meta["n_pages"] == 2
        assert meta["axes"] == "QYXS"

    def test_imagej_axes(self, tmp_path):
        p = tmp_path / "composite.tif"
        image = np.zeros((3, 8, 8), dtype=np.uint8)
        tifffile.imwrite(str(p), image, imagej=True, metadata={"axes": "CYX"})
        meta = read_tiff_metadata(p)
        assert meta["axes"] == "CYX"
        assert meta["shape"] == (3, 8, 8)
