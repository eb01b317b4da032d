"""Tests for colocount.io.discovery."""

import numpy as np
import pytest
import tifffile

from colocount.core.exceptions import InvalidArgumentError
from colocount.io.discovery import find_mask_file


def _write(path):
    tifffile.imwrite(str(path), np.zeros((4, 4), dtype=np.uint8))


class TestFindMaskFile:
    def test_finds_mask(self, tmp_path):
        _write(tmp_path / "image.tif")
        _write(tmp_path / "mask_cell1.tif")
        assert find_mask_file(tmp_path) == tmp_path / "mask_cell1.tif"

    def test_none_when_absent(self, tmp_path):
        _write(tmp_path / "image.tif")
        assert find_mask_file(tmp_path) is None

    def test_ignores_non_tiff(self, tmp_path):
        (tmp_path / "mask_notes.txt").write_text("not an image")
        assert find_mask_file(tmp_path) is None

    def test_multiple_candidates_rejected(self, tmp_path):
        _write(tmp_path / "mask.tif")
        _write(tmp_path / "mask2.tiff")
        with pytest.raises(InvalidArgumentError, match="multiple files"):
            find_mask_file(tmp_path)

    def test_custom_prefix(self, tmp_path):
        _write(tmp_path / "roi.tif")
        assert find_mask_file(tmp_path, prefix="roi") == tmp_path / "roi.tif"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_mask_file(tmp_path / "nope")
