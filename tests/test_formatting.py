"""
Tests for formatting helpers.

Tests format_size() binary units and the key/path helpers used for labels.
"""

import pytest

from gcsnav.core.formatting import (
    format_size,
    display_name,
    base_name,
    display_path,
    is_folder_key,
)


class TestFormatSize:
    """Tests for format_size() binary-unit formatting."""

    @pytest.mark.parametrize("size,expected", [
        (0, "0 B"),
        (1, "1.0 B"),
        (1023, "1023.0 B"),
        (1024, "1.0 KB"),
        (1536, "1.5 KB"),
        (2048, "2.0 KB"),
        (1048576, "1.0 MB"),
        (1024 ** 3, "1.0 GB"),
        (1024 ** 4, "1.0 TB"),
    ])
    def test_known_values(self, size, expected):
        assert format_size(size) == expected

    def test_negative_is_zero(self):
        assert format_size(-5) == "0 B"

    def test_past_largest_unit_stays_in_tb(self):
        """Petabyte-range sizes are still expressed in TB."""
        assert format_size(1024 ** 5) == "1024.0 TB"

    def test_monotone_across_unit_boundaries(self):
        """Magnitude never decreases as the byte count grows."""
        units = ["B", "KB", "MB", "GB", "TB"]

        def magnitude(size):
            value, unit = format_size(size).split()
            return units.index(unit), float(value)

        sizes = [0, 1, 512, 1023, 1024, 1025, 1536, 1024 ** 2 - 1, 1024 ** 2,
                 5 * 1024 ** 2, 1024 ** 3 - 1, 1024 ** 3, 1024 ** 4, 3 * 1024 ** 4]
        mags = [magnitude(s) for s in sizes]
        # Higher unit always wins; within a unit the value grows
        for prev, cur in zip(mags, mags[1:]):
            assert cur[0] > prev[0] or (cur[0] == prev[0] and cur[1] >= prev[1])


class TestKeyHelpers:
    """Tests for the helpers that turn object keys into labels."""

    def test_display_name_strips_current_prefix(self):
        assert display_name("photos/2024/a.jpg", "photos/2024/") == "a.jpg"

    def test_display_name_keeps_folder_slash(self):
        assert display_name("photos/2024/", "photos/") == "2024/"

    def test_display_name_at_root(self):
        assert display_name("a/", "") == "a/"

    def test_display_name_unrelated_prefix(self):
        assert display_name("other/x", "photos/") == "other/x"

    def test_base_name(self):
        assert base_name("dir/sub/file.txt") == "file.txt"
        assert base_name("file.txt") == "file.txt"

    def test_base_name_windows_separators(self):
        assert base_name("C:\\Users\\me\\report.pdf") == "report.pdf"

    def test_display_path_root(self):
        assert display_path("") == "/"
        assert display_path("a/b/") == "a/b/"

    def test_is_folder_key(self):
        assert is_folder_key("a/")
        assert not is_folder_key("a/b.txt")
