"""
Module: test_conflict_resolver.py

Author: Michael Economou
Date: 2026-09-25

Tests for numeric-suffix conflict resolution.
"""

import os
from unittest.mock import Mock

from cleanfy.core.conflict_resolver import Resolution, resolve, snapshot_exists


class TestResolveOnDisk:
    """Resolution against a real directory"""

    def test_first_suffix_is_two(self, make_tree):
        root = make_tree("file.txt")
        result = resolve(str(root), "file.txt")
        assert result == Resolution(path=os.path.join(str(root), "file_2.txt"), name="file_2.txt", auto_renamed=True)

    def test_skips_taken_suffixes(self, make_tree):
        root = make_tree("file.txt", "file_2.txt", "file_3.txt")
        assert resolve(str(root), "file.txt").name == "file_4.txt"

    def test_gap_is_reused(self, make_tree):
        root = make_tree("file.txt", "file_3.txt")
        assert resolve(str(root), "file.txt").name == "file_2.txt"

    def test_directory_taken_counts(self, make_tree):
        root = make_tree("photos/", "photos_2/")
        assert resolve(str(root), "photos").name == "photos_3"

    def test_deterministic(self, make_tree):
        root = make_tree("a.txt", "a_2.txt")
        assert resolve(str(root), "a.txt") == resolve(str(root), "a.txt")


class TestResolveWithInjectedExistence:
    """Resolution without filesystem access"""

    def test_snapshot(self):
        exists = snapshot_exists(["file.txt", "file_2.txt", "file_3.txt"])
        result = resolve("/virtual", "file.txt", exists=exists)
        assert result.name == "file_4.txt"
        assert result.path == os.path.join("/virtual", "file_4.txt")

    def test_no_extension(self):
        exists = snapshot_exists(["README", "README_2"])
        assert resolve("/virtual", "README", exists=exists).name == "README_3"

    def test_only_last_extension_is_kept_apart(self):
        exists = snapshot_exists(["backup.tar.gz"])
        assert resolve("/virtual", "backup.tar.gz", exists=exists).name == "backup.tar_2.gz"

    def test_leading_dot_is_not_an_extension(self):
        exists = snapshot_exists([".env"])
        assert resolve("/virtual", ".env", exists=exists).name == ".env_2"

    def test_probes_in_order(self):
        exists = Mock(side_effect=[True, True, False])
        resolve("/virtual", "x.md", exists=exists)
        probed = [call.args[0] for call in exists.call_args_list]
        assert probed == [
            os.path.join("/virtual", "x_2.md"),
            os.path.join("/virtual", "x_3.md"),
            os.path.join("/virtual", "x_4.md"),
        ]

    def test_auto_renamed_flag_independent_of_underscores(self):
        # An original name that already looks suffixed is still just a name
        exists = snapshot_exists(["my_file_2.txt"])
        result = resolve("/virtual", "my_file_2.txt", exists=exists)
        assert result.name == "my_file_2_2.txt"
        assert result.auto_renamed is True
