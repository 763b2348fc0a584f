"""
Module: test_rename_executor.py

Author: Michael Economou
Date: 2026-09-26

Tests for the per-entry rename workflow.
"""

import logging
import os
from unittest.mock import Mock, patch

import pytest

from cleanfy.core.rename_executor import RenameExecutor, is_hidden
from cleanfy.models.rename_result import RenameResult
from cleanfy.models.transform_config import CaseMode, DateMode, TransformConfig

LOWER = TransformConfig(case_mode=CaseMode.LOWER)


@pytest.mark.parametrize(
    "name, hidden", [(".env", True), (".a", True), (".", False), ("a.txt", False), ("", False)]
)
def test_is_hidden(name, hidden):
    assert is_hidden(name) is hidden


class TestDryRun:
    """Preview mode never touches the filesystem"""

    def test_preview(self, make_tree):
        root = make_tree("My File.txt")
        path = str(root / "My File.txt")
        result = RenameExecutor(LOWER).process(path, is_dir=False)

        assert result.new_name == "my_file.txt"
        assert result.old_name == "My File.txt"
        assert result.renamed is False
        assert result.path == path
        assert os.path.exists(path)

    def test_unchanged(self, make_tree):
        root = make_tree("clean.txt")
        result = RenameExecutor(LOWER).process(str(root / "clean.txt"), is_dir=False)
        assert result.is_unchanged
        assert not result.has_error

    def test_is_dir_detected(self, make_tree):
        root = make_tree("Some.Dir/")
        result = RenameExecutor(LOWER).process(str(root / "Some.Dir"))
        assert result.is_dir is True
        assert result.new_name == "some.dir"

    def test_pipeline_error_is_captured(self, tmp_path):
        executor = RenameExecutor(TransformConfig(date_mode=DateMode.MTIME))
        result = executor.process(str(tmp_path / "missing.txt"), is_dir=False)
        assert result.has_error
        assert result.error.startswith("cannot read metadata")
        assert result.new_name == ""

    def test_metadata_failure_logged_once(self, tmp_path, caplog):
        executor = RenameExecutor(TransformConfig(date_mode=DateMode.MTIME))
        with caplog.at_level(logging.WARNING):
            executor.process(str(tmp_path / "missing.txt"), is_dir=False)
        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].name == "cleanfy.core.rename_executor"


class TestDotfiles:
    """Hidden entries are skipped unless enabled"""

    def test_skipped_by_default(self, make_tree):
        root = make_tree(".Hidden File")
        result = RenameExecutor(LOWER, dry_run=False).process(str(root / ".Hidden File"), is_dir=False)
        assert result.skipped is True
        assert result.new_name == result.old_name == ".Hidden File"
        assert (root / ".Hidden File").exists()

    def test_processed_when_enabled(self, make_tree):
        root = make_tree(".Hidden File")
        result = RenameExecutor(LOWER, dry_run=False, dotfiles=True).process(str(root / ".Hidden File"), is_dir=False)
        assert result.skipped is False
        assert result.renamed is True
        assert (root / "hidden_file").exists()


@pytest.mark.integration
class TestCommit:
    """Committed renames on a temporary tree"""

    def test_rename(self, make_tree):
        root = make_tree("Café Menu.PDF")
        result = RenameExecutor(LOWER, dry_run=False).process(str(root / "Café Menu.PDF"), is_dir=False)

        assert result.renamed is True
        assert result.auto_renamed is False
        assert result.path == os.path.join(str(root), "cafe_menu.pdf")
        assert (root / "cafe_menu.pdf").read_text(encoding="utf-8") == "Café Menu.PDF"
        assert not (root / "Café Menu.PDF").exists()

    def test_collision_auto_resolved(self, make_tree):
        root = make_tree("My File.txt", "my_file.txt")
        result = RenameExecutor(LOWER, dry_run=False).process(str(root / "My File.txt"), is_dir=False)

        assert result.renamed is True
        assert result.auto_renamed is True
        assert result.new_name == "my_file_2.txt"
        assert (root / "my_file_2.txt").read_text(encoding="utf-8") == "My File.txt"
        assert (root / "my_file.txt").read_text(encoding="utf-8") == "my_file.txt"

    def test_collision_without_unique(self, make_tree):
        root = make_tree("My File.txt", "my_file.txt")
        executor = RenameExecutor(LOWER, dry_run=False, unique=False)
        result = executor.process(str(root / "My File.txt"), is_dir=False)

        assert result.error == "destination exists"
        assert result.renamed is False
        assert (root / "My File.txt").exists()

    def test_directory_rename(self, make_tree):
        root = make_tree("Holiday Photos/a.jpg")
        result = RenameExecutor(LOWER, dry_run=False).process(str(root / "Holiday Photos"), is_dir=True)
        assert result.renamed is True
        assert (root / "holiday_photos" / "a.jpg").exists()


class TestInjectedCapabilities:
    """Executor with injected existence check and rename call"""

    def test_rename_error_is_captured(self):
        rename = Mock(side_effect=PermissionError(13, "Permission denied"))
        executor = RenameExecutor(LOWER, dry_run=False, exists=lambda p: False, rename=rename)
        result = executor.commit(_preview("/data/My File.txt"))

        assert result.error == "Permission denied"
        assert result.renamed is False
        rename.assert_called_once_with("/data/My File.txt", os.path.join("/data", "my_file.txt"))

    def test_resolver_uses_injected_exists(self):
        taken = {os.path.join("/data", "my_file.txt"), os.path.join("/data", "my_file_2.txt")}
        rename = Mock()
        executor = RenameExecutor(LOWER, dry_run=False, exists=taken.__contains__, rename=rename)
        result = executor.commit(_preview("/data/My File.txt"))

        assert result.new_name == "my_file_3.txt"
        assert result.auto_renamed is True
        assert result.path == os.path.join("/data", "my_file_3.txt")
        rename.assert_called_once_with("/data/My File.txt", os.path.join("/data", "my_file_3.txt"))

    def test_same_entry_is_not_a_conflict(self):
        rename = Mock()
        executor = RenameExecutor(LOWER, dry_run=False, exists=lambda p: True, rename=rename)
        with patch("cleanfy.core.rename_executor.os.path.samefile", return_value=True):
            result = executor.commit(_preview("/data/README.TXT", "readme.txt"))

        assert result.auto_renamed is False
        assert result.new_name == "readme.txt"
        rename.assert_called_once_with("/data/README.TXT", os.path.join("/data", "readme.txt"))


def _preview(path, new_name="my_file.txt"):
    return RenameResult(path=path, old_name=os.path.basename(path), new_name=new_name)
