"""Tests for the executable checks."""

import errno
import os
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from whichcmd.exceptions import WhichError
from whichcmd.probe import is_executable, is_executable_async
from whichcmd.probe.posix import check_mode
from whichcmd.probe.windows import check_path_ext


def _stat(mode: int, uid: int = 1000, gid: int = 1000) -> SimpleNamespace:
    return SimpleNamespace(st_mode=0o100000 | mode, st_uid=uid, st_gid=gid)


class TestCheckMode:
    """Tests for POSIX permission bits."""

    def test_other_execute(self):
        assert check_mode(_stat(0o001, uid=1, gid=1), uid=2, gid=2, groups=[])

    def test_group_execute_primary_gid(self):
        assert check_mode(_stat(0o010, uid=1, gid=50), uid=2, gid=50, groups=[])

    def test_group_execute_supplementary_group(self):
        assert check_mode(_stat(0o010, uid=1, gid=50), uid=2, gid=3, groups=[7, 50])

    def test_group_execute_other_group(self):
        assert not check_mode(_stat(0o010, uid=1, gid=50), uid=2, gid=3, groups=[7])

    def test_owner_execute(self):
        assert check_mode(_stat(0o100, uid=42, gid=1), uid=42, gid=2, groups=[])

    def test_owner_execute_other_user(self):
        assert not check_mode(_stat(0o100, uid=42, gid=1), uid=43, gid=2, groups=[])

    def test_root_needs_owner_or_group_bit(self):
        assert check_mode(_stat(0o100, uid=42, gid=1), uid=0, gid=0, groups=[])
        assert check_mode(_stat(0o010, uid=42, gid=1), uid=0, gid=0, groups=[])
        assert not check_mode(_stat(0o644, uid=42, gid=1), uid=0, gid=0, groups=[])

    def test_no_execute_bits(self):
        assert not check_mode(_stat(0o666, uid=1, gid=1), uid=1, gid=1, groups=[1])

    def test_gid_falls_back_to_first_group(self, monkeypatch):
        monkeypatch.delattr(os, "getgid", raising=False)
        assert check_mode(_stat(0o010, uid=1, gid=9), uid=2, groups=[9, 10])

    def test_unknown_uid_raises(self, monkeypatch):
        monkeypatch.delattr(os, "getuid", raising=False)
        with pytest.raises(WhichError, match="cannot get uid or gid"):
            check_mode(_stat(0o755), gid=1, groups=[])


class TestCheckPathExt:
    """Tests for the Windows extension check."""

    def test_matching_extension(self):
        assert check_path_ext("C:\\bin\\foo.CMD", ".EXE;.CMD")

    def test_case_insensitive(self):
        assert check_path_ext("foo.cmd", ".EXE;.CMD")
        assert check_path_ext("FOO.EXE", ".exe")

    def test_non_matching_extension(self):
        assert not check_path_ext("foo.txt", ".EXE;.CMD")

    def test_empty_entry_accepts_anything(self):
        assert check_path_ext("foo.txt", ".EXE;;.CMD")
        assert check_path_ext("foo.txt", "")

    def test_custom_delimiter(self):
        assert check_path_ext("foo.bat", ".EXE:.BAT", delimiter=":")
        assert not check_path_ext("foo.bat", ".EXE:.BAT")

    def test_defaults_to_pathext_env(self, monkeypatch):
        monkeypatch.setenv("PATHEXT", ".PY")
        assert check_path_ext("tool.py")
        assert not check_path_ext("tool.exe")

    def test_unset_pathext_env_accepts_anything(self, monkeypatch):
        monkeypatch.delenv("PATHEXT", raising=False)
        assert check_path_ext("tool")


@pytest.mark.posix
class TestIsExecutable:
    """Tests for is_executable() against real files."""

    def test_executable_file(self, make_file):
        assert is_executable(make_file("tool", 0o755))

    def test_non_executable_file(self, make_file):
        assert not is_executable(make_file("notes.txt", 0o644))

    def test_directory_is_not_executable(self, tmp_path):
        assert not is_executable(str(tmp_path))

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            is_executable(str(tmp_path / "missing"))

    def test_missing_file_ignored(self, tmp_path):
        assert not is_executable(str(tmp_path / "missing"), ignore_errors=True)

    def test_permission_denied_is_not_executable(self, tmp_path):
        denied = PermissionError(errno.EACCES, "Permission denied")
        with patch("whichcmd.probe.os.stat", side_effect=denied):
            assert not is_executable(str(tmp_path / "tool"))

    def test_other_errors_ignored_on_request(self, tmp_path):
        too_long = OSError(errno.ENAMETOOLONG, "File name too long")
        with patch("whichcmd.probe.os.stat", side_effect=too_long):
            assert not is_executable(str(tmp_path / "tool"), ignore_errors=True)
            with pytest.raises(OSError):
                is_executable(str(tmp_path / "tool"))

    def test_windows_rules_ignore_mode_bits(self, make_file):
        path = make_file("foo.CMD", 0o644)
        assert is_executable(path, path_ext=".EXE;.CMD", platform="win32")
        assert not is_executable(path, path_ext=".EXE", platform="win32")

    @pytest.mark.asyncio
    async def test_async_matches_sync(self, make_file, tmp_path):
        exe = make_file("tool", 0o755)
        plain = make_file("plain", 0o644)
        assert await is_executable_async(exe) is True
        assert await is_executable_async(plain) is False
        missing = str(tmp_path / "missing")
        assert await is_executable_async(missing, ignore_errors=True) is False
