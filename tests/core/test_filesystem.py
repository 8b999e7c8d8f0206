"""
Tests for the Host File System Abstraction.
"""

import pytest

from i18n_autofill.core.filesystem import InputFileSystem, MemoryFileSystem, OSFileSystem


def test_implementations_satisfy_protocol():
  assert isinstance(OSFileSystem(), InputFileSystem)
  assert isinstance(MemoryFileSystem(), InputFileSystem)


def test_memory_listdir_returns_direct_children():
  fs = MemoryFileSystem(
    {
      "/a/translations/en.json": "{}",
      "/a/translations/nested/x.json": "{}",
      "/a/Header.tsx": "",
    }
  )
  assert fs.listdir("/a/translations") == ["en.json", "nested"]
  assert fs.listdir("/a/translations/") == ["en.json", "nested"]


def test_memory_listdir_missing_raises_oserror():
  with pytest.raises(OSError):
    MemoryFileSystem().listdir("/missing")


def test_memory_write_normalizes_paths():
  fs = MemoryFileSystem()
  fs.write("/a//b.json", "{}")
  fs.write("/a/sub/../c.json", "{}")
  assert fs.listdir("/a/") == ["b.json", "c.json"]


def test_os_listdir(tmp_path):
  (tmp_path / "en.json").write_text("{}")
  assert OSFileSystem().listdir(str(tmp_path)) == ["en.json"]
