"""
Host File System Abstraction.

The pass never touches the disk directly. It lists directories through an
`InputFileSystem` supplied by the host, so builds running on in-memory or
overlay file systems see the same translation files the bundler sees.
"""

import os
import posixpath
from typing import Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class InputFileSystem(Protocol):
  """
  Minimal read interface consumed by the locale manifest resolver.
  """

  def listdir(self, path: str) -> List[str]:
    """
    Lists entry names of a directory.

    Raises:
        OSError: If the directory does not exist or cannot be read.
    """
    ...


class OSFileSystem:
  """Reads the real disk."""

  def listdir(self, path: str) -> List[str]:
    return os.listdir(path)


class MemoryFileSystem:
  """
  In-memory file tree keyed by POSIX path.

  Directories are implied by the files stored beneath them.
  """

  def __init__(self, files: Optional[Dict[str, str]] = None):
    """
    Args:
        files: Optional initial mapping of absolute path -> file content.
    """
    self._files: Dict[str, str] = {}
    for path, content in (files or {}).items():
      self.write(path, content)

  def write(self, path: str, content: str) -> None:
    self._files[posixpath.normpath(path)] = content

  def listdir(self, path: str) -> List[str]:
    prefix = posixpath.normpath(path).rstrip("/") + "/"
    entries = set()
    for file_path in self._files:
      if file_path.startswith(prefix):
        entries.add(file_path[len(prefix) :].split("/", 1)[0])

    if not entries:
      raise FileNotFoundError(path)
    return sorted(entries)
