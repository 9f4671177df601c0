"""Go source file discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from tagcheck.models.errors import SourceDiscoveryError

logger = logging.getLogger("tagcheck.parser")

GO_SUFFIX = ".go"

# Directories the go tool ignores when expanding ``./...``, besides
# names starting with "." or "_"
_SKIP_DIRS = frozenset({"vendor", "testdata"})


def _is_go_file(path: Path) -> bool:
    return path.name.endswith(GO_SUFFIX) and path.is_file()


def _skip_dir(name: str) -> bool:
    return name in _SKIP_DIRS or name.startswith((".", "_"))


def discover_go_files(root: Path, recursive: bool = False) -> list[Path]:
    """List the ``.go`` files of a package directory.

    Without ``recursive`` only the files directly inside ``root`` are
    returned, ``_test.go`` files included.  With ``recursive`` the whole tree
    is scanned, skipping ``vendor`` and ``testdata`` directories and any directory
    whose name starts with ``.`` or ``_``, as the go tool does.
    """
    if not root.exists():
        raise SourceDiscoveryError(f"Path does not exist: {root}")
    if not root.is_dir():
        raise SourceDiscoveryError(f"Path is not a directory: {root}")

    if not recursive:
        files = sorted(p for p in root.iterdir() if _is_go_file(p))
    else:
        files = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if not _skip_dir(d))
            base = Path(dirpath)
            files.extend(
                base / name for name in sorted(filenames) if _is_go_file(base / name)
            )

    logger.debug("Discovered %d Go files under %s", len(files), root)
    return files
