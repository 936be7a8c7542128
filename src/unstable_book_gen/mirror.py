"""Recursive copy of the hand-written book sources into the output tree."""

import shutil
from pathlib import Path

from unstable_book_gen.errors import io_operation


def copy_recursive(src: Path, dest: Path) -> int:
    """Copy every file and subdirectory of ``src`` into ``dest``.

    Existing files in ``dest`` are overwritten; files only present in
    ``dest`` are left alone.

    Returns:
        Number of files copied

    Raises:
        BookIOError: If a directory cannot be listed or created, or a copy fails
    """
    src, dest = Path(src), Path(dest)
    copied = 0

    with io_operation("read dir", src):
        entries = sorted(src.iterdir())

    for entry in entries:
        target = dest / entry.name
        if entry.is_file():
            with io_operation("copy file", entry):
                shutil.copyfile(entry, target)
            copied += 1
        elif entry.is_dir():
            with io_operation("create dir", target):
                target.mkdir(parents=True, exist_ok=True)
            copied += copy_recursive(entry, target)

    return copied
