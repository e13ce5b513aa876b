"""File loading helpers for the command line."""

from __future__ import annotations

import asyncio
from pathlib import Path

SCENE_ENCODING = "utf-8"


async def read_text_async(path: Path, encoding: str = SCENE_ENCODING) -> str:
    """Read text from a file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def read_scenes_async(paths: list[Path]) -> list[str | BaseException]:
    """Read several scene files concurrently.

    Returns:
        One entry per path, in order: the text, or the exception raised while
        reading that file.
    """
    return await asyncio.gather(
        *(read_text_async(path) for path in paths), return_exceptions=True
    )
