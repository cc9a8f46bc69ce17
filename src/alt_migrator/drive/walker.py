"""Recursive discovery of every folder in the drive."""

from __future__ import annotations

import asyncio

from .client import DriveClient
from .models import DEFAULT_MAX_CONCURRENCY, PATH_SEPARATOR, Folder


def child_path_prefix(parent: Folder | None) -> str:
    """Breadcrumb prefix for the children of ``parent``."""
    if parent is None:
        return ""
    return f"{parent.path or parent.name}{PATH_SEPARATOR}"


async def list_all_folders(
    client: DriveClient,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
) -> list[Folder]:
    """Enumerate all folders reachable from the drive root.

    Sibling subtrees are walked concurrently; ``max_concurrency`` caps
    the number of listing requests in flight at once. Each level's
    folders come first, followed by the subtree of each folder in
    sibling order.

    The remote store is assumed to be a tree. A cycle would never
    terminate. If any listing fails, the walk still in progress is
    cancelled before the error is raised.

    Args:
        client: Drive API client.
        max_concurrency: Maximum concurrent listing requests.

    Returns:
        Every folder exactly once, each with its breadcrumb ``path``.
    """
    if max_concurrency < 1:
        raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")

    semaphore = asyncio.Semaphore(max_concurrency)
    return await _walk(client, None, semaphore)


async def _walk(
    client: DriveClient,
    parent: Folder | None,
    semaphore: asyncio.Semaphore,
) -> list[Folder]:
    prefix = child_path_prefix(parent)

    # Hold the slot only for the request, never across recursion
    async with semaphore:
        listed = await client.list_folders(parent.id if parent else None)

    folders = [
        folder.model_copy(update={"path": f"{prefix}{folder.name}"})
        for folder in listed
    ]
    if not folders:
        return []

    tasks = [
        asyncio.ensure_future(_walk(client, folder, semaphore))
        for folder in folders
    ]
    try:
        subtrees = await asyncio.gather(*tasks)
    except BaseException:
        # One subtree failed (or we were cancelled): stop the siblings
        # before the error leaves this level
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return folders + [sub for subtree in subtrees for sub in subtree]
