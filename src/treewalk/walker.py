"""Recursive traversal of a directory tree into a flat file listing."""

import asyncio
import logging
from collections.abc import Callable
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from treewalk.exceptions import TraversalError
from treewalk.files import classify
from treewalk.files import list_directory
from treewalk.models import Entry
from treewalk.models import EntryKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Listing indices from the root down to an entry. Tuple ordering is preorder.
Position = tuple[int, ...]


def merge_contributions(contributions: Iterable[list[str]]) -> list[str]:
    """Concatenate per-entry contributions, keeping their order.

    Args:
        contributions: One list per directory entry, in listing order. Files
            contribute a single path, directories their whole subtree, other
            entries nothing.

    Returns:
        Flat list with every contribution laid out contiguously
    """
    merged: list[str] = []
    for contribution in contributions:
        merged.extend(contribution)
    return merged


def _child_entries(
    directory: Path, prefix: str, names: list[str], sort_entries: bool
) -> list[Entry]:
    if sort_entries:
        names = sorted(names)
    return [Entry.child(directory, prefix, name) for name in names]


def walk(root: Path | str, *, sort_entries: bool = False) -> list[str]:
    """List every regular file beneath root, one entry at a time.

    Args:
        root: Directory to walk (need not end in a separator)
        sort_entries: If True, sort each directory listing by name so the
            output does not depend on the filesystem's listing order

    Returns:
        '/'-separated paths relative to root, in listing order with each
        subdirectory's files in place of the subdirectory

    Raises:
        TraversalError: On the first listing or stat failure. No partial
            result is returned.
    """
    root = Path(root)
    files = _walk_directory(root, "", sort_entries)
    logger.debug("Found %d files under %s", len(files), root)
    return files


def _walk_directory(directory: Path, prefix: str, sort_entries: bool) -> list[str]:
    names = list_directory(directory)
    contributions = []
    for entry in _child_entries(directory, prefix, names, sort_entries):
        kind = classify(entry.working_path)
        if kind is EntryKind.FILE:
            contributions.append([entry.relative_path])
        elif kind is EntryKind.DIRECTORY:
            contributions.append(
                _walk_directory(entry.working_path, entry.subtree_prefix, sort_entries)
            )
    return merge_contributions(contributions)


class _Superseded(Exception):
    """A branch stopped because an earlier entry already failed."""


@dataclass
class _Traversal:
    """State shared by all branches of one awalk() call.

    Only touched from the event loop thread, so no lock is needed.
    """

    sort_entries: bool
    limiter: asyncio.Semaphore | None = None
    failed_at: Position | None = None

    def record_failure(self, position: Position) -> None:
        """Remember where a failure originated, keeping the earliest."""
        if self.failed_at is None or position < self.failed_at:
            self.failed_at = position

    def check(self, position: Position) -> None:
        """Stop a branch that comes after a recorded failure in preorder."""
        if self.failed_at is not None and position > self.failed_at:
            raise _Superseded(position)

    async def run(self, func: Callable[..., T], *args) -> T:
        """Run a blocking filesystem call in a worker thread."""
        if self.limiter is None:
            return await asyncio.to_thread(func, *args)
        async with self.limiter:
            return await asyncio.to_thread(func, *args)


async def awalk(
    root: Path | str,
    *,
    max_concurrency: int | None = None,
    sort_entries: bool = False,
) -> list[str]:
    """List every regular file beneath root, visiting siblings concurrently.

    Produces exactly the same result as walk(). Blocking calls run in worker
    threads; results are reassembled in listing order, never completion order.

    Args:
        root: Directory to walk (need not end in a separator)
        max_concurrency: Upper bound on simultaneous listing/stat calls.
            None means unbounded.
        sort_entries: If True, sort each directory listing by name

    Returns:
        '/'-separated paths relative to root, ordered as walk() orders them

    Raises:
        TraversalError: The failure that comes first in listing order. No
            partial result is returned.
        ValueError: If max_concurrency is less than 1
    """
    if max_concurrency is not None and max_concurrency < 1:
        raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")

    root = Path(root)
    limiter = asyncio.Semaphore(max_concurrency) if max_concurrency else None
    traversal = _Traversal(sort_entries=sort_entries, limiter=limiter)
    files = await _awalk_directory(traversal, root, "", ())
    logger.debug("Found %d files under %s", len(files), root)
    return files


async def _awalk_directory(
    traversal: _Traversal, directory: Path, prefix: str, position: Position
) -> list[str]:
    traversal.check(position)
    try:
        names = await traversal.run(list_directory, directory)
    except TraversalError:
        traversal.record_failure(position)
        raise

    entries = _child_entries(directory, prefix, names, traversal.sort_entries)
    tasks = [
        asyncio.create_task(_awalk_entry(traversal, entry, position + (index,)))
        for index, entry in enumerate(entries)
    ]
    return merge_contributions(await _gather_in_order(tasks))


async def _awalk_entry(
    traversal: _Traversal, entry: Entry, position: Position
) -> list[str]:
    traversal.check(position)
    try:
        kind = await traversal.run(classify, entry.working_path)
    except TraversalError:
        traversal.record_failure(position)
        raise

    if kind is EntryKind.FILE:
        return [entry.relative_path]
    if kind is EntryKind.DIRECTORY:
        return await _awalk_directory(
            traversal, entry.working_path, entry.subtree_prefix, position
        )
    return []


async def _gather_in_order(tasks: list[asyncio.Task]) -> list[list[str]]:
    """Wait for sibling tasks and return their results in listing order.

    Raises the exception of the earliest failed task in listing order. Tasks
    listed after a known failure are cancelled, since nothing they produce
    can be used.
    """
    index = {task: i for i, task in enumerate(tasks)}
    cutoff = len(tasks)
    pending = set(tasks)
    try:
        while pending:
            done, pending = await asyncio.wait(
                pending, return_when=asyncio.FIRST_EXCEPTION
            )
            for task in done:
                if task.exception() is not None:
                    cutoff = min(cutoff, index[task])

            moot = {task for task in pending if index[task] > cutoff}
            for task in moot:
                task.cancel()
            pending -= moot
            if moot:
                await asyncio.gather(*moot, return_exceptions=True)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        raise

    if cutoff == len(tasks):
        return [task.result() for task in tasks]

    error = tasks[cutoff].exception()
    for task in tasks[cutoff + 1 :]:
        if task.cancelled():
            continue
        discarded = task.exception()
        if discarded is None or isinstance(discarded, _Superseded):
            continue
        if isinstance(discarded, TraversalError):
            logger.info("Discarding later failure %s after %s", discarded, error)
        else:
            logger.warning(
                "Discarding unexpected error after %s", error, exc_info=discarded
            )
    raise error
