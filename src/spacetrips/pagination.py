"""
Cursor pagination over launch lists.

A cursor is the ``cursor`` value of the last item a client has seen; the next
page starts right after it. An unknown cursor restarts from the beginning.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from .datasources.models import Launch

DEFAULT_PAGE_SIZE = 20

T = TypeVar("T")


def _default_cursor(item: Any) -> str | None:
    return getattr(item, "cursor", None)


def paginate_results(
    results: Sequence[T],
    after: str | None = None,
    page_size: int | None = DEFAULT_PAGE_SIZE,
    get_cursor: Callable[[T], str | None] = _default_cursor,
) -> list[T]:
    """Return the window of ``results`` following the ``after`` cursor."""
    start = _window_start(results, after, get_cursor)
    if page_size is None:
        page_size = DEFAULT_PAGE_SIZE
    if page_size < 1:
        return []
    return list(results[start : start + page_size])


def _window_start(
    results: Sequence[T], after: str | None, get_cursor: Callable[[T], str | None]
) -> int:
    if not after:
        return 0
    for index, item in enumerate(results):
        cursor = get_cursor(item)
        if cursor is not None and cursor == after:
            return index + 1
    return 0


@dataclass
class LaunchPage:
    """One page of launches plus the cursor to fetch the next one."""

    launches: list[Launch] = field(default_factory=list)
    cursor: str | None = None
    has_more: bool = False


def paginate_launches(
    launches: Sequence[Launch],
    after: str | None = None,
    page_size: int | None = DEFAULT_PAGE_SIZE,
) -> LaunchPage:
    """Paginate an ordered launch list and report whether more launches follow."""
    start = _window_start(launches, after, _default_cursor)
    page = paginate_results(launches, after=after, page_size=page_size)
    if not page:
        return LaunchPage()
    return LaunchPage(
        launches=page,
        cursor=page[-1].cursor,
        has_more=start + len(page) < len(launches),
    )
