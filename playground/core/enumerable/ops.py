"""
In-place and copying sequence operations.

Block arguments are plain callables. Functions ending in `_in_place` and
`delete_if` mutate their argument; the rest leave it untouched.
"""
from __future__ import annotations

import copy
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")

Predicate = Callable[[Any], bool]


def collect(items: Iterable[T], fn: Callable[[T], U]) -> List[U]:
    return [fn(x) for x in items]


map_items = collect


def reject(items: Iterable[T], pred: Callable[[T], bool]) -> List[T]:
    return [x for x in items if not pred(x)]


def reject_in_place(items: List[T], pred: Callable[[T], bool]) -> Optional[List[T]]:
    """Remove matching elements; None when nothing was removed."""
    before = len(items)
    items[:] = [x for x in items if not pred(x)]
    return items if len(items) != before else None


def delete_if(
    items: Union[List[Any], Dict[Any, Any]],
    pred: Callable[..., bool],
) -> Union[List[Any], Dict[Any, Any]]:
    """
    Remove matching elements in place and return the same container.

    For dicts the predicate is called with (key, value).
    """
    if isinstance(items, dict):
        for k in [k for k, v in items.items() if pred(k, v)]:
            del items[k]
        return items

    items[:] = [x for x in items if not pred(x)]
    return items


def dup_delete_if(
    items: Union[List[Any], Dict[Any, Any]],
    pred: Callable[..., bool],
) -> Union[List[Any], Dict[Any, Any]]:
    return delete_if(copy.copy(items), pred)


def any_match(items: Iterable[T], pred: Optional[Callable[[T], bool]] = None) -> bool:
    if pred is None:
        return any(items)
    return any(pred(x) for x in items)
