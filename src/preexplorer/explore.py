from __future__ import annotations

from typing import Any, Union

from .process import Process
from .sequence import Sequence


def preexplore(data: Any) -> Union[Sequence, Process]:
    """Wrap raw data in the matching kind.

    A ``(domain, image)`` pair of iterables becomes a ``Process``; anything
    else iterable becomes a ``Sequence``.
    """
    if isinstance(data, tuple) and len(data) == 2 and all(_is_iterable(part) for part in data):
        domain, image = data
        return Process(domain, image)
    return Sequence(data)


def _is_iterable(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    try:
        iter(value)
    except TypeError:
        return False
    return True
