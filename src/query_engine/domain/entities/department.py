"""Department entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Department:
    """A department record, referenced by employees through its id."""

    id: int
    short_name: str
    long_name: str
