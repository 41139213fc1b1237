from __future__ import annotations

from typing import Dict, Iterable, List, Optional


def largest_group_by_length(collection: Iterable[str]) -> Optional[List[str]]:
    """
    Group strings by length and return the largest group.

    Ties go to the group whose length was seen first; empty input gives None.
    """
    groups_by_length: Dict[int, List[str]] = {}
    for s in collection:
        groups_by_length.setdefault(len(s), []).append(s)

    if not groups_by_length:
        return None

    max_size = max(len(group) for group in groups_by_length.values())
    return next(group for group in groups_by_length.values() if len(group) == max_size)
