"""Lookup helpers over the ordered session list produced by the loader."""

from __future__ import annotations

from typing import Iterator, List, Optional

from dsesh.config import Session


def list_sessions(sessions: List[Session], name_filter: Optional[str] = None) -> Iterator[str]:
    """! @brief Session names in config order.

    @param sessions Loaded sessions.
    @param name_filter Optional case-insensitive substring; "" matches everything.
    @return Iterator of matching names (stored form, untrimmed).
    """
    needle = name_filter.lower() if name_filter is not None else None
    for s in sessions:
        if needle is not None and needle not in s.name.lower():
            continue
        yield s.name


def find_session(sessions: List[Session], name: str) -> Optional[Session]:
    """! @brief First session whose trimmed name equals the trimmed @p name.

    Duplicate names are allowed; the earliest declared one wins.
    """
    name = name.strip()
    return next((s for s in sessions if s.name.strip() == name), None)
