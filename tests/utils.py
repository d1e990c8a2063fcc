# tests/utils.py
"""
Small, reusable helpers used across the kpartition test suite.

Functions:
- member_ids(clusters): per-cluster lists of member point ids.
- assert_complete_partition(clusters, points): every point in exactly one cluster.
- labels_equal_up_to_perm(y1, y2, K): label vectors equal after relabelling.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
"""

from __future__ import annotations

import itertools
import json
import time
from contextlib import contextmanager
from typing import Any, Dict, List, Sequence

import numpy as np


def member_ids(clusters) -> List[List[int]]:
    """Point ids of each cluster's members, in membership order."""
    return [[p.point_id for p in c.members] for c in clusters]


def assert_complete_partition(clusters, points: Sequence) -> None:
    """
    Assert that every input point object is a member of exactly one cluster
    and that no cluster holds anything else.
    """
    seen: Dict[int, int] = {}
    for k, c in enumerate(clusters):
        for p in c.members:
            assert id(p) not in seen, f"{p!r} is in clusters {seen[id(p)]} and {k}"
            seen[id(p)] = k
    assert len(seen) == len(points), f"{len(seen)} members for {len(points)} points"
    for p in points:
        assert id(p) in seen, f"{p!r} is missing from the partition"


def labels_equal_up_to_perm(y1: np.ndarray, y2: np.ndarray, K: int) -> bool:
    """Return True if y2 can be permuted to equal y1 exactly."""
    y1 = np.asarray(y1)
    y2 = np.asarray(y2)
    for perm in itertools.permutations(range(K)):
        mapping = np.array(perm)
        if np.array_equal(y1, mapping[y2]):
            return True
    return False


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] run {"n":400,"d":3,"K":2} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        meta_str = " " + json.dumps(meta, separators=(",", ":")) if meta else ""
        print(f"[timing] {label}{meta_str} {dt:.3f}s")
