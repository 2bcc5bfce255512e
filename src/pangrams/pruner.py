"""Removal of word entries whose letters are a strict subset of another entry's letters.

Pruning shrinks the buckets considerably, but it is not exact: a pruned word may be the only
way to complete some combination without the extra letters of the word that dominates it, so
searching the pruned entries can find fewer combinations.
"""

from collections.abc import Sequence
from itertools import groupby

import numpy as np

from pangrams.encoder import WordEntry

CHUNK_ELEMENTS = 1 << 22
"""Maximum number of pairwise comparisons evaluated in a single numpy operation."""


def _dominated_rows(candidates: np.ndarray, kept: np.ndarray) -> np.ndarray:
    """Return a boolean array marking the candidates that are a subset of some kept mask."""
    dominated = np.zeros(len(candidates), dtype=bool)
    if len(kept) == 0:
        return dominated
    rows_per_chunk = max(1, CHUNK_ELEMENTS // len(kept))
    for start in range(0, len(candidates), rows_per_chunk):
        chunk = candidates[start : start + rows_per_chunk, None]
        dominated[start : start + rows_per_chunk] = ((chunk & kept[None, :]) == chunk).any(axis=1)
    return dominated


def prune_subsets(entries: Sequence[WordEntry]) -> list[WordEntry]:
    """Remove entries whose mask is a strict subset of another entry's mask.

    Entries are processed in order of decreasing letter count, so every mask is only compared
    against masks with more letters that have already been retained.  Since the subset relation
    is transitive, this removes exactly the entries dominated by some other entry.

    Args:
        entries: Entries with distinct masks.

    Returns:
        The retained entries, sorted by mask.
    """
    by_size = sorted(entries, key=lambda e: e.mask.bit_count(), reverse=True)
    kept_entries: list[WordEntry] = []
    kept = np.zeros(0, dtype=np.uint32)

    for _, group in groupby(by_size, key=lambda e: e.mask.bit_count()):
        group = list(group)
        candidates = np.array([e.mask for e in group], dtype=np.uint32)
        dominated = _dominated_rows(candidates, kept)
        survivors = [entry for entry, flag in zip(group, dominated) if not flag]
        kept_entries.extend(survivors)
        kept = np.concatenate([kept, np.array([e.mask for e in survivors], dtype=np.uint32)])

    return sorted(kept_entries)
