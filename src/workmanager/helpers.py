# src/workmanager/helpers.py
import math

import numpy as np

from workmanager.typing import Bool1D, Bool2D, Float1D, Float2D, Idx1D, Int2D


def average_relevant_skill(skill_level: Float2D, relevance: Bool2D) -> Float2D:
    """
    Mean level over each work type's relevant skills.

        avg[i, j] = Σ_s level[i, s] · rel[j, s]  /  Σ_s rel[j, s]

    Work types without relevant skills average to 0.0.
    Shape ``(n_workers, n_work_types)``.
    """
    rel = relevance.astype(np.float64)
    counts = rel.sum(axis=1)
    totals = skill_level @ rel.T
    out = np.zeros_like(totals)
    np.divide(totals, counts, out=out, where=counts > 0)
    return out


def max_relevant_passion(passion: Int2D, relevance: Bool2D) -> Int2D:
    """
    Highest passion over each work type's relevant skills.

    Work types without relevant skills yield ``Passion.NONE`` (0).
    Shape ``(n_workers, n_work_types)``.
    """
    if passion.shape[0] == 0 or relevance.shape[0] == 0:
        return np.zeros((passion.shape[0], relevance.shape[0]), dtype=np.int64)
    # (workers, 1, skills) masked by (1, work types, skills)
    masked = np.where(relevance[np.newaxis, :, :], passion[:, np.newaxis, :], 0)
    if masked.shape[2] == 0:
        return np.zeros(masked.shape[:2], dtype=np.int64)
    return masked.max(axis=2).astype(np.int64)


def tied_top(values: Float1D, candidates: Bool1D) -> Bool1D:
    """
    Candidates whose value reaches the floored maximum.

        threshold = ⌊ max_{i ∈ C} v_i ⌋
        winners   = { i ∈ C : v_i ≥ threshold }

    Every worker tied at (or within one floor step of) the top wins, not
    just the first. Returns an all-False mask when there are no candidates;
    the max is never taken over an empty set.
    """
    winners = np.zeros(values.shape[0], dtype=np.bool_)
    if not candidates.any():
        return winners
    threshold = math.floor(values[candidates].max())
    winners[candidates] = values[candidates] >= threshold
    return winners


def order_by_descending(values: Float1D) -> Idx1D:
    """Indices sorting *values* high → low, ties kept in roster order."""
    return np.argsort(-values, kind="stable")
