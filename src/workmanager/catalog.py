"""
Static classification of the host's work-type universe.

The catalog is built once from the full list of work types and never
changes afterwards. It fixes the column order of every roster array and
precomputes the boolean masks the assignment passes select on.

Design Notes
------------
- Immutable (frozen=True); safe to share between worker pools
- Medical and hunting types are optional; a universe without them simply
  turns the corresponding pass into a no-op
- Unknown always-on or fallback keys are a configuration error and fail
  loudly at build time
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Sequence

import numpy as np

from workmanager.typing import Bool1D, Bool2D

__all__ = [
    "ALWAYS_ON_KEYS",
    "CLEANING_KEY",
    "FALLBACK_KEYS",
    "HAULING_KEY",
    "HUNTING_KEY",
    "MEDICAL_KEY",
    "MELEE_SKILL",
    "Passion",
    "SHOOTING_SKILL",
    "WorkCatalog",
    "WorkType",
]

ALWAYS_ON_KEYS = ("Firefighter", "Patient", "PatientBedRest", "BasicWorker")
HAULING_KEY = "Hauling"
CLEANING_KEY = "Cleaning"
FALLBACK_KEYS = (HAULING_KEY, CLEANING_KEY)
MEDICAL_KEY = "Doctor"
HUNTING_KEY = "Hunting"
SHOOTING_SKILL = "Shooting"
MELEE_SKILL = "Melee"


class Passion(IntEnum):
    """A worker's interest in a skill. Ordered: NONE < MINOR < MAJOR."""

    NONE = 0
    MINOR = 1
    MAJOR = 2


@dataclass(slots=True, frozen=True)
class WorkType:
    """
    A category of assignable labor defined by the host.

    Parameters
    ----------
    key : str
        Unique identifier (e.g. ``"Cooking"``).
    relevant_skills : tuple[str, ...]
        Skill keys whose levels and passions drive the work type. May be
        empty (e.g. hauling).
    label : str
        Display label; defaults to the key.
    """

    key: str
    relevant_skills: tuple[str, ...] = ()
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.key)


@dataclass(slots=True, frozen=True, eq=False)
class WorkCatalog:
    """
    Read-only classification of work types into the sets the passes use.

    Attributes
    ----------
    work_types : tuple[WorkType, ...]
        The full universe in host order; fixes roster column order.
    skills : tuple[str, ...]
        Every skill key referenced by a work type or by the hunting rule.
    relevance : Bool2D
        ``relevance[j, s]`` is True when skill ``s`` is relevant to work
        type ``j``. Shape ``(n_work_types, n_skills)``.
    always_on_mask, fallback_mask, general_mask : Bool1D
        Membership masks over work types.
    medical, hunting : int | None
        Column index of the special-cased types, None when absent.
    """

    work_types: tuple[WorkType, ...]
    skills: tuple[str, ...]
    relevance: Bool2D = field(repr=False)
    always_on_mask: Bool1D = field(repr=False)
    fallback_mask: Bool1D = field(repr=False)
    general_mask: Bool1D = field(repr=False)
    medical: int | None = None
    hunting: int | None = None

    @classmethod
    def from_work_types(
        cls,
        universe: Iterable[WorkType],
        *,
        always_on: Sequence[str] = ALWAYS_ON_KEYS,
        fallback: Sequence[str] = FALLBACK_KEYS,
        medical: str | None = MEDICAL_KEY,
        hunting: str | None = HUNTING_KEY,
    ) -> WorkCatalog:
        """
        Classify *universe* once.

        Raises
        ------
        ValueError
            If two work types share a key.
        KeyError
            If an always-on or fallback key is not part of the universe.
        """
        work_types = tuple(universe)
        keys = [w.key for w in work_types]
        if len(set(keys)) != len(keys):
            dupes = sorted({k for k in keys if keys.count(k) > 1})
            raise ValueError(f"Duplicate work type keys: {dupes}")

        index = {k: j for j, k in enumerate(keys)}
        for key in (*always_on, *fallback):
            if key not in index:
                raise KeyError(
                    f"Work type '{key}' not found in universe. "
                    f"Available work types: {', '.join(keys)}"
                )

        # Hunting compares ranged and melee skills even when no work type
        # lists them as relevant.
        skills: list[str] = []
        for w in work_types:
            for s in w.relevant_skills:
                if s not in skills:
                    skills.append(s)
        for s in (SHOOTING_SKILL, MELEE_SKILL):
            if s not in skills:
                skills.append(s)

        relevance = np.zeros((len(work_types), len(skills)), dtype=np.bool_)
        for j, w in enumerate(work_types):
            for s in w.relevant_skills:
                relevance[j, skills.index(s)] = True

        n = len(work_types)
        always_on_mask = np.zeros(n, dtype=np.bool_)
        always_on_mask[[index[k] for k in always_on]] = True
        fallback_mask = np.zeros(n, dtype=np.bool_)
        fallback_mask[[index[k] for k in fallback]] = True

        medical_idx = index.get(medical) if medical is not None else None
        hunting_idx = index.get(hunting) if hunting is not None else None

        general_mask = ~always_on_mask
        for special in (medical_idx, hunting_idx):
            if special is not None:
                general_mask[special] = False

        for arr in (relevance, always_on_mask, fallback_mask, general_mask):
            arr.flags.writeable = False

        return cls(
            work_types=work_types,
            skills=tuple(skills),
            relevance=relevance,
            always_on_mask=always_on_mask,
            fallback_mask=fallback_mask,
            general_mask=general_mask,
            medical=medical_idx,
            hunting=hunting_idx,
        )

    # ------------------------------------------------------------------ #
    #  lookups                                                            #
    # ------------------------------------------------------------------ #
    @property
    def n_work_types(self) -> int:
        return len(self.work_types)

    @property
    def n_skills(self) -> int:
        return len(self.skills)

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(w.key for w in self.work_types)

    def find(self, key: str) -> int | None:
        """Column index of work type *key*, or None if absent."""
        for j, w in enumerate(self.work_types):
            if w.key == key:
                return j
        return None

    def index_of(self, key: str) -> int:
        """Column index of work type *key* (KeyError if unknown)."""
        j = self.find(key)
        if j is None:
            raise KeyError(f"Work type '{key}' not found in catalog")
        return j

    def skill_index(self, key: str) -> int:
        """Column index of skill *key* (KeyError if unknown)."""
        try:
            return self.skills.index(key)
        except ValueError:
            raise KeyError(f"Skill '{key}' not found in catalog") from None

    # ------------------------------------------------------------------ #
    #  named sets                                                         #
    # ------------------------------------------------------------------ #
    def always_on_types(self) -> tuple[WorkType, ...]:
        """Firefighting, patient self-care and basic labor."""
        return self._select(self.always_on_mask)

    def fallback_types(self) -> tuple[WorkType, ...]:
        """Hauling and cleaning."""
        return self._select(self.fallback_mask)

    def general_types(self) -> tuple[WorkType, ...]:
        """Universe minus always-on, medical and hunting."""
        return self._select(self.general_mask)

    @property
    def skilled_general_mask(self) -> Bool1D:
        """General types with at least one relevant skill."""
        return self.general_mask & self.relevance.any(axis=1)

    @property
    def mental_domain_mask(self) -> Bool1D:
        """Everything except always-on and medical (hunting included)."""
        mask = ~self.always_on_mask
        if self.medical is not None:
            mask[self.medical] = False
        return mask

    def _select(self, mask: Bool1D) -> tuple[WorkType, ...]:
        return tuple(w for w, keep in zip(self.work_types, mask) if keep)

    def __repr__(self) -> str:
        return (
            f"WorkCatalog(n_work_types={self.n_work_types}, "
            f"n_skills={self.n_skills})"
        )
