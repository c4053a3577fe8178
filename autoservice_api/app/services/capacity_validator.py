"""
Admission check for assigning a task to a mechanic.

``can_assign`` is a pure function: given the mechanic, the candidate
task's brand and complexity and the mechanic's current complexity sum,
it decides whether the task may be added.  It performs no I/O; callers
read the sum from live data inside the same write transaction as the
write that follows an admission.

Checks run in order and the first failure wins:

1. the mechanic must exist (``NotFoundError``);
2. the brand must be one the mechanic services, compared exactly and
   case‑sensitively (``BrandMismatchError``);
3. ``current_sum + complexity`` must not exceed the mechanic's
   ``max_complexity`` (``CapacityExceededError``).  Reaching the limit
   exactly is allowed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from autoservice_api.app.core.errors import (
    AssignmentError,
    BrandMismatchError,
    CapacityExceededError,
    NotFoundError,
)
from autoservice_api.app.schemas.mechanic import MechanicRead


@dataclass(frozen=True)
class Admission:
    """Outcome of ``can_assign``: admitted, or rejected with an error."""

    rejection: Optional[AssignmentError] = None

    @property
    def admitted(self) -> bool:
        return self.rejection is None

    def raise_for_rejection(self) -> None:
        if self.rejection is not None:
            raise self.rejection


ADMIT = Admission()


def can_assign(
    mechanic: Optional[MechanicRead],
    brand: str,
    complexity: int,
    current_sum: int,
) -> Admission:
    if mechanic is None:
        return Admission(NotFoundError("Mechanic"))
    if brand not in mechanic.brands:
        return Admission(BrandMismatchError(brand, mechanic.brands))
    new_sum = current_sum + complexity
    if new_sum > mechanic.max_complexity:
        return Admission(CapacityExceededError(new_sum, mechanic.max_complexity))
    return ADMIT
