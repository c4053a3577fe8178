"""Tests for the pure admission check."""

import pytest

from autoservice_api.app.core.errors import (
    BrandMismatchError,
    CapacityExceededError,
    ErrorKind,
    NotFoundError,
)
from autoservice_api.app.schemas.mechanic import MechanicRead
from autoservice_api.app.services.capacity_validator import can_assign


@pytest.fixture
def audi_mechanic() -> MechanicRead:
    return MechanicRead(id="m-1", name="Anna", brands=["Audi", "Toyota"], max_complexity=10)


class TestCanAssign:
    def test_admits_below_capacity(self, audi_mechanic):
        admission = can_assign(audi_mechanic, "Audi", 3, 4)
        assert admission.admitted
        assert admission.rejection is None

    def test_admits_exactly_at_capacity(self, audi_mechanic):
        assert can_assign(audi_mechanic, "Audi", 4, 6).admitted

    def test_rejects_one_over_capacity(self, audi_mechanic):
        admission = can_assign(audi_mechanic, "Audi", 5, 6)
        assert not admission.admitted
        assert isinstance(admission.rejection, CapacityExceededError)
        assert admission.rejection.kind is ErrorKind.CAPACITY_EXCEEDED
        assert admission.rejection.would_be_sum == 11
        assert admission.rejection.limit == 10

    def test_missing_mechanic_is_not_found(self):
        admission = can_assign(None, "Audi", 1, 0)
        assert isinstance(admission.rejection, NotFoundError)
        assert admission.rejection.entity == "Mechanic"

    def test_unknown_brand_is_rejected(self, audi_mechanic):
        admission = can_assign(audi_mechanic, "BMW", 1, 0)
        assert isinstance(admission.rejection, BrandMismatchError)
        assert admission.rejection.brand == "BMW"
        assert admission.rejection.allowed == ["Audi", "Toyota"]

    def test_brand_match_is_case_sensitive(self, audi_mechanic):
        admission = can_assign(audi_mechanic, "audi", 1, 0)
        assert isinstance(admission.rejection, BrandMismatchError)

    @pytest.mark.parametrize("complexity", [0, 1, 10, 50])
    def test_brand_checked_regardless_of_complexity(self, audi_mechanic, complexity):
        admission = can_assign(audi_mechanic, "Ford", complexity, 0)
        assert isinstance(admission.rejection, BrandMismatchError)

    def test_brand_mismatch_wins_over_capacity(self, audi_mechanic):
        admission = can_assign(audi_mechanic, "Ford", 100, 10)
        assert isinstance(admission.rejection, BrandMismatchError)

    def test_zero_capacity_admits_zero_complexity(self):
        mechanic = MechanicRead(id="m-2", name="Boris", brands=["Ford"], max_complexity=0)
        assert can_assign(mechanic, "Ford", 0, 0).admitted
        assert not can_assign(mechanic, "Ford", 1, 0).admitted

    def test_raise_for_rejection(self, audi_mechanic):
        with pytest.raises(CapacityExceededError):
            can_assign(audi_mechanic, "Audi", 11, 0).raise_for_rejection()
        can_assign(audi_mechanic, "Audi", 1, 0).raise_for_rejection()
