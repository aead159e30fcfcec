"""Electric charge."""

from __future__ import annotations

from unitas import constants as C
from unitas.core.dimensions import CHARGE
from unitas.core.quantity import ScalarQuantity, constant
from unitas.core.unit import Kind, QuantityMetadata
from unitas.core.utils import divide
from unitas.units.base import Current, Time


class Charge(ScalarQuantity):
    META = QuantityMetadata(
        symbol="C",
        unicode_symbol="C",
        singular="coulomb",
        plural="coulombs",
        kind=Kind.SCALAR,
        dim=CHARGE,
    )
    __slots__ = ()

    ELEMENTARY = constant(C.ELEMENTARY_CHARGE)

    # Q = I · t
    @classmethod
    def from_current_time(cls, current: Current, time: Time) -> Charge:
        return cls(current.magnitude * time.magnitude)

    @classmethod
    def from_time_current(cls, time: Time, current: Current) -> Charge:
        return cls.from_current_time(current, time)

    def calc_current(self, time: Time) -> Current:
        return Current(divide(self._m, time.magnitude))

    def calc_time(self, current: Current) -> Time:
        return Time(divide(self._m, current.magnitude))


__all__ = ["Charge"]
