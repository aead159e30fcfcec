import pytest

from unitas.units import Charge, Current, Time


def test_charge_ladder():
    assert Charge.in_mC(1).as_C() == pytest.approx(1e-3)
    assert Charge.in_kilocoulombs(2).as_C() == 2000.0
    assert str(Charge(3)) == "3 C"
    assert Charge(1).long() == "1 coulomb"

def test_charge_from_current_time():
    q = Charge.from_current_time(Current.in_mA(500), Time.in_h(2))
    assert q.as_C() == 3600.0
    assert Charge.from_time_current(Time.in_h(2), Current.in_mA(500)) == q
    assert q.calc_current(Time.in_h(2)) == Current.in_mA(500)
    assert q.calc_time(Current.in_mA(500)) == Time.in_h(2)

def test_elementary_charge():
    assert Charge.ELEMENTARY.as_C() == 1.602176634e-19
    assert Charge.ELEMENTARY.as_aC() == pytest.approx(0.1602176634)
