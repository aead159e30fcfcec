"""
unitas.core.generator
=====================

Builds the ``in_<unit>`` / ``as_<unit>`` surface of every quantity class.

For each quantity the generator walks the prefix ladder once and produces a
``LinearUnit`` per prefix, registered under four spellings (ASCII and Unicode,
short and long). Non-SI and explicit compound units listed in the metadata are
added the same way. Every registered spelling that is a valid identifier then
becomes a class-method constructor and an instance accessor, both produced by
the two generic factories below.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping

from unitas.core.prefixes import LADDER
from unitas.core.unit import ExtraUnit, LinearUnit, QuantityMetadata
from unitas.core.utils import normalize_unit_name

logger = logging.getLogger(__name__)


class UnitTable:
    """Lookup of one quantity's units by any of their spellings.

    Filled once while the quantity class is created and never changed
    afterwards, so no locking is needed.
    """

    def __init__(self, owner: str) -> None:
        self.owner = owner
        self._units: Dict[str, LinearUnit] = {}

    def register(self, name: str, unit: LinearUnit) -> None:
        """Register ``unit`` under ``name``; re-registering the same unit is a no-op."""
        key = normalize_unit_name(name)
        existing = self._units.get(key)
        if existing is not None and existing != unit:
            raise ValueError(
                f"Cannot register unit '{key}' on {self.owner}: "
                f"the name is already taken by '{existing.name}'."
            )
        self._units[key] = unit

    def get(self, name: str) -> LinearUnit:
        """Lookup a unit by any spelling. Raises `ValueError` if unknown."""
        unit = self._units.get(normalize_unit_name(name))
        if unit is None:
            raise ValueError(f"Unknown unit symbol for {self.owner}: {name}")
        return unit

    def has(self, name: str) -> bool:
        return normalize_unit_name(name) in self._units

    def all(self) -> Mapping[str, LinearUnit]:
        return MappingProxyType(self._units)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"UnitTable({self.owner!r}, {len(self)} names)"


def _register_extra(table: UnitTable, extra: ExtraUnit) -> None:
    unit = LinearUnit(extra.symbol, factor=extra.factor)
    for name in (extra.symbol, extra.name, extra.unicode_symbol, extra.unicode_name):
        if name:
            table.register(name, unit)


def build_unit_table(owner: str, meta: QuantityMetadata) -> UnitTable:
    table = UnitTable(owner)
    for prefix in LADDER:
        unit = LinearUnit(meta.short_name(prefix), meta.effective_exponent(prefix))
        table.register(meta.short_name(prefix), unit)
        table.register(meta.long_name(prefix), unit)
        table.register(meta.short_name(prefix, unicode=True), unit)
        table.register(meta.long_name(prefix, unicode=True), unit)
    for extra in meta.extras:
        _register_extra(table, extra)
    return table


# --- the two generic functions ------------------------------------------------

def make_constructor(unit: LinearUnit) -> Callable[..., Any]:
    def constructor(cls, value):
        return cls._build(unit, value)

    constructor.__doc__ = f"Create the quantity from a value expressed in {unit.name}."
    return constructor


def make_accessor(unit: LinearUnit) -> Callable[..., Any]:
    def accessor(self):
        return self._read(unit)

    accessor.__doc__ = f"Return the value expressed in {unit.name}."
    return accessor


def install_units(cls: type, meta: QuantityMetadata) -> UnitTable:
    """Attach ``in_*`` and ``as_*`` for every unit of ``meta`` to ``cls``."""
    table = build_unit_table(cls.__name__, meta)
    count = 0
    for key, unit in table.all().items():
        for attr, fn in (
            (f"in_{key}", classmethod(make_constructor(unit))),
            (f"as_{key}", make_accessor(unit)),
        ):
            if not attr.isidentifier():
                continue
            if attr in cls.__dict__:
                raise ValueError(
                    f"Cannot generate '{attr}' on {cls.__name__}: "
                    "name conflicts with an attribute defined on the class."
                )
            func = fn.__func__ if isinstance(fn, classmethod) else fn
            func.__name__ = attr
            func.__qualname__ = f"{cls.__name__}.{attr}"
            setattr(cls, attr, fn)
            count += 1
    logger.debug("generated %d unit accessors for %s", count, cls.__name__)
    return table


__all__ = [
    "UnitTable",
    "build_unit_table",
    "make_constructor",
    "make_accessor",
    "install_units",
]
