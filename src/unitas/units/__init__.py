from importlib import import_module
from typing import Any, Dict

# Public name -> defining module. Modules are imported on first access so that
# ``import unitas.units`` stays cheap and free of circular-import hazards.
_EXPORTS: Dict[str, str] = {
    **dict.fromkeys(
        ("Time", "Length", "Distance", "Height", "Mass", "Current",
         "Temperature", "Intensity", "Amount"),
        "unitas.units.base",
    ),
    **dict.fromkeys(
        ("Area", "Volume", "Density", "Speed", "Velocity", "Acceleration",
         "Force", "Weight", "Moment", "Torque", "Momentum",
         "GravitationalFieldStrength", "Gfs", "Pressure", "Energy", "Work",
         "Power", "Frequency"),
        "unitas.units.mechanics",
    ),
    "Charge": "unitas.units.electromagnetism",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. ``unitas.units.Force`` imports the module that
    defines it on first use.
    """
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_EXPORTS))
