"""
Build profile objects from the static catalog in aos.data.

Weapons are immutable, so each weapon key maps to a single shared
WeaponProfile. Units are not: the front end changes their size, weapon
selections and modifiers, so :func:`unit` builds a fresh UnitProfile on
every call and no two callers ever share one.
"""

from __future__ import annotations

from typing import Any

from aos.data import ARMIES, WEAPONS
from aos.profiles import AdditionalWeapon, BaseWeapon, UnitProfile, WeaponProfile

_weapons: dict[str, WeaponProfile] = {}


def weapon(key: str) -> WeaponProfile:
    """Return the WeaponProfile for a key of aos.data.WEAPONS."""
    if key not in _weapons:
        _weapons[key] = WeaponProfile(**WEAPONS[key])
    return _weapons[key]


def armies() -> dict[str, list[str]]:
    """Return {army name: [unit names]} in catalog order."""
    return {army: [entry["name"] for entry in units] for army, units in ARMIES.items()}


def build_unit(entry: dict[str, Any], **overrides: Any) -> UnitProfile:
    """Build a UnitProfile from one catalog entry.

    Args:
        entry: A unit entry in the aos.data.ARMIES format.
        overrides: UnitProfile fields to set on the new unit, such as
            ``selected_size`` or ``hit_modifier``.
    """
    min_size, max_size = entry["size"]
    slots = [
        AdditionalWeapon(
            slot["kind"],
            [weapon(key) for key in slot["weapons"]],
            optional=slot.get("optional", True),
            one_in_n=slot.get("one_in_n"),
        )
        for slot in entry.get("additional_weapons", [])
    ]

    fields: dict[str, Any] = {
        "name": entry["name"],
        "base_weapon": BaseWeapon([weapon(key) for key in entry["weapons"]]),
        "additional_weapons": slots,
        "movement": entry["movement"],
        "save": entry["save"],
        "wounds": entry["wounds"],
        "bravery": entry["bravery"],
        "points": entry.get("points", 0),
        "min_size": min_size,
        "max_size": max_size,
        "ignore_wounds": entry.get("ignore_wounds"),
    }
    fields.update(overrides)
    return UnitProfile(**fields)


def unit(army: str, name: str, **overrides: Any) -> UnitProfile:
    """Build a fresh UnitProfile for the named unit of an army.

    Raises KeyError if the army or the unit isn't in the catalog.
    """
    for entry in ARMIES[army]:
        if entry["name"] == name:
            return build_unit(entry, **overrides)
    raise KeyError(f"{army} has no unit named {name!r}")
