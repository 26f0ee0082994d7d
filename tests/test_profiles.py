"""Tests for weapon profiles, weapon slots and unit profiles."""

from dataclasses import FrozenInstanceError

import pytest

from aos.errors import InvalidSelection, InvalidUnitSize, MissingParameter, UnhandledVariant
from aos.profiles import AdditionalWeapon, BaseWeapon, UnitProfile, WeaponProfile

BLADE = WeaponProfile("Blade", attacks=2, to_hit=3, to_wound=4, rend=1, damage=1)
AXE = WeaponProfile("Axe", attacks=3, to_hit=4, to_wound=3, rend=1, damage=2)


def make_unit(**kw: object) -> UnitProfile:
    """Create a minimal UnitProfile for testing."""
    defaults: dict = dict(
        name="Test Unit", base_weapon=BaseWeapon([BLADE, AXE]),
        save=4, wounds=2, min_size=5, max_size=20,
    )
    defaults.update(kw)
    return UnitProfile(**defaults)


# -----------------------------------------------------------
# WeaponProfile
# -----------------------------------------------------------


class TestWeaponProfile:
    def test_immutable(self) -> None:
        with pytest.raises(FrozenInstanceError):
            BLADE.attacks = 5  # type: ignore[misc]

    def test_defaults(self) -> None:
        w = WeaponProfile("Fist")
        assert w.range == 1
        assert w.damage_type == "fixed"

    def test_max_damage(self) -> None:
        assert AXE.max_damage() == 6


# -----------------------------------------------------------
# Weapon slots
# -----------------------------------------------------------


class TestWeaponSlot:
    """Selection behavior shared by base and additional slots."""

    def test_base_starts_on_first_option(self) -> None:
        assert BaseWeapon([BLADE, AXE]).weapon() is BLADE

    def test_select(self) -> None:
        slot = BaseWeapon([BLADE, AXE])
        slot.select(1)
        assert slot.weapon() is AXE

    def test_select_out_of_range(self) -> None:
        slot = BaseWeapon([BLADE, AXE])
        with pytest.raises(InvalidSelection):
            slot.select(2)
        with pytest.raises(InvalidSelection):
            slot.select(-1)

    def test_stale_index_rejected(self) -> None:
        """An index set directly past the options still fails on use."""
        slot = BaseWeapon([BLADE])
        slot.selected = 3
        with pytest.raises(InvalidSelection):
            slot.weapon()

    def test_mandatory_slot_cannot_be_cleared(self) -> None:
        with pytest.raises(InvalidSelection):
            BaseWeapon([BLADE]).select(None)

    def test_optional_starts_empty(self) -> None:
        slot = AdditionalWeapon("replace_one_in_unit", [AXE])
        assert slot.selected is None
        assert slot.resolve() is None

    def test_weapon_on_empty_slot(self) -> None:
        slot = AdditionalWeapon("replace_one_in_unit", [AXE])
        with pytest.raises(InvalidSelection):
            slot.weapon()

    def test_optional_can_be_cleared(self) -> None:
        slot = AdditionalWeapon("replace_one_in_unit", [AXE])
        slot.select(0)
        assert slot.weapon() is AXE
        slot.select(None)
        assert slot.resolve() is None

    def test_mandatory_additional_starts_selected(self) -> None:
        slot = AdditionalWeapon("replace_one_in_unit", [AXE, BLADE], optional=False)
        assert slot.weapon() is AXE

    def test_needs_options(self) -> None:
        with pytest.raises(ValueError):
            BaseWeapon([])

    def test_invalid_selection_is_index_error(self) -> None:
        """Callers that guard indexes generically still catch it."""
        with pytest.raises(IndexError):
            BaseWeapon([BLADE]).select(1)


class TestModelCounts:
    def test_base_weapon_arms_everyone(self) -> None:
        slot = BaseWeapon([BLADE])
        assert slot.model_count(20) == 20
        assert slot.affected_model_count(20) == 20
        assert slot.replace_model_count(20) == 0

    def test_replace_one_in_unit(self) -> None:
        slot = AdditionalWeapon("replace_one_in_unit", [AXE])
        assert slot.model_count(20) == 1
        assert slot.replace_model_count(20) == 1

    def test_replace_one_in_n(self) -> None:
        slot = AdditionalWeapon("replace_one_in_n", [AXE], one_in_n=5)
        assert slot.model_count(20) == 4
        assert slot.replace_model_count(20) == 4
        assert slot.affected_model_count(20) == 4

    def test_additional_every_model(self) -> None:
        slot = AdditionalWeapon("additional_every_model", [AXE])
        assert slot.model_count(20) == 20
        assert slot.replace_model_count(20) == 0

    def test_one_in_n_missing(self) -> None:
        slot = AdditionalWeapon("replace_one_in_n", [AXE])
        with pytest.raises(MissingParameter):
            slot.model_count(20)
        with pytest.raises(MissingParameter):
            slot.replace_model_count(20)

    def test_unknown_kind(self) -> None:
        slot = AdditionalWeapon("replace_everyone", [AXE])  # type: ignore[arg-type]
        with pytest.raises(UnhandledVariant):
            slot.model_count(20)
        with pytest.raises(UnhandledVariant):
            slot.replace_model_count(20)


# -----------------------------------------------------------
# UnitProfile
# -----------------------------------------------------------


class TestUnitProfile:
    def test_selected_size_defaults_to_min(self) -> None:
        assert make_unit().selected_size == 5

    def test_model_count(self) -> None:
        assert make_unit(selected_size=15).model_count() == 15

    def test_size_not_a_multiple(self) -> None:
        with pytest.raises(InvalidUnitSize):
            make_unit(selected_size=7).model_count()

    def test_size_too_big(self) -> None:
        with pytest.raises(InvalidUnitSize):
            make_unit(selected_size=25).model_count()

    def test_size_negative(self) -> None:
        unit = make_unit()
        unit.selected_size = -5
        with pytest.raises(InvalidUnitSize):
            unit.model_count()

    def test_needs_min_size(self) -> None:
        with pytest.raises(ValueError):
            make_unit(min_size=0)

    def test_max_must_be_multiple_of_min(self) -> None:
        with pytest.raises(ValueError):
            make_unit(min_size=5, max_size=12)

    def test_sizes(self) -> None:
        assert make_unit().sizes() == [5, 10, 15, 20]

    def test_weapon(self) -> None:
        unit = make_unit()
        assert unit.weapon() is BLADE
        unit.base_weapon.select(1)
        assert unit.weapon() is AXE

    def test_selected_additional_weapons(self) -> None:
        chosen = AdditionalWeapon("replace_one_in_unit", [AXE], optional=False)
        empty = AdditionalWeapon("replace_one_in_n", [AXE], one_in_n=5)
        unit = make_unit(additional_weapons=[chosen, empty])
        assert unit.selected_additional_weapons() == [chosen]

    def test_max_damage(self) -> None:
        unit = make_unit(selected_size=10)
        assert unit.max_damage() == BLADE.max_damage() * 10

    def test_no_ignore_wounds_by_default(self) -> None:
        assert make_unit().ignore_wounds is None
