"""
Warscroll profiles: weapons, weapon slots and units.

A WeaponProfile is a fixed stat line. A unit chooses among weapon options
through weapon slots: every unit has a base weapon slot that arms all of
its models, and may have additional slots that either swap some models'
base weapon for another (the unit champion's weapon, one model in five
carrying a gore-choppa) or give every model an extra weapon (a mount's
hooves and teeth).

WeaponProfiles never change. UnitProfiles and their slots carry a handful
of user-adjustable fields (unit size, weapon selections, the four combat
modifiers) which the front end sets between calculations.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from aos.errors import InvalidSelection, InvalidUnitSize, MissingParameter, UnhandledVariant
from aos.types import DamageType, SlotKind


@dataclass(frozen=True)
class WeaponProfile:
    """A single weapon's stat line."""

    name: str
    range: int = 1
    """Reach in inches."""

    attacks: int = 0
    """Attacks made per model carrying the weapon."""

    to_hit: int = 0
    to_wound: int = 0

    rend: int = 0
    """How much the weapon worsens the target's save."""

    damage: int = 0
    """Damage per unsaved wound (the fallback value for variable damage)."""

    damage_type: DamageType = "fixed"

    def max_damage(self) -> int:
        """Damage from one model if every attack hits, wounds and goes
        unsaved, at the flat damage value."""
        return self.attacks * self.damage


class WeaponSlot:
    """A choice among weapon options that applies to some of a unit's models.

    ``selected`` is the index of the chosen option, or None when an
    optional slot has nothing chosen. Subclasses define how many models
    the slot arms and how many of them it takes away from the base weapon.
    """

    def __init__(self, options: list[WeaponProfile] | tuple[WeaponProfile, ...], *, optional: bool = False) -> None:
        if not options:
            raise ValueError("a weapon slot needs at least one weapon option")
        self.options: tuple[WeaponProfile, ...] = tuple(options)
        self.optional = optional
        self.selected: int | None = None if optional else 0

    def __repr__(self) -> str:
        names = [w.name for w in self.options]
        return f"{type(self).__name__}({names!r}, selected={self.selected!r})"

    def select(self, index: int | None) -> None:
        """Choose an option by index, or clear an optional slot with None."""
        if index is None:
            if not self.optional:
                raise InvalidSelection("a mandatory weapon slot must have a selection")
        elif not 0 <= index < len(self.options):
            raise InvalidSelection(f"invalid weapon option {index}")
        self.selected = index

    def resolve(self) -> WeaponProfile | None:
        """Return the chosen weapon, or None when nothing is chosen."""
        if self.selected is None:
            return None
        if not 0 <= self.selected < len(self.options):
            raise InvalidSelection(f"invalid weapon option {self.selected}")
        return self.options[self.selected]

    def weapon(self) -> WeaponProfile:
        """Return the chosen weapon; it's an error to ask an empty slot."""
        weapon = self.resolve()
        if weapon is None:
            raise InvalidSelection("weapon() called on a weapon slot with no weapon selected")
        return weapon

    def model_count(self, unit_model_count: int) -> int:
        raise NotImplementedError

    def replace_model_count(self, unit_model_count: int) -> int:
        raise NotImplementedError

    def affected_model_count(self, unit_model_count: int) -> int:
        """How many models attack with this slot's weapon."""
        return self.model_count(unit_model_count)


class BaseWeapon(WeaponSlot):
    """The weapon every model in the unit starts with."""

    def __init__(self, options: list[WeaponProfile] | tuple[WeaponProfile, ...]) -> None:
        super().__init__(options, optional=False)

    def model_count(self, unit_model_count: int) -> int:
        return unit_model_count

    def replace_model_count(self, unit_model_count: int) -> int:
        return 0


class AdditionalWeapon(WeaponSlot):
    """A secondary loadout: a replacement weapon for some models, or an
    extra weapon for all of them.

    Args:
        kind: Which loadout rule the slot follows.
        options: The weapons the slot can carry.
        optional: Whether the slot may be left empty. Optional slots start
            empty; mandatory ones start on their first option.
        one_in_n: For replace_one_in_n slots, one model in every N swaps.
    """

    def __init__(
        self,
        kind: SlotKind,
        options: list[WeaponProfile] | tuple[WeaponProfile, ...],
        *,
        optional: bool = True,
        one_in_n: int | None = None,
    ) -> None:
        super().__init__(options, optional=optional)
        self.kind = kind
        self.one_in_n = one_in_n

    def __repr__(self) -> str:
        names = [w.name for w in self.options]
        return f"AdditionalWeapon({self.kind!r}, {names!r}, selected={self.selected!r})"

    def _one_in_n_count(self, unit_model_count: int) -> int:
        if self.one_in_n is None:
            raise MissingParameter("replace_one_in_n weapon slot has no one_in_n")
        return unit_model_count // self.one_in_n

    def model_count(self, unit_model_count: int) -> int:
        """How many models carry this slot's weapon."""
        if self.kind == "replace_one_in_unit":
            return 1
        elif self.kind == "replace_one_in_n":
            return self._one_in_n_count(unit_model_count)
        elif self.kind == "additional_every_model":
            return unit_model_count
        raise UnhandledVariant(f"unhandled additional weapon kind {self.kind!r} in model_count()")

    def replace_model_count(self, unit_model_count: int) -> int:
        """How many models give up their base weapon for this slot's.

        Additional weapons supplement the base weapon, so they displace no
        one.
        """
        if self.kind == "replace_one_in_unit":
            return 1
        elif self.kind == "replace_one_in_n":
            return self._one_in_n_count(unit_model_count)
        elif self.kind == "additional_every_model":
            return 0
        raise UnhandledVariant(f"unhandled additional weapon kind {self.kind!r} in replace_model_count()")


@dataclass
class UnitProfile:
    """A unit's warscroll plus the user's current choices for it.

    Construction checks the warscroll itself (a minimum size, a maximum
    size that's a multiple of it). The selected size is only checked when
    ``model_count`` is called, since the front end changes it freely.
    """

    name: str
    base_weapon: BaseWeapon
    additional_weapons: list[AdditionalWeapon] = field(default_factory=list)

    movement: int = 0
    save: int = 7
    """Save roll needed; 7 or more means the unit has no save."""

    wounds: int = 1
    """Wounds per model."""

    bravery: int = 0
    points: int = 0

    min_size: int = 1
    max_size: int = 1
    selected_size: int = 0
    """Number of models fielded; 0 means "use min_size"."""

    hit_modifier: int = 0
    wound_modifier: int = 0
    save_modifier: int = 0
    damage_modifier: int = 0

    ignore_wounds: int | None = None
    """Roll needed to ignore each point of damage, or None if the unit has
    no such rule."""

    def __post_init__(self) -> None:
        if self.min_size <= 0:
            raise ValueError(f"{self.name}: unit must have a positive min size")
        if self.max_size <= 0 or self.max_size % self.min_size != 0:
            raise ValueError(f"{self.name}: max size {self.max_size} must be a multiple of min size {self.min_size}")
        if not self.selected_size:
            self.selected_size = self.min_size

    def weapon(self) -> WeaponProfile:
        """The base weapon currently selected."""
        return self.base_weapon.weapon()

    def model_count(self) -> int:
        """The validated number of models in the unit."""
        size = self.selected_size
        if size <= 0 or size % self.min_size != 0:
            raise InvalidUnitSize(f"{self.name}: size {size} is not a multiple of {self.min_size}")
        if not self.min_size <= size <= self.max_size:
            raise InvalidUnitSize(f"{self.name}: size {size} is outside {self.min_size}-{self.max_size}")
        return size

    def sizes(self) -> list[int]:
        """Every legal unit size, smallest first."""
        return list(range(self.min_size, self.max_size + 1, self.min_size))

    def selected_additional_weapons(self) -> list[AdditionalWeapon]:
        """Additional weapon slots that currently have a weapon chosen."""
        return [slot for slot in self.additional_weapons if slot.selected is not None]

    def max_damage(self) -> int:
        return self.weapon().max_damage() * self.selected_size
