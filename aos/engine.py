"""
Damage engine: turns two unit profiles into a damage distribution.

An attack in Age of Sigmar runs in stages. Every attack rolls to hit;
every hit rolls to wound; the target rolls a save for every wound; every
unsaved wound deals the weapon's damage; and targets with an "ignore
wounds" rule roll once more for every point of damage. Each stage is a
batch of independent d6 tests, so the number of successes is binomial.
The engine enumerates every branch of that tree, weighting each by its
probability, to get the exact distribution of damage from one weapon
group. A unit can attack with several weapon groups (the base weapon, a
champion's weapon, a mount's attacks), which are independent of each
other, so their distributions are convolved into the unit's total.
"""

from __future__ import annotations

import logging

from aos.dice import BinomialTable, clamp, prob_dice_test
from aos.errors import InvalidSelection, UnhandledVariant
from aos.histogram import Histogram
from aos.profiles import UnitProfile, WeaponProfile
from aos.records import DamageBin, ProfileRecord, WeaponRecord

logger = logging.getLogger(__name__)

DAMAGE_DICE = {"d3": 3, "d6": 6}
"""Die size rolled per unsaved wound for each variable damage type."""


class Engine:
    """Computes damage distributions for one unit attacking another.

    Owns the binomial cache used by every probability it works out, and
    the record of the last unit-level calculation. The class attributes
    below are rule switches; override them per engine with keyword
    arguments, e.g. ``Engine(roll_variable_damage=True)``.
    """

    wound_roll_uses_to_hit: bool = True
    """Roll wounds against the weapon's to-hit value rather than its
    to-wound value. This reproduces the numbers the calculator has always
    produced; set it to False to roll wounds against to-wound."""

    roll_variable_damage: bool = False
    """Roll a die for the damage of every unsaved wound on d3 and d6
    weapons. When False, every weapon deals its flat damage value."""

    best_save: int = 2
    """No modifier can make a save better than this."""

    def __init__(self, table: BinomialTable | None = None, **settings: bool | int) -> None:
        self.table = table if table is not None else BinomialTable()
        for name, value in settings.items():
            if name.startswith("_") or not hasattr(type(self), name) or callable(getattr(type(self), name)):
                raise TypeError(f"unknown engine setting: {name!r}")
            setattr(self, name, value)
        self.weapon_record: WeaponRecord | None = None
        self.profile_record: ProfileRecord | None = None

    def prob(self, rolls: int, successes: int, threshold: int) -> float:
        """Binomial dice test probability using this engine's cache."""
        return prob_dice_test(rolls, successes, threshold, self.table)

    def modifiers(self, unit: UnitProfile, target: UnitProfile, weapon: WeaponProfile, model_count: int) -> WeaponRecord:
        """Work out the modified thresholds for one weapon group.

        The hit and wound modifiers come from the attacking unit. The save
        modifier belongs to the target, and the weapon's rend worsens the
        target's save.
        """
        to_wound = weapon.to_hit if self.wound_roll_uses_to_hit else weapon.to_wound
        return WeaponRecord(
            weapon=weapon.name,
            model_count=model_count,
            total_attacks=weapon.attacks * model_count,
            to_hit=clamp(weapon.to_hit - unit.hit_modifier, 1, 6),
            to_wound=clamp(to_wound - unit.wound_modifier, 1, 6),
            to_save=max(target.save - target.save_modifier + weapon.rend, self.best_save),
            damage=weapon.damage + unit.damage_modifier,
            damage_type=weapon.damage_type,
            ignore_wounds=target.ignore_wounds,
        )

    def _damage_die(self, weapon: WeaponProfile) -> int | None:
        """Sides of the damage die this weapon rolls, or None for flat."""
        if weapon.damage_type == "fixed" or not self.roll_variable_damage:
            return None
        if weapon.damage_type not in DAMAGE_DICE:
            raise UnhandledVariant(f"unhandled damage type {weapon.damage_type!r}")
        return DAMAGE_DICE[weapon.damage_type]

    def _wound_damage(self, sides: int, modifier: int, max_wounds: int) -> list[tuple[float, ...]]:
        """Damage distributions for 0 through max_wounds unsaved wounds
        when each wound rolls its own damage die."""
        per_wound = Histogram()
        for face in range(1, sides + 1):
            per_wound.add(face + modifier, 1 / sides)

        dists = [Histogram.point_mass(0)]
        for _ in range(max_wounds):
            dists.append(dists[-1].merge(per_wound))
        return [d.histogram() for d in dists]

    def _add_damage(self, histogram: Histogram, target: UnitProfile, damage: int, p: float) -> None:
        """Add ``damage`` points at probability ``p``, letting the target
        try to ignore each point if it can."""
        if damage < 0:
            raise ValueError(f"damage must be non-negative, got {damage}")
        if target.ignore_wounds is None:
            histogram.add(damage, p)
            return

        for not_ignored in range(damage + 1):
            p_not_ignored = self.prob(damage, damage - not_ignored, target.ignore_wounds)
            histogram.add(not_ignored, p * p_not_ignored)

    def weapon_damage(self, unit: UnitProfile, target: UnitProfile, weapon: WeaponProfile, model_count: int) -> Histogram:
        """Distribution of damage dealt by ``model_count`` models attacking
        ``target`` with ``weapon``.

        Enumerates every number of hits, then every number of wounds from
        those hits, then every number of failed saves from those wounds.
        The record of the derived thresholds is left on
        ``self.weapon_record``.
        """
        rec = self.modifiers(unit, target, weapon, model_count)
        sides = self._damage_die(weapon)
        wound_damage = self._wound_damage(sides, unit.damage_modifier, rec.total_attacks) if sides else None

        weapon_damage = Histogram()

        def handle_damage(unsaved: int, p: float) -> None:
            if wound_damage is None:
                self._add_damage(weapon_damage, target, unsaved * rec.damage, p)
                return
            for damage, p_damage in enumerate(wound_damage[unsaved]):
                if p_damage:
                    self._add_damage(weapon_damage, target, damage, p * p_damage)

        total_attacks = rec.total_attacks
        for hits in range(total_attacks + 1):
            p_hits = self.prob(total_attacks, hits, rec.to_hit)
            for wounds in range(hits + 1):
                p_wounds = p_hits * self.prob(hits, wounds, rec.to_wound)

                if not rec.saves:
                    # Rend has pushed the save past 6: every wound goes through.
                    handle_damage(wounds, p_wounds)
                    continue

                for unsaved in range(wounds + 1):
                    p_unsaved = self.prob(wounds, wounds - unsaved, rec.to_save)
                    handle_damage(unsaved, p_wounds * p_unsaved)

        rec.expected_damage = weapon_damage.expected_value()
        self.weapon_record = rec
        logger.debug(
            "%s: %d x %s, %d attacks at %d+/%d+ vs %d+ save, %d damage: expected %.3f",
            unit.name, model_count, weapon.name, total_attacks,
            rec.to_hit, rec.to_wound, rec.to_save, rec.damage, rec.expected_damage,
        )
        return weapon_damage

    def damage_profile(self, unit: UnitProfile, target: UnitProfile) -> list[DamageBin]:
        """Distribution of total damage ``unit`` deals to ``target``.

        The base weapon arms every model not displaced by a selected
        replacement weapon; each selected additional weapon arms the
        models its slot kind affects. Weapon groups roll independently, so
        their distributions are convolved. The result has one bin for
        every damage value from 0 to the maximum possible, including
        values with zero probability.

        Raises InvalidSelection if the selected replacement weapons
        displace more models than the unit has.
        """
        unit_models = unit.model_count()
        selected = unit.selected_additional_weapons()

        base_model_count = unit.base_weapon.affected_model_count(unit_models)
        for slot in selected:
            base_model_count -= slot.replace_model_count(unit_models)
        if base_model_count < 0:
            raise InvalidSelection(
                f"{unit.name}: replacement weapons displace {unit_models - base_model_count} "
                f"models but the unit has {unit_models}"
            )

        record = ProfileRecord(attacker=unit.name, target=target.name, base_model_count=base_model_count)

        groups = [(unit.weapon(), base_model_count)]
        groups.extend((slot.weapon(), slot.affected_model_count(unit_models)) for slot in selected)

        histogram = Histogram.point_mass(0)
        for weapon, model_count in groups:
            histogram = histogram.merge(self.weapon_damage(unit, target, weapon, model_count))
            record.weapons.append(self.weapon_record)

        record.bins = [
            DamageBin(damage=damage, probability=p)
            for damage, p in enumerate(histogram.histogram())
        ]
        self.profile_record = record
        return record.bins
