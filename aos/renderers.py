"""Summaries and renderers for damage calculation results.

The engine only produces a distribution. The helpers here derive the
numbers people actually ask about (expected damage, the chance of wiping
out the target) and TextRenderer turns a ProfileRecord into
terminal-friendly lines. The Streamlit front end consumes the same
records and helpers.
"""

from __future__ import annotations

from collections.abc import Iterable

from aos.profiles import UnitProfile
from aos.records import DamageBin, ProfileRecord, WeaponRecord


def expected_value(bins: Iterable[DamageBin]) -> float:
    """Average damage: the sum of damage times probability."""
    return sum(b.damage * b.probability for b in bins)


def damage_needed(target: UnitProfile) -> int:
    """Damage it takes to destroy every model in the target unit."""
    return target.selected_size * target.wounds


def kill_probability(bins: Iterable[DamageBin], target: UnitProfile) -> float:
    """The chance of dealing at least enough damage to destroy the target."""
    needed = damage_needed(target)
    return sum(b.probability for b in bins if b.damage >= needed)


class TextRenderer:
    """Renders a ProfileRecord to text lines.

    Each render_* method returns a list of strings, one per line.
    """

    def render_profile(self, record: ProfileRecord, target: UnitProfile | None = None) -> list[str]:
        lines: list[str] = [f"{record.attacker} vs {record.target}"]
        for weapon in record.weapons:
            lines.append(self.render_weapon(weapon))
        lines.extend(self.render_bins(record.bins))
        lines.append(f"EV = {expected_value(record.bins):.2f}")
        if target is not None:
            lines.append(f"P(kill) = {kill_probability(record.bins, target) * 100:.2f}%")
        return lines

    def render_weapon(self, record: WeaponRecord) -> str:
        save = f"{record.to_save}+ save" if record.saves else "no save"
        line = (
            f"    {record.model_count} x {record.weapon}: {record.total_attacks} attacks,"
            f" {record.to_hit}+ to hit, {record.to_wound}+ to wound, {save},"
            f" {record.damage} damage"
        )
        if record.ignore_wounds is not None:
            line += f", ignored on {record.ignore_wounds}+"
        return line + f" (expected {record.expected_damage:.2f})"

    def render_bins(self, bins: list[DamageBin]) -> list[str]:
        return [f"{b.damage:>4}: {b.probability * 100:6.2f}%" for b in bins]
