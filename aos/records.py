"""Structured records of a damage calculation.

These dataclasses capture what the engine worked out along the way (the
modified roll thresholds for every weapon group, the model counts, and
the final distribution) so that renderers can show both the result and
how it was reached.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DamageBin:
    """The probability of dealing exactly ``damage`` damage."""

    damage: int
    probability: float


@dataclass
class WeaponRecord:
    """Record of one weapon group resolved against a target."""

    weapon: str
    model_count: int

    total_attacks: int = 0
    """Attacks per model times models attacking."""

    to_hit: int = 0
    """Hit roll needed after modifiers, clamped to 1-6."""

    to_wound: int = 0
    """Wound roll needed after modifiers, clamped to 1-6."""

    to_save: int = 0
    """Save roll the target needs after rend.  Above 6 means the target
    doesn't get to save at all."""

    damage: int = 0
    """Damage per unsaved wound after the damage modifier (the flat value
    for variable-damage weapons rolled without their die)."""

    damage_type: str = "fixed"
    ignore_wounds: int | None = None

    expected_damage: float = 0.0

    @property
    def saves(self) -> bool:
        """Whether the target rolls saves against this weapon."""
        return self.to_save <= 6


@dataclass
class ProfileRecord:
    """Top-level record of one unit attacking another."""

    attacker: str
    target: str
    base_model_count: int = 0
    weapons: list[WeaponRecord] = field(default_factory=list)
    bins: list[DamageBin] = field(default_factory=list)
