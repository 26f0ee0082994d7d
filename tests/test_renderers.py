"""Tests for result summaries, records and the text renderer."""

import pytest

from aos.profiles import BaseWeapon, UnitProfile, WeaponProfile
from aos.records import DamageBin, ProfileRecord, WeaponRecord
from aos.renderers import TextRenderer, damage_needed, expected_value, kill_probability

BINS = [DamageBin(0, 0.25), DamageBin(1, 0.25), DamageBin(2, 0.3), DamageBin(3, 0.2)]


def target(size: int = 1, wounds: int = 2) -> UnitProfile:
    return UnitProfile(
        name="Target", base_weapon=BaseWeapon([WeaponProfile("Fist")]),
        wounds=wounds, min_size=1, max_size=10, selected_size=size,
    )


class TestDamageBin:
    def test_immutable(self) -> None:
        b = DamageBin(1, 0.5)
        with pytest.raises(AttributeError):
            b.damage = 2  # type: ignore[misc]

    def test_equality(self) -> None:
        assert DamageBin(1, 0.5) == DamageBin(damage=1, probability=0.5)


class TestWeaponRecord:
    def test_saves(self) -> None:
        assert WeaponRecord("Blade", 1, to_save=6).saves
        assert not WeaponRecord("Blade", 1, to_save=7).saves


class TestSummaries:
    def test_expected_value(self) -> None:
        assert expected_value(BINS) == pytest.approx(0.25 + 0.6 + 0.6)

    def test_expected_value_empty(self) -> None:
        assert expected_value([]) == 0

    def test_damage_needed(self) -> None:
        assert damage_needed(target(size=5, wounds=3)) == 15

    def test_kill_probability(self) -> None:
        assert kill_probability(BINS, target(wounds=2)) == pytest.approx(0.5)

    def test_kill_out_of_reach(self) -> None:
        assert kill_probability(BINS, target(size=2, wounds=2)) == 0

    def test_kill_certain(self) -> None:
        assert kill_probability(BINS, target(wounds=0)) == pytest.approx(1.0)


def record() -> ProfileRecord:
    return ProfileRecord(
        attacker="Brutes",
        target="Mortek Guard",
        base_model_count=4,
        weapons=[
            WeaponRecord(
                "Choppas", 4, total_attacks=16, to_hit=3, to_wound=3,
                to_save=5, damage=1, ignore_wounds=6, expected_damage=3.95,
            ),
            WeaponRecord(
                "Boss Klaw", 1, total_attacks=4, to_hit=4, to_wound=4,
                to_save=7, damage=2, expected_damage=1.0,
            ),
        ],
        bins=BINS,
    )


class TestTextRenderer:
    def test_header(self) -> None:
        lines = TextRenderer().render_profile(record())
        assert lines[0] == "Brutes vs Mortek Guard"

    def test_weapon_lines(self) -> None:
        lines = TextRenderer().render_profile(record())
        assert lines[1] == (
            "    4 x Choppas: 16 attacks, 3+ to hit, 3+ to wound, 5+ save,"
            " 1 damage, ignored on 6+ (expected 3.95)"
        )
        assert "no save" in lines[2]
        assert "ignored" not in lines[2]

    def test_one_line_per_bin(self) -> None:
        lines = TextRenderer().render_bins(BINS)
        assert len(lines) == 4
        assert lines[2] == "   2:  30.00%"

    def test_ev_line(self) -> None:
        lines = TextRenderer().render_profile(record())
        assert lines[-1] == "EV = 1.45"

    def test_kill_line_with_target(self) -> None:
        lines = TextRenderer().render_profile(record(), target(wounds=2))
        assert lines[-2] == "EV = 1.45"
        assert lines[-1] == "P(kill) = 50.00%"
