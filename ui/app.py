"""Streamlit damage calculator UI.

Run with: streamlit run ui/app.py
"""

from __future__ import annotations

import streamlit as st

from aos import catalog
from aos.engine import Engine
from aos.profiles import UnitProfile, WeaponProfile
from aos.records import DamageBin
from aos.renderers import damage_needed, expected_value, kill_probability

ARMIES = catalog.armies()
ARMY_NAMES = list(ARMIES.keys())
MODIFIERS = ("hit", "wound", "save", "damage")
MAX_MODIFIER = 3
NONE_OPTION = "None"


def _base_config(army: str, unit_name: str, unit: UnitProfile | None = None) -> dict:
    """Config dict matching a freshly built catalog unit."""
    if unit is None:
        unit = catalog.unit(army, unit_name)
    return {
        "army": army,
        "unit": unit_name,
        "selected_size": unit.selected_size,
        "modifiers": {m: 0 for m in MODIFIERS},
        "weapon": 0,
        "additional_weapons": [slot.selected for slot in unit.additional_weapons],
    }


def build_profile(config: dict) -> UnitProfile:
    """Build a UnitProfile from a unit config dict.

    Selections go through the weapon slots' ``select`` so an invalid
    index fails here rather than in the middle of a calculation.
    """
    modifiers = {f"{m}_modifier": v for m, v in config.get("modifiers", {}).items()}
    unit = catalog.unit(
        config["army"],
        config["unit"],
        selected_size=config["selected_size"],
        **modifiers,
    )
    unit.base_weapon.select(config.get("weapon", 0))
    for slot, selected in zip(unit.additional_weapons, config.get("additional_weapons", [])):
        slot.select(selected)
    return unit


def selectable_weapons(unit: UnitProfile) -> list[WeaponProfile]:
    weapons = list(unit.base_weapon.options)
    for slot in unit.additional_weapons:
        weapons.extend(slot.options)
    return weapons


def min_damage_modifier(unit: UnitProfile) -> int:
    """Lowest damage modifier that leaves every weapon the unit can pick
    dealing at least 0 damage per wound.

    A rolled damage die can come up 1, so variable damage weapons count
    as dealing 1 at worst.
    """
    lowest = min(
        w.damage if w.damage_type == "fixed" else min(w.damage, 1)
        for w in selectable_weapons(unit)
    )
    return max(-MAX_MODIFIER, -lowest)


def chart_data(bins: list[DamageBin]) -> dict[str, list]:
    """Columns for st.bar_chart: damage against percentage chance."""
    return {
        "Damage": [b.damage for b in bins],
        "Probability (%)": [b.probability * 100 for b in bins],
    }


def weapon_table(weapon: WeaponProfile) -> dict[str, str]:
    damage = str(weapon.damage) if weapon.damage_type == "fixed" else weapon.damage_type.upper()
    return {
        "Range": f'{weapon.range}"',
        "Attacks": str(weapon.attacks),
        "To Hit": f"{weapon.to_hit}+",
        "To Wound": f"{weapon.to_wound}+",
        "Rend": f"-{weapon.rend}" if weapon.rend else "-",
        "Damage": damage,
    }


def unit_config(label: str, default_army: int = 0) -> dict:
    """Render sidebar controls for one unit and return its config dict."""
    st.sidebar.subheader(label)

    army = st.sidebar.selectbox("Army", ARMY_NAMES, index=default_army, key=f"{label}_army")
    unit_name = st.sidebar.selectbox("Unit", ARMIES[army], key=f"{label}_unit")
    unit = catalog.unit(army, unit_name)
    config = _base_config(army, unit_name, unit)

    config["selected_size"] = st.sidebar.selectbox(
        "Unit size", unit.sizes(), key=f"{label}_{unit_name}_size",
    )

    with st.sidebar.expander("Modifiers"):
        for m in MODIFIERS:
            damage = m == "damage"
            config["modifiers"][m] = st.number_input(
                "Modify damage" if damage else f"Modify {m} rolls",
                min_value=min_damage_modifier(unit) if damage else -MAX_MODIFIER,
                max_value=MAX_MODIFIER,
                value=0,
                key=f"{label}_{unit_name}_{m}" if damage else f"{label}_{m}",
            )

    names = [w.name for w in unit.base_weapon.options]
    config["weapon"] = names.index(
        st.sidebar.selectbox("Weapon", names, key=f"{label}_{unit_name}_weapon")
    )

    for i, slot in enumerate(unit.additional_weapons):
        names = [w.name for w in slot.options]
        choices = [NONE_OPTION, *names] if slot.optional else names
        choice = st.sidebar.selectbox(
            f"Additional weapon {i + 1}", choices, key=f"{label}_{unit_name}_additional_{i}",
        )
        config["additional_weapons"][i] = None if choice == NONE_OPTION else names.index(choice)

    return config


def show_stats(unit: UnitProfile, label: str) -> None:
    """Display a unit's characteristics and chosen weapons."""
    st.markdown(f"**{label}: {unit.name}**")
    cols = st.columns(5)
    cols[0].metric("Move", f'{unit.movement}"')
    cols[1].metric("Wounds", unit.wounds)
    cols[2].metric("Bravery", unit.bravery)
    cols[3].metric("Save", f"{unit.save}+")
    cols[4].metric("Models", unit.selected_size)
    if unit.ignore_wounds is not None:
        st.caption(f"Ignore wounds: {unit.ignore_wounds}+")

    weapons = [unit.weapon()] + [slot.weapon() for slot in unit.selected_additional_weapons()]
    st.table({w.name: weapon_table(w) for w in weapons})


def main() -> None:
    st.set_page_config(page_title="AoS Damage Calculator", layout="wide")
    st.title("AoS Damage Calculator")

    st.sidebar.header("Units")
    attacker_config = unit_config("Attacker", default_army=0)
    st.sidebar.divider()
    target_config = unit_config("Target", default_army=min(1, len(ARMY_NAMES) - 1))

    st.sidebar.divider()
    st.sidebar.subheader("Rules")
    variable = st.sidebar.checkbox("Roll variable damage")
    to_wound = st.sidebar.checkbox("Roll wounds against to-wound")

    attacker = build_profile(attacker_config)
    target = build_profile(target_config)

    engine = Engine(roll_variable_damage=variable, wound_roll_uses_to_hit=not to_wound)
    try:
        bins = engine.damage_profile(attacker, target)
    except (ValueError, IndexError) as e:
        st.error(str(e))
        st.stop()

    res_ev, res_kill, res_needed = st.columns(3)
    res_ev.metric("Expected damage", f"{expected_value(bins):.2f}")
    res_kill.metric("Chance to destroy the target", f"{kill_probability(bins, target) * 100:.2f}%")
    res_needed.metric("Damage needed", damage_needed(target))

    st.bar_chart(chart_data(bins), x="Damage", y="Probability (%)")

    col_a, col_b = st.columns(2)
    with col_a:
        show_stats(attacker, "Attacker")
    with col_b:
        show_stats(target, "Target")


if __name__ == "__main__":
    main()
