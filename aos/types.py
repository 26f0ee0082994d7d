"""
Literal aliases for the fixed vocabularies of warscroll data.

Weapon tables and unit entries in aos.data spell these values as plain
strings; the aliases list every value the engine and the weapon slots
know how to resolve.
"""

from typing import Literal, TypeAlias

# How a weapon's damage characteristic is expressed on its warscroll.
# "fixed" weapons deal their flat damage value per unsaved wound; "d3" and
# "d6" weapons roll a die for every unsaved wound.
DamageType: TypeAlias = Literal[
    "fixed",
    "d3",
    "d6",
]

# The loadout rule an additional weapon slot follows.
SlotKind: TypeAlias = Literal[
    # A single model (the champion, usually) swaps its base weapon.
    "replace_one_in_unit",
    # One model in every N swaps its base weapon.
    "replace_one_in_n",
    # Every model carries this weapon on top of its base weapon.
    "additional_every_model",
]
