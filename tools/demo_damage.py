#!/usr/bin/env python3
"""Print the damage distribution of one catalog unit attacking another.

Usage:
    python tools/demo_damage.py [attacker_army attacker target_army target]

With no arguments, Orruk Brutes attack Mortek Guard.
"""

import sys

from aos import catalog
from aos.engine import Engine
from aos.renderers import TextRenderer


def main() -> None:
    args = sys.argv[1:5] or ["Orruk Warclans", "Orruk Brutes", "Ossiarch Bonereapers", "Mortek Guard"]
    attacker_army, attacker_name, target_army, target_name = args
    attacker = catalog.unit(attacker_army, attacker_name)
    target = catalog.unit(target_army, target_name)

    engine = Engine()
    engine.damage_profile(attacker, target)
    for line in TextRenderer().render_profile(engine.profile_record, target):
        print(line)


if __name__ == "__main__":
    main()
