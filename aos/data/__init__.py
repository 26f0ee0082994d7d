"""
Warscroll stat blocks for every unit the calculator knows about.

The catalog is plain data: two literal tables that aos.catalog turns into
profile objects. WEAPONS maps a weapon key to its stat line, using the
field names of aos.profiles.WeaponProfile:

    WEAPONS = {
        "brute_choppas": {
            "name": "Pair of Brute Choppas",
            "attacks": 4, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 1,
        },
        ...
    }

ARMIES maps an army name to its units, and each unit entry lists its
characteristics, its base weapon options (by weapon key) and any
additional weapon slots:

    ARMIES = {
        "Orruk Warclans": [
            {
                "name": "Orruk Brutes",
                "movement": 4, "save": 4, "wounds": 3, "bravery": 6,
                "size": (5, 20), "points": 130,
                "weapons": ["brute_choppas", "jagged_gore_hacka"],
                "additional_weapons": [
                    {"kind": "replace_one_in_unit", "weapons": [...], "optional": False},
                    {"kind": "replace_one_in_n", "weapons": [...], "one_in_n": 5},
                ],
            },
            ...
        ],
    }

Additional weapon slots are optional unless they say otherwise. A unit
with "ignore_wounds" rolls that value or higher to ignore each point of
damage it suffers.
"""

WEAPONS = {
    # Orruk Warclans
    "brute_choppas": {
        "name": "Pair of Brute Choppas",
        "attacks": 4, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 1,
    },
    "brute_jagged_gore_hacka": {
        "name": "Jagged Gore-hacka", "range": 2,
        "attacks": 3, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 1,
    },
    "gore_choppa": {
        "name": "Gore-choppa", "range": 2,
        "attacks": 3, "to_hit": 4, "to_wound": 3, "rend": 1, "damage": 2,
    },
    "boss_klaw": {
        "name": "Boss Klaw and Brute Smasha",
        "attacks": 4, "to_hit": 4, "to_wound": 3, "rend": 1, "damage": 2,
    },
    "boss_choppa": {
        "name": "Boss Choppa",
        "attacks": 3, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 2,
    },
    "pig_iron_choppa": {
        "name": "Pig-iron Choppa",
        "attacks": 4, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 1,
    },
    "grunta_jagged_gore_hacka": {
        "name": "Jagged Gore-hacka", "range": 2,
        "attacks": 3, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 1,
    },
    "tusks_and_hooves": {
        "name": "Tusks and Hooves",
        "attacks": 4, "to_hit": 4, "to_wound": 4, "rend": 0, "damage": 1,
    },
    "ardboy_choppas": {
        "name": "Ardboy Choppas",
        "attacks": 2, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 1,
    },
    "ardboy_boss": {
        "name": "Ardboy Boss",
        "attacks": 4, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 1,
    },
    "eadbut": {
        "name": "'Eadbut",
        "attacks": 1, "to_hit": 4, "to_wound": 3, "rend": 0, "damage": 2,
        "damage_type": "d3",
    },
    "pair_of_ardboy_choppas": {
        "name": "Pair of Ardboy Choppas",
        "attacks": 2, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 1,
    },
    "ardboy_big_choppa": {
        "name": "Ardboy Big Choppa",
        "attacks": 2, "to_hit": 4, "to_wound": 3, "rend": 1, "damage": 2,
    },
    "boss_choppa_and_rip_toof_fist": {
        "name": "Boss Choppa and Rip-toof Fist",
        "attacks": 6, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 2,
    },
    # Ossiarch Bonereapers
    "nadirite_blade": {
        "name": "Nadirite Blade",
        "attacks": 2, "to_hit": 3, "to_wound": 4, "rend": 1, "damage": 1,
    },
    "commanders_blade": {
        "name": "Commander's Blade",
        "attacks": 3, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 2,
    },
    "nadirite_battle_shield": {
        "name": "Nadirite Battle-shield",
        "attacks": 1, "to_hit": 3, "to_wound": 4, "rend": 0, "damage": 1,
    },
    "hooves_teeth_and_barbed_tails": {
        "name": "Hooves, Teeth, and Barbed Tails",
        "attacks": 6, "to_hit": 3, "to_wound": 3, "rend": 1, "damage": 1,
    },
}

ARMIES = {
    "Orruk Warclans": [
        {
            "name": "Orruk Brutes",
            "movement": 4, "save": 4, "wounds": 3, "bravery": 6,
            "size": (5, 20), "points": 130,
            "weapons": ["brute_choppas", "brute_jagged_gore_hacka"],
            "additional_weapons": [
                {
                    "kind": "replace_one_in_unit",
                    "weapons": ["boss_klaw", "boss_choppa"],
                    "optional": False,
                },
                {
                    "kind": "replace_one_in_n",
                    "weapons": ["gore_choppa"],
                    "one_in_n": 5,
                },
            ],
        },
        {
            "name": "Orruk Gore-gruntas",
            "movement": 9, "save": 4, "wounds": 5, "bravery": 7,
            "size": (3, 12),
            "weapons": ["pig_iron_choppa", "grunta_jagged_gore_hacka"],
            "additional_weapons": [
                {
                    "kind": "additional_every_model",
                    "weapons": ["tusks_and_hooves"],
                    "optional": False,
                },
            ],
        },
        {
            "name": "Orruk Ardboys",
            "movement": 4, "save": 4, "wounds": 2, "bravery": 6,
            "size": (5, 30), "points": 100,
            "weapons": ["ardboy_choppas"],
            "additional_weapons": [
                {"kind": "replace_one_in_unit", "weapons": ["ardboy_boss"]},
            ],
        },
        {
            "name": "Ironskull's Boys",
            "movement": 4, "save": 4, "wounds": 2, "bravery": 6,
            "size": (4, 4), "points": 80,
            "weapons": ["pair_of_ardboy_choppas"],
            "additional_weapons": [
                {"kind": "replace_one_in_unit", "weapons": ["ardboy_big_choppa"]},
            ],
        },
        {
            "name": "Orruk Megaboss",
            "movement": 4, "save": 3, "wounds": 7, "bravery": 8,
            "size": (1, 1), "points": 140,
            "weapons": ["boss_choppa_and_rip_toof_fist"],
        },
    ],
    "Ossiarch Bonereapers": [
        {
            "name": "Mortek Guard",
            "movement": 4, "save": 4, "wounds": 1, "bravery": 10,
            "size": (10, 40),
            "weapons": ["nadirite_blade"],
            "ignore_wounds": 6,
        },
        {
            "name": "Liege Kavalos",
            "movement": 10, "save": 3, "wounds": 7, "bravery": 10,
            "size": (1, 1),
            "weapons": ["commanders_blade"],
            "additional_weapons": [
                {
                    "kind": "additional_every_model",
                    "weapons": ["nadirite_battle_shield"],
                    "optional": False,
                },
                {
                    "kind": "additional_every_model",
                    "weapons": ["hooves_teeth_and_barbed_tails"],
                    "optional": False,
                },
            ],
            "ignore_wounds": 6,
        },
    ],
}
