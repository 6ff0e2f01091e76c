"""
Pytest configuration and fixtures for refcodex tests.
"""

import copy
import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing refcodex
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from refcodex.models import ClassDescriptionDocument, ClassFeatureDocument, RaceDocument


CLASS_DESCRIPTIONS = {
    "Barbarian": {
        "The Barbarian": "A tall human tribesman strides through a blizzard.",
        "Rage": "In battle, you fight with primal ferocity.",
        "Path of the Berserker": "For some barbarians, rage is a means to an end.",
        "Frenzy": "You can go into a frenzy when you rage.",
    },
    "Paladin": {
        "Paladin": "Clad in plate armor that gleams in the sunlight.",
        "Channel Divinity": "Your oath allows you to channel divinity.",
        "Channel": "Too short to be the best prefix.",
        "Divine Smite": "When you hit a creature with a melee weapon attack.",
    },
    "Monk": {
        "Martial Arts": "Your practice of martial arts gives you mastery.",
    },
}

CLASS_FEATURES = {
    "Fighter": {
        "Class Features": {
            "Second Wind": "You have a limited well of stamina.",
            "Action Surge (p.72)": {
                "content": ["You can push yourself beyond your normal limits.", "Once you use this feature, rest."],
                "table": {"Level": [2, 17]},
            },
            "Fighting Style": {
                "Archery": "You gain a +2 bonus to attack rolls with ranged weapons.",
                "Defense": {"content": "While wearing armor, you gain +1 AC."},
                "table": {"ignored": True},
            },
        },
        "Champion": {
            "Improved Critical": "Your weapon attacks score a critical hit on a roll of 19 or 20.",
            "Second Wind": "Champions catch their breath faster.",
        },
    },
    "Cleric": {
        "Class Features": {
            "Channel Divinity: Turn Undead": "As an action, you present your holy symbol.",
            "Divine Domain": "Choose one domain related to your deity.",
        },
        "Life Domain": {
            "Disciple of Life": "Your healing spells are more effective.",
        },
    },
    "Rogue": {
        "Sneak Attack": "You know how to strike subtly.",
        "Thieves’ Cant": "You learned thieves' cant during your training.",
    },
}

RACES = {
    "Races": {
        "Dwarf": {
            "content": ["Kingdoms rich in ancient grandeur."],
            "Dwarf Traits": {
                "content": [
                    "Your dwarf character has an assortment of inborn abilities.",
                    "***Darkvision.*** Accustomed to life underground, you can see 60 feet in the dark.",
                    "***Dwarven Resilience.*** You have advantage on saving throws against poison.",
                    ["***Stonecunning.*** Whenever you make a History check", "related to the origin of stonework."],
                ],
                "Hill Dwarf": {
                    "content": [
                        "As a hill dwarf, you have keen senses.",
                        "***Dwarven Toughness.*** Your hit point maximum increases by 1.",
                    ],
                },
                "Duergar": {
                    "content": [
                        "***Darkvision.*** Your darkvision has a radius of 120 feet.",
                    ],
                },
            },
        },
        "Halfling": {
            "Halfling Traits": {
                "content": [
                    "***Lucky.*** When you roll a 1 on an attack roll, you can reroll the die.",
                    "***Brave.*** You have advantage on saving throws against being frightened.",
                ],
                "Lightfoot": {
                    "content": [
                        "***Naturally Stealthy.*** You can attempt to hide even when obscured by a creature.",
                    ],
                },
                "Stout": {
                    "content": [
                        "***Stout Resilience.*** You have advantage on saving throws against poison.",
                    ],
                },
            },
        },
        "Tiefling": {
            "Tiefling Traits": {
                "content": [
                    "***Hellish Resistance.*** You have resistance to fire damage.",
                ],
            },
        },
    }
}


@pytest.fixture
def class_descriptions() -> ClassDescriptionDocument:
    """Small class description document."""
    return ClassDescriptionDocument.from_mapping(CLASS_DESCRIPTIONS)


@pytest.fixture
def class_features() -> ClassFeatureDocument:
    """Small class feature document with subclasses."""
    return ClassFeatureDocument.from_mapping(CLASS_FEATURES)


@pytest.fixture
def races() -> RaceDocument:
    """Small race document with subraces."""
    return RaceDocument.from_mapping(RACES)


@pytest.fixture
def raw_class_features() -> dict:
    """Raw JSON-shaped class feature data, safe to modify."""
    return copy.deepcopy(CLASS_FEATURES)


@pytest.fixture
def raw_races() -> dict:
    """Raw JSON-shaped race data, safe to modify."""
    return copy.deepcopy(RACES)


@pytest.fixture
def raw_class_descriptions() -> dict:
    """Raw JSON-shaped class description data, safe to modify."""
    return copy.deepcopy(CLASS_DESCRIPTIONS)
