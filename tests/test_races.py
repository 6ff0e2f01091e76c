"""
Unit tests for the race feature resolver.

Tests cover:
- Base race lookup by equality, containment and parenthetical stripping
- Bare subrace names found inside traits sections
- Subrace traits overriding base traits
- Trait name matching (trailing period, casing, containment)
- Absent results for misses
"""

import pytest

from refcodex.models import RaceDocument
from refcodex.races import RaceFeatureResolver, find_key_loose, subrace_label


@pytest.fixture
def resolver(races: RaceDocument) -> RaceFeatureResolver:
    return RaceFeatureResolver(races)


class TestFindKeyLoose:
    """Test find_key_loose."""

    def test_equality_before_containment(self) -> None:
        mapping = {"Half-Elf": 1, "Elf": 2}
        assert find_key_loose(mapping, "elf") == "Elf"

    def test_containment_either_direction(self) -> None:
        assert find_key_loose({"Dwarf": 1}, "Hill Dwarf") == "Dwarf"
        assert find_key_loose({"Lightfoot Halfling": 1}, "Lightfoot") == "Lightfoot Halfling"

    def test_skipped_keys(self) -> None:
        assert find_key_loose({"content": [], "Stout": {}}, "content", skip=("content",)) is None

    def test_empty_target(self) -> None:
        assert find_key_loose({"Dwarf": 1}, "") is None
        assert find_key_loose(None, "Dwarf") is None


class TestSubraceLabel:
    """Test subrace_label."""

    def test_parenthetical(self) -> None:
        assert subrace_label("Halfling (Lightfoot)", "Halfling") == "Lightfoot"

    def test_same_as_base(self) -> None:
        assert subrace_label("DWARF", "Dwarf") is None

    def test_whole_text_as_label(self) -> None:
        assert subrace_label(" Hill Dwarf ", "Dwarf") == "Hill Dwarf"


class TestBuildTraitIndex:
    """Test RaceFeatureResolver.build_trait_index."""

    def test_base_traits(self, resolver: RaceFeatureResolver) -> None:
        index = resolver.build_trait_index("Dwarf")
        assert list(index) == ["Darkvision", "Dwarven Resilience", "Stonecunning"]

    def test_subrace_traits_are_layered(self, resolver: RaceFeatureResolver) -> None:
        index = resolver.build_trait_index("Dwarf", "Duergar")
        assert index["Darkvision"] == "Your darkvision has a radius of 120 feet."
        assert "Dwarven Resilience" in index

    def test_unknown_subrace_keeps_base(self, resolver: RaceFeatureResolver) -> None:
        assert resolver.build_trait_index("Dwarf", "Mountain") == resolver.build_trait_index("Dwarf")

    def test_race_without_traits_section(self) -> None:
        resolver = RaceFeatureResolver(RaceDocument.from_mapping({"Races": {"Human": {"content": ["Humans."]}}}))
        assert resolver.build_trait_index("Human") == {}
        assert resolver.resolve_race_feature("Human", "Anything") is None


class TestResolveRaceFeature:
    """Test RaceFeatureResolver.resolve_race_feature."""

    def test_base_race_trait(self, resolver: RaceFeatureResolver) -> None:
        result = resolver.resolve_race_feature("Dwarf", "Darkvision")
        assert result == "Accustomed to life underground, you can see 60 feet in the dark."

    def test_parenthetical_subrace(self, resolver: RaceFeatureResolver) -> None:
        result = resolver.resolve_race_feature("Halfling (Lightfoot)", "Naturally Stealthy")
        assert result == "You can attempt to hide even when obscured by a creature."

    def test_parenthetical_subrace_keeps_base_traits(self, resolver: RaceFeatureResolver) -> None:
        result = resolver.resolve_race_feature("Halfling (Lightfoot)", "Lucky")
        assert result == "When you roll a 1 on an attack roll, you can reroll the die."

    def test_bare_subrace_with_base_name(self, resolver: RaceFeatureResolver) -> None:
        result = resolver.resolve_race_feature("Hill Dwarf", "Dwarven Toughness")
        assert result == "Your hit point maximum increases by 1."

    def test_bare_subrace_without_base_name(self, resolver: RaceFeatureResolver) -> None:
        result = resolver.resolve_race_feature("Lightfoot", "Naturally Stealthy")
        assert result == "You can attempt to hide even when obscured by a creature."

    def test_subrace_overrides_base(self, resolver: RaceFeatureResolver) -> None:
        assert resolver.resolve_race_feature("Dwarf (Duergar)", "Darkvision") == (
            "Your darkvision has a radius of 120 feet."
        )

    def test_subrace_override_minimal_document(self) -> None:
        document = RaceDocument.from_mapping({
            "Races": {
                "Gnome": {
                    "Gnome Traits": {
                        "content": ["***Darkvision.*** 60 feet"],
                        "Deep Gnome": {"content": ["***Darkvision.*** 120 feet"]},
                    },
                },
            },
        })
        resolver = RaceFeatureResolver(document)
        assert resolver.resolve_race_feature("Deep Gnome", "Darkvision") == "120 feet"
        assert resolver.resolve_race_feature("Gnome", "Darkvision") == "60 feet"

    def test_feature_name_with_trailing_period_and_casing(self, resolver: RaceFeatureResolver) -> None:
        assert resolver.resolve_race_feature("halfling", "LUCKY.") == (
            "When you roll a 1 on an attack roll, you can reroll the die."
        )

    def test_feature_containment_fallback(self, resolver: RaceFeatureResolver) -> None:
        result = resolver.resolve_race_feature("Halfling (Stout)", "Resilience")
        assert result == "You have advantage on saving throws against poison."

    def test_nested_list_trait(self, resolver: RaceFeatureResolver) -> None:
        result = resolver.resolve_race_feature("Dwarf", "Stonecunning")
        assert result == "Whenever you make a History check\nrelated to the origin of stonework."

    @pytest.mark.parametrize(
        "race_text,feature_name",
        [
            ("Elf", "Darkvision"),
            ("Dwarf", "Flight"),
            ("", "Darkvision"),
            ("Dwarf", ""),
            ("Dwarf", "."),
        ],
    )
    def test_misses_return_none(self, resolver: RaceFeatureResolver, race_text: str, feature_name: str) -> None:
        assert resolver.resolve_race_feature(race_text, feature_name) is None

    def test_document_is_not_mutated(self, resolver: RaceFeatureResolver, races: RaceDocument) -> None:
        before = races.model_dump()
        resolver.resolve_race_feature("Dwarf (Duergar)", "Darkvision")
        resolver.resolve_race_feature("Hill Dwarf", "Dwarven Toughness")
        assert races.model_dump() == before
