"""Tests for trait derivation from raw breed records."""

import pytest

from dog_breed_matcher.domain.traits import (
    HIGH_ENERGY_WORDS,
    LOW_ENERGY_WORDS,
    Level,
    average_weight_kg,
    breed_weight_kg,
    derive_traits,
    energy_level,
    is_affectionate,
    is_apartment_suitable,
    is_difficult_for_beginners,
    parse_temperament_words,
    vocalness,
)
from tests.support.breeds import make_breed


def test_parse_temperament_words_trims_lowercases_and_drops_blanks() -> None:
    assert parse_temperament_words(" Alert, , Playful ,Strong Willed") == [
        "alert",
        "playful",
        "strong willed",
    ]


@pytest.mark.parametrize("text", [None, "", "   ", " , ,  ,", ","])
def test_parse_temperament_words_empty(text: str | None) -> None:
    assert parse_temperament_words(text) == []


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("6 - 8", 7.0),
        ("3.5 - 5", 4.25),
        ("23", 23.0),
        ("NaN - 8", 8.0),
        ("30 kg - 40 kg", 35.0),
    ],
)
def test_average_weight_kg_parses_leading_numbers(text: str, expected: float) -> None:
    assert average_weight_kg(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", [None, "", "unknown", "NaN"])
def test_average_weight_kg_unknown(text: str | None) -> None:
    assert average_weight_kg(text) is None


def test_breed_weight_kg_reads_metric_defensively() -> None:
    assert breed_weight_kg({"weight": {"metric": "10 - 20"}}) == pytest.approx(15.0)
    assert breed_weight_kg({"weight": {"imperial": "22 - 44"}}) is None
    assert breed_weight_kg({"weight": "10 - 20"}) is None
    assert breed_weight_kg({"weight": {"metric": 12}}) is None
    assert breed_weight_kg({}) is None


def test_energy_level_counts_high_and_low_words() -> None:
    assert energy_level(["energetic", "alert"], None) == "high"
    assert energy_level(["playful"], None) == "medium"
    assert energy_level(["calm"], None) == "low"
    assert energy_level(["calm", "playful"], None) == "medium"
    assert energy_level([], None) == "low"


def test_energy_level_adds_working_purpose_by_substring() -> None:
    assert energy_level([], "Sheep herding") == "medium"
    assert energy_level(["playful"], "Hunting vermin") == "high"
    assert energy_level([], "WORKING dog") == "medium"
    # "herder" does not contain "herding"
    assert energy_level([], "Sheep herder") == "low"


_ENERGY_ORDER: dict[Level, int] = {"low": 0, "medium": 1, "high": 2}

_BASE_WORD_LISTS = [
    [],
    ["calm"],
    ["calm", "relaxed", "laid-back"],
    ["playful"],
    ["calm", "playful"],
    ["energetic", "alert"],
    ["gentle", "loyal"],
]


@pytest.mark.parametrize("bred_for", [None, "Hunting"])
@pytest.mark.parametrize("base", _BASE_WORD_LISTS)
def test_energy_tier_only_moves_one_way(base: list[str], bred_for: str | None) -> None:
    before = _ENERGY_ORDER[energy_level(base, bred_for)]

    for word in sorted(HIGH_ENERGY_WORDS):
        assert _ENERGY_ORDER[energy_level([*base, word], bred_for)] >= before
    for word in sorted(LOW_ENERGY_WORDS):
        assert _ENERGY_ORDER[energy_level([*base, word], bred_for)] <= before


def test_affection_and_difficulty_are_exact_word_matches() -> None:
    assert is_affectionate(["gentle"])
    assert not is_affectionate(["gentle-natured"])
    assert is_difficult_for_beginners(["strong willed"])
    assert not is_difficult_for_beginners(["strong-willed"])


def test_vocalness_levels() -> None:
    assert vocalness([]) == "low"
    assert vocalness(["alert"]) == "medium"
    assert vocalness(["alert", "watchful"]) == "high"
    assert vocalness(["alert", "watchful", "vocal"]) == "high"


def test_is_apartment_suitable() -> None:
    assert is_apartment_suitable(make_breed(1, "Small", temperament="Calm", weight="6 - 8"))
    assert is_apartment_suitable(make_breed(2, "Edge", temperament="Calm", weight="20"))
    assert not is_apartment_suitable(make_breed(3, "Big", temperament="Calm", weight="25 - 30"))
    assert not is_apartment_suitable(
        make_breed(4, "Busy", temperament="Energetic, Active", weight="8 - 10")
    )
    assert is_apartment_suitable(make_breed(5, "Unknown", temperament="Calm", weight=None))


def test_derive_traits_for_energetic_hunting_dog() -> None:
    breed = make_breed(
        1,
        "Hound",
        temperament="Energetic, Friendly, Alert",
        bred_for="Hunting",
        weight="25 - 30",
    )

    traits = derive_traits(breed)

    assert traits.energy == "high"
    assert traits.affectionate
    assert not traits.difficult_for_beginners
    assert traits.vocalness == "medium"
    assert traits.average_weight_kg == pytest.approx(27.5)
    assert not traits.apartment_suitable


def test_derive_traits_tolerates_empty_record() -> None:
    traits = derive_traits({})

    assert traits.energy == "low"
    assert not traits.affectionate
    assert not traits.difficult_for_beginners
    assert traits.vocalness == "low"
    assert traits.average_weight_kg is None
    assert traits.apartment_suitable


def test_derive_traits_ignores_wrongly_typed_fields() -> None:
    traits = derive_traits({"temperament": 42, "bred_for": ["Hunting"], "weight": None})

    assert traits.energy == "low"
    assert traits.average_weight_kg is None
