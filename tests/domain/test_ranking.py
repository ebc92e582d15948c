"""Tests for ranking breeds against a profile."""

from typing import cast

from dog_breed_matcher.domain.profile import UserProfile
from dog_breed_matcher.domain.ranking import (
    DEFAULT_MIN_SCORE,
    DEFAULT_RESULT_LIMIT,
    ScoredBreed,
    rank_breeds,
)
from dog_breed_matcher.types import BreedRecord
from tests.support.breeds import make_breed, make_profile


def _active_profile() -> UserProfile:
    return make_profile(
        free_time="high",
        activity_level="high",
        noise_tolerance="high",
        housing="house_with_yard",
        experience="advanced",
        affection_need="high",
    )


def test_defaults() -> None:
    assert DEFAULT_MIN_SCORE == 2
    assert DEFAULT_RESULT_LIMIT == 10


def test_rank_breeds_filters_and_orders_by_score(
    sample_breeds: list[BreedRecord], apartment_profile: UserProfile
) -> None:
    ranked = rank_breeds(sample_breeds, apartment_profile)

    assert [(item.name, item.score) for item in ranked] == [
        ("Cavalier King Charles Spaniel", 8),
        ("Mystery Mix", 7),
        ("Labrador Retriever", 3),
    ]


def test_rank_breeds_for_active_owner(sample_breeds: list[BreedRecord]) -> None:
    ranked = rank_breeds(sample_breeds, _active_profile())

    assert [(item.name, item.score) for item in ranked] == [
        ("Basenji", 7),
        ("Border Collie", 6),
        ("Labrador Retriever", 5),
        ("Cavalier King Charles Spaniel", 3),
    ]


def test_rank_breeds_threshold_is_inclusive(
    sample_breeds: list[BreedRecord], apartment_profile: UserProfile
) -> None:
    ranked = rank_breeds(sample_breeds, apartment_profile, threshold=3)

    assert [item.name for item in ranked][-1] == "Labrador Retriever"
    assert all(item.score >= 3 for item in ranked)


def test_rank_breeds_negative_threshold_keeps_low_scores(
    sample_breeds: list[BreedRecord], apartment_profile: UserProfile
) -> None:
    ranked = rank_breeds(sample_breeds, apartment_profile, threshold=-100)

    assert len(ranked) == len(sample_breeds)
    assert ranked[-1].name == "Basenji"


def test_rank_breeds_applies_limit(
    sample_breeds: list[BreedRecord], apartment_profile: UserProfile
) -> None:
    ranked = rank_breeds(sample_breeds, apartment_profile, limit=2)

    assert [item.name for item in ranked] == ["Cavalier King Charles Spaniel", "Mystery Mix"]


def test_rank_breeds_non_positive_limit_returns_nothing(
    sample_breeds: list[BreedRecord], apartment_profile: UserProfile
) -> None:
    assert rank_breeds(sample_breeds, apartment_profile, limit=0) == []
    assert rank_breeds(sample_breeds, apartment_profile, limit=-1) == []


def test_rank_breeds_default_limit_is_ten(apartment_profile: UserProfile) -> None:
    breeds = [make_breed(index, f"Breed {index}") for index in range(15)]

    ranked = rank_breeds(breeds, apartment_profile)

    assert len(ranked) == 10


def test_rank_breeds_keeps_catalog_order_for_ties(apartment_profile: UserProfile) -> None:
    breeds = [make_breed(1, "Zeta"), make_breed(2, "Alpha"), make_breed(3, "Mu")]

    ranked = rank_breeds(breeds, apartment_profile)

    assert [item.name for item in ranked] == ["Zeta", "Alpha", "Mu"]
    assert len({item.score for item in ranked}) == 1


def test_rank_breeds_is_repeatable(
    sample_breeds: list[BreedRecord], apartment_profile: UserProfile
) -> None:
    first = rank_breeds(sample_breeds, apartment_profile)
    second = rank_breeds(sample_breeds, apartment_profile)

    assert first == second


def test_rank_breeds_empty_catalog(apartment_profile: UserProfile) -> None:
    assert rank_breeds([], apartment_profile) == []


def test_to_result_passes_fields_through() -> None:
    breed: BreedRecord = {
        "id": 42,
        "name": "Pug",
        "temperament": "Docile, Clever",
        "bred_for": "Lapdog",
        "life_span": "12 - 15 years",
        "weight": {"metric": "6 - 8", "imperial": "14 - 18"},
        "breed_group": "Toy",
        "image": {"id": "abc", "url": "https://cdn.example/pug.jpg", "width": 800, "height": 600},
    }

    result = ScoredBreed(breed=breed, score=5).to_result()

    assert result == {
        "id": 42,
        "name": "Pug",
        "temperament": "Docile, Clever",
        "weight": {"metric": "6 - 8", "imperial": "14 - 18"},
        "life_span": "12 - 15 years",
        "bred_for": "Lapdog",
        "score": 5,
        "image": {"id": "abc", "url": "https://cdn.example/pug.jpg", "width": 800, "height": 600},
    }


def test_to_result_missing_fields_are_null() -> None:
    result = ScoredBreed(breed={"name": "Ghost"}, score=-1).to_result()

    assert result == {
        "id": None,
        "name": "Ghost",
        "temperament": None,
        "weight": None,
        "life_span": None,
        "bred_for": None,
        "score": -1,
        "image": None,
    }


def test_to_result_copies_weight_and_image_as_given() -> None:
    weight = {"metric": 12, "imperial": "22 - 28", "note": "estimated"}
    image = {"id": "xyz", "url": "https://cdn.example/x.jpg", "breeds": []}
    breed = cast(BreedRecord, {"id": 7, "name": "Odd", "weight": weight, "image": image})

    result = ScoredBreed(breed=breed, score=3).to_result()

    assert result["weight"] == weight
    assert result["image"] == image
    assert result["weight"] is not weight
    assert result["image"] is not image
