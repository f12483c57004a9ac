"""Tests for cuisine ranking."""

from tablemate.models import Cuisine
from tablemate.ranker import compute_top_cuisines, count_cuisines


def test_ranked_by_count(make_person) -> None:
    people = [
        make_person("a", cuisines=(Cuisine.ITALIAN, Cuisine.JAPANESE)),
        make_person("b", cuisines=(Cuisine.ITALIAN, Cuisine.MEXICAN)),
        make_person("c", cuisines=(Cuisine.ITALIAN, Cuisine.JAPANESE)),
    ]

    assert compute_top_cuisines(people) == [Cuisine.ITALIAN, Cuisine.JAPANESE, Cuisine.MEXICAN]
    assert count_cuisines(people)[Cuisine.ITALIAN] == 3


def test_ties_follow_canonical_order(make_person) -> None:
    people = [
        make_person("a", cuisines=(Cuisine.AMERICAN, Cuisine.THAI)),
        make_person("b", cuisines=(Cuisine.FRENCH, Cuisine.JAPANESE)),
    ]

    assert compute_top_cuisines(people) == [Cuisine.JAPANESE, Cuisine.FRENCH, Cuisine.AMERICAN]


def test_american_ranks_before_thai_on_tie(make_person) -> None:
    people = [
        make_person("a", cuisines=(Cuisine.THAI,)),
        make_person("b", cuisines=(Cuisine.AMERICAN,)),
    ]

    assert compute_top_cuisines(people, limit=1) == [Cuisine.AMERICAN]


def test_every_cuisine_can_be_ranked(make_person) -> None:
    people = [make_person("a", cuisines=(Cuisine.VIETNAMESE, Cuisine.MEDITERRANEAN))]

    assert compute_top_cuisines(people) == [Cuisine.MEDITERRANEAN, Cuisine.VIETNAMESE]


def test_limit_and_no_duplicates(make_person) -> None:
    people = [make_person("a", cuisines=tuple(Cuisine))] * 2

    top = compute_top_cuisines(people)

    assert len(top) == 3
    assert len(set(top)) == 3
    assert compute_top_cuisines(people, limit=5) == list(Cuisine)[:5]


def test_empty_inputs(make_person) -> None:
    assert compute_top_cuisines([]) == []
    assert compute_top_cuisines([make_person("a"), make_person("b")]) == []
