from evil_hangman.models import WordFamily
from evil_hangman.services.partition import (
    family_rank_key, partition, rank_families, reveal
)


def test_reveal_keeps_previous_letters():
    assert reveal("hello", "-e---", "l") == "-ell-"
    assert reveal("hello", "-e---", "z") == "-e---"


def test_partition_groups_by_resulting_pattern():
    families = partition(["cat", "car", "can"], "ca-", "t")

    assert list(families) == ["ca-", "cat"]
    assert families["ca-"].words == ("car", "can")
    assert families["cat"].words == ("cat",)


def test_partition_is_complete_and_disjoint():
    live = ["ally", "beta", "cool", "deal", "else", "flew", "good", "hope", "ibex"]
    families = partition(live, "----", "e")

    grouped = [word for family in families.values() for word in family.words]
    assert sorted(grouped) == sorted(live)
    assert len(grouped) == len(set(grouped))
    assert {key: family.size for key, family in families.items()} == {
        "----": 3, "-e--": 2, "--e-": 2, "---e": 1, "e--e": 1,
    }


def test_every_occurrence_is_revealed():
    families = partition(["else", "ease"], "----", "e")

    assert set(families) == {"e--e"}
    assert families["e--e"].size == 2


def test_rank_key_orders_by_size_then_placeholders_then_pattern():
    keys = [
        family_rank_key(1, 3, "a--"),
        family_rank_key(2, 1, "ab-"),
        family_rank_key(2, 2, "b--"),
        family_rank_key(2, 2, "-a-"),
    ]

    assert sorted(keys) == [
        family_rank_key(2, 2, "-a-"),
        family_rank_key(2, 2, "b--"),
        family_rank_key(2, 1, "ab-"),
        family_rank_key(1, 3, "a--"),
    ]


def test_rank_families_most_adversarial_first():
    families = [
        WordFamily("e--e", ("else",)),
        WordFamily("----", ("ally", "cool", "good")),
        WordFamily("-e--", ("beta", "deal")),
        WordFamily("--e-", ("flew", "ibex")),
    ]

    ranked = rank_families(families)

    assert [family.pattern for family in ranked] == ["----", "--e-", "-e--", "e--e"]


def test_family_counts_its_placeholders():
    family = WordFamily("-e--", ("beta", "deal"))

    assert family.size == 2
    assert family.placeholders == 3
