import random

import pytest

import config
import voting


def test_landslide_share_exceeds_support_share():
    seats = voting.calculate_seats({"A": 70, "B": 30}, 10, ["A", "B"])
    assert sum(seats.values()) == 10
    assert seats["A"] > 7
    assert seats == {"A": 8, "B": 2}


@pytest.mark.parametrize("seat_count", [1, 2, 3, 4, 7, 10, 14, 42, 78, 121])
def test_allocation_always_fills_every_seat(seat_count):
    rng = random.Random(seat_count)
    parties = ["A", "B", "C", "D"]
    for _ in range(200):
        support = {p: rng.uniform(0, 95) for p in parties}
        # a volte un partito a zero
        if rng.random() < 0.3:
            support[rng.choice(parties)] = 0
        seats = voting.calculate_seats(support, seat_count, parties)
        assert sum(seats.values()) == seat_count
        assert all(s >= 0 for s in seats.values())


def test_all_zero_support_returns_empty_allocation():
    assert voting.calculate_seats({"A": 0, "B": 0}, 10, ["A", "B"]) == {}
    assert voting.calculate_seats({"A": 50}, 10, []) == {}


def test_negative_support_counts_as_zero():
    seats = voting.calculate_seats({"A": -20, "B": 10}, 5, ["A", "B"])
    assert seats == {"A": 0, "B": 5}


def test_remainder_ties_follow_enumeration_order():
    assert voting.calculate_seats({"A": 50, "B": 50}, 1, ["A", "B"]) == {"A": 1, "B": 0}
    assert voting.calculate_seats({"A": 50, "B": 50}, 1, ["B", "A"]) == {"B": 1, "A": 0}


def test_unlisted_parties_get_nothing():
    seats = voting.calculate_seats({"A": 50, "B": 50, "R": 90}, 4, ["A", "B"])
    assert "R" not in seats
    assert sum(seats.values()) == 4


def test_eligibility_respects_region_and_founding_year(small_reference):
    parties = small_reference.parties
    assert voting.eligible_parties(parties, "X", 1990) == ["A", "B"]
    assert voting.eligible_parties(parties, "X", 2000) == ["A", "B", "R"]
    assert voting.eligible_parties(parties, "Y", 2010) == ["A", "B"]


def test_bloc_only_wins_seats_in_quebec_after_founding(reference, engine):
    support = engine.support_snapshot()
    for region_id in support:
        support[region_id]["BQ"] = 60
    before = voting.resolve_election(reference, support, 1988, "LPC")
    assert "BQ" not in before.total_seats
    after = voting.resolve_election(reference, support, 1993, "LPC")
    assert after.total_seats["BQ"] > 0
    for region_id, seats in after.region_results.items():
        if region_id != "QC":
            assert "BQ" not in seats
    assert after.region_results["QC"]["BQ"] == after.total_seats["BQ"]


def test_baseline_election_fills_the_house(reference):
    result = voting.resolve_election(reference, reference.baseline_support(), 1953, "NDP")
    assert sum(result.total_seats.values()) == reference.total_seats == 338
    assert result.majority_threshold == 170
    assert result.winner == "LPC"
    assert result.player_seats == result.total_seats["NDP"]
    assert result.player_won is False
    for region_id, region in reference.regions.items():
        assert sum(result.region_results[region_id].values()) == region.seats


def test_verify_election_tie_and_government_type():
    assert voting.verify_election({"A": 100, "B": 100}, 170) == (
        "A", 100, config.GOVERNMENT_MINORITY)
    assert voting.verify_election({"A": 60, "B": 170}, 170) == (
        "B", 170, config.GOVERNMENT_MAJORITY)
    assert voting.verify_election({}, 170) == (None, 0, None)


def test_tally_keeps_party_order():
    region_results = {"X": {"B": 3, "A": 2}, "Y": {"A": 1, "B": 0}, "Z": {}}
    totals = voting.tally_national_seats(region_results, ["A", "B", "C"])
    assert list(totals) == ["A", "B"]
    assert totals == {"A": 3, "B": 3}


def test_result_serialises_to_plain_dict(small_reference):
    result = voting.resolve_election(small_reference, small_reference.baseline_support(), 2000, "A")
    as_dict = result.to_dict()
    assert as_dict["year"] == 2000
    assert sum(as_dict["total_seats"].values()) == small_reference.total_seats
    as_dict["total_seats"]["A"] = -1
    assert result.total_seats["A"] >= 0
