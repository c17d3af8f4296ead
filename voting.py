# voting.py

import math
from dataclasses import dataclass, field
from typing import Dict

import config


@dataclass(frozen=True)
class ElectionResult:
    year: int
    total_seats: Dict[str, int]
    region_results: Dict[str, Dict[str, int]]
    winner: str
    winner_seats: int
    government: str
    player_seats: int
    player_won: bool
    majority_threshold: int = field(default=0)

    def to_dict(self):
        return {
            "year": self.year,
            "total_seats": dict(self.total_seats),
            "region_results": {r: dict(s) for r, s in self.region_results.items()},
            "winner": self.winner,
            "winner_seats": self.winner_seats,
            "government": self.government,
            "player_seats": self.player_seats,
            "player_won": self.player_won,
            "majority_threshold": self.majority_threshold,
        }


def eligible_parties(parties, region_id, year):
    """Partiti che possono prendere seggi in una regione in un dato anno."""
    return [
        party_id for party_id, party in parties.items()
        if party.contests_region(region_id) and party.is_established(year)
    ]


def calculate_seats(region_support, seat_count, eligible):
    """
    Seat allocation for one region.

    Support is raised to the exaggeration exponent (first-past-the-post
    amplification), seats are handed out by floor of the ideal share and the
    rest go one at a time to the largest remainders. Remainder ties keep
    the order of `eligible`. Returns {} when every eligible party sits at 0.
    """
    raised = {}
    for party_id in eligible:
        value = max(0, region_support.get(party_id, 0))
        raised[party_id] = value ** config.SEAT_EXAGGERATION_EXPONENT
    total = sum(raised.values())
    if total == 0:
        return {}

    seats = {}
    remainders = []
    allocated = 0
    for party_id in eligible:
        ideal = raised[party_id] / total * seat_count
        seats[party_id] = math.floor(ideal)
        allocated += seats[party_id]
        remainders.append((party_id, ideal - seats[party_id]))

    # sorted() è stabile: a parità di resto vince l'ordine di enumerazione
    remainders.sort(key=lambda item: item[1], reverse=True)
    for i in range(seat_count - allocated):
        # Il modulo copre l'errore di arrotondamento quando i resti sommano a len(eligible)
        party_id = remainders[i % len(remainders)][0]
        seats[party_id] += 1
    return seats


def allocate_region(reference, support, region_id, year):
    region = reference.regions[region_id]
    eligible = eligible_parties(reference.parties, region_id, year)
    return calculate_seats(support[region_id], region.seats, eligible)


def tally_national_seats(region_results, party_order):
    """Somma i seggi regionali; l'ordine segue l'enumerazione dei partiti."""
    totals = {}
    for party_id in party_order:
        party_total = 0
        present = False
        for seats in region_results.values():
            if party_id in seats:
                present = True
                party_total += seats[party_id]
        if present:
            totals[party_id] = party_total
    return totals


def verify_election(national_totals, majority_threshold):
    """
    Vincitore = partito con più seggi (parità: primo in ordine di enumerazione).
    Ritorna (winner, winner_seats, government) o (None, 0, None) se nessun seggio.
    """
    if not national_totals:
        return None, 0, None
    ranked = sorted(national_totals.items(), key=lambda item: item[1], reverse=True)
    winner, winner_seats = ranked[0]
    government = config.GOVERNMENT_MAJORITY if winner_seats >= majority_threshold \
        else config.GOVERNMENT_MINORITY
    return winner, winner_seats, government


def resolve_election(reference, support, year, player_party):
    """Runs the seat allocator over every region and builds the ElectionResult."""
    region_results = {}
    for region_id in reference.regions:
        region_results[region_id] = allocate_region(reference, support, region_id, year)

    totals = tally_national_seats(region_results, list(reference.parties))
    threshold = reference.majority_threshold
    winner, winner_seats, government = verify_election(totals, threshold)
    player_seats = totals.get(player_party, 0)
    return ElectionResult(
        year=year,
        total_seats=totals,
        region_results=region_results,
        winner=winner,
        winner_seats=winner_seats,
        government=government,
        player_seats=player_seats,
        player_won=winner is not None and winner == player_party,
        majority_threshold=threshold,
    )
