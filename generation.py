# generation.py
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import networkx as nx

import config
import data
import effects
from effects import ChoiceKind, TargetKind


@dataclass(frozen=True)
class Party:
    id: str
    name: str
    short_name: str
    color: str = "#555555"
    ideology: str = ""
    established_year: Optional[int] = None
    # Id della sola regione in cui il partito si presenta
    restricted_to: Optional[str] = None

    def is_established(self, year):
        return self.established_year is None or year >= self.established_year

    def contests_region(self, region_id):
        return self.restricted_to is None or self.restricted_to == region_id


@dataclass(frozen=True)
class Region:
    id: str
    name: str
    grouping: str
    seats: int


@dataclass(frozen=True)
class EventCard:
    id: str
    title: str
    description: str
    min_year: int
    max_year: int
    effects: Tuple[effects.Effect, ...]

    def is_relevant(self, year):
        return self.min_year <= year <= self.max_year


@dataclass(frozen=True)
class PolicyCard:
    id: str
    name: str
    description: str
    party: str  # config.ANY_PARTY oppure un id partito
    cost: int
    effects: Tuple[effects.Effect, ...]
    requires_choice: Optional[ChoiceKind] = None

    def usable_by(self, party_id):
        return self.party == config.ANY_PARTY or self.party == party_id


@dataclass(frozen=True)
class ReferenceData:
    """
    Immutable game data handed to every engine at construction (read-only
    mappings, shared by every engine).
    Starting support is exposed through baseline_support(), which always
    returns a fresh deep copy.
    """
    parties: Mapping[str, Party]
    regions: Mapping[str, Region]
    groupings: Mapping[str, Tuple[str, ...]]
    schedule: Tuple[int, ...]
    events: Mapping[str, EventCard]
    policies: Mapping[str, PolicyCard]
    grouping_graph: nx.Graph = field(repr=False, compare=False)
    _baseline: Mapping[str, Mapping[str, float]] = field(repr=False, compare=False)

    @property
    def total_seats(self):
        return sum(region.seats for region in self.regions.values())

    @property
    def majority_threshold(self):
        return self.total_seats // 2 + 1

    def baseline_support(self):
        return {region_id: dict(values) for region_id, values in self._baseline.items()}

    def baseline_for(self, region_id, party_id):
        return self._baseline[region_id].get(party_id, 0)

    def regions_in(self, grouping_id):
        """Region ids of a grouping, in region enumeration order ([] if unknown)."""
        node = grouping_node(grouping_id)
        if node not in self.grouping_graph:
            return []
        members = set(self.grouping_graph.neighbors(node))
        return [region_id for region_id in self.regions if region_id in members]

    def grouping_of(self, region_id):
        return self.regions[region_id].grouping


def grouping_node(grouping_id):
    return f"grouping:{grouping_id}"


def create_grouping_graph(region_ids, groupings):
    """Crea il grafo bipartito raggruppamento <-> regione (congelato)."""
    G = nx.Graph()
    for region_id in region_ids:
        G.add_node(region_id, kind="region")
    for grouping_id, members in groupings.items():
        node = grouping_node(grouping_id)
        G.add_node(node, kind="grouping")
        for region_id in members:
            if region_id not in G:
                raise KeyError(
                    f"Grouping '{grouping_id}' references unknown region '{region_id}'")
            G.add_edge(node, region_id)
    # "all" collega ogni regione esattamente una volta
    all_node = grouping_node(config.ALL_REGIONS_GROUPING)
    G.add_node(all_node, kind="grouping")
    G.add_edges_from((all_node, region_id) for region_id in region_ids)
    return nx.freeze(G)


def _parse_effects(raw_effects):
    return tuple(effects.parse_effect(raw) for raw in raw_effects)


def _validate_effect_targets(card_id, card_effects, regions, groupings):
    for effect in card_effects:
        target = effect.target
        if target.kind is TargetKind.REGION and target.target_id not in regions:
            raise KeyError(f"Card {card_id}: unknown region '{target.target_id}'")
        if target.kind is TargetKind.GROUPING and target.target_id not in groupings \
                and target.target_id != config.ALL_REGIONS_GROUPING:
            raise KeyError(f"Card {card_id}: unknown grouping '{target.target_id}'")


def build_reference_data(parties=None, regions=None, groupings=None,
                         starting_support=None, schedule=None,
                         events=None, policies=None, expected_seats=None,
                         verbose=False):
    """
    Costruisce e valida il ReferenceData a partire dalle tabelle grezze
    (di default quelle di data.py). Errori nei dati => KeyError/ValueError.
    expected_seats, se indicato, è la dimensione fissa della Camera.
    """
    parties = data.PARTIES if parties is None else parties
    regions = data.REGIONS if regions is None else regions
    groupings = data.GROUPINGS if groupings is None else groupings
    starting_support = data.STARTING_SUPPORT if starting_support is None else starting_support
    schedule = data.ELECTION_SCHEDULE if schedule is None else schedule
    events = data.EVENTS if events is None else events
    policies = data.POLICY_CARDS if policies is None else policies

    if not parties or not regions or not schedule:
        raise ValueError("Reference data needs parties, regions and a schedule.")

    party_map = {}
    for party_id, raw in parties.items():
        party_map[party_id] = Party(
            id=party_id,
            name=raw.get("name", party_id),
            short_name=raw.get("short_name", party_id),
            color=raw.get("color", "#555555"),
            ideology=raw.get("ideology", ""),
            established_year=raw.get("established_year"),
            restricted_to=raw.get("restricted_to"),
        )

    region_map = {}
    for region_id, raw in regions.items():
        if raw["seats"] < 1:
            raise ValueError(f"Region {region_id} must have at least one seat.")
        region_map[region_id] = Region(
            id=region_id, name=raw.get("name", region_id),
            grouping=raw.get("grouping", ""), seats=int(raw["seats"]))

    for party in party_map.values():
        if party.restricted_to and party.restricted_to not in region_map:
            raise KeyError(
                f"Party {party.id} restricted to unknown region '{party.restricted_to}'")

    grouping_map = {g_id: tuple(members) for g_id, members in groupings.items()}
    if config.ALL_REGIONS_GROUPING in grouping_map:
        grouping_map.pop(config.ALL_REGIONS_GROUPING)
    graph = create_grouping_graph(list(region_map), grouping_map)
    # Il tag grouping di ogni regione deve coincidere con l'appartenenza nel grafo
    for region in region_map.values():
        if region.id not in grouping_map.get(region.grouping, ()):
            raise KeyError(
                f"Region {region.id} is not a member of its grouping '{region.grouping}'")
    grouping_map[config.ALL_REGIONS_GROUPING] = tuple(region_map)
    total_seats = sum(region.seats for region in region_map.values())
    if expected_seats is not None and total_seats != expected_seats:
        raise ValueError(
            f"Regions hold {total_seats} seats, the legislature has {expected_seats}.")

    baseline = {}
    for region_id in region_map:
        if region_id not in starting_support:
            raise KeyError(f"No starting support for region '{region_id}'")
        # Ogni partito ha una voce in ogni regione, anche a 0
        baseline[region_id] = {
            party_id: max(0, starting_support[region_id].get(party_id, 0))
            for party_id in party_map
        }

    sorted_schedule = tuple(schedule)
    if list(sorted_schedule) != sorted(set(sorted_schedule)):
        raise ValueError("Election schedule must be strictly increasing.")

    event_map = {}
    for raw in events:
        card_effects = _parse_effects(raw["effects"])
        _validate_effect_targets(raw["id"], card_effects, region_map, grouping_map)
        event_map[raw["id"]] = EventCard(
            id=raw["id"], title=raw.get("title", raw["id"]),
            description=raw.get("description", ""),
            min_year=raw["min_year"], max_year=raw["max_year"],
            effects=card_effects)

    policy_map = {}
    for raw in policies:
        card_effects = _parse_effects(raw["effects"])
        _validate_effect_targets(raw["id"], card_effects, region_map, grouping_map)
        requires_choice = raw.get("requires_choice")
        policy_map[raw["id"]] = PolicyCard(
            id=raw["id"], name=raw.get("name", raw["id"]),
            description=raw.get("description", ""),
            party=raw.get("party", config.ANY_PARTY), cost=raw["cost"],
            effects=card_effects,
            requires_choice=ChoiceKind(requires_choice) if requires_choice else None)

    reference = ReferenceData(
        parties=MappingProxyType(party_map), regions=MappingProxyType(region_map),
        groupings=MappingProxyType(grouping_map), schedule=sorted_schedule,
        events=MappingProxyType(event_map), policies=MappingProxyType(policy_map),
        grouping_graph=graph,
        _baseline=MappingProxyType(
            {region_id: MappingProxyType(values) for region_id, values in baseline.items()}))
    if verbose:
        print(
            f"Reference data loaded: {len(party_map)} parties, {len(region_map)} regions, "
            f"{reference.total_seats} seats, {len(event_map)} events, {len(policy_map)} policies."
        )
    return reference


_DEFAULT_REFERENCE = None


def default_reference_data():
    """Reference data from data.py, built once and shared (it is immutable)."""
    global _DEFAULT_REFERENCE
    if _DEFAULT_REFERENCE is None:
        _DEFAULT_REFERENCE = build_reference_data(expected_seats=config.LEGISLATURE_SIZE,
                                                  verbose=True)
    return _DEFAULT_REFERENCE
