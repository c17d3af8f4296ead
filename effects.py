# effects.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import config
import utils

# Valori simbolici usati nelle tabelle di data.py
RAW_PLAYER_PARTY = "SELF"
RAW_LEADING_OPPONENT = "LEADER"
RAW_CHOICE = "CHOICE"


class PartyRefKind(Enum):
    PLAYER = "player"
    LEADING_OPPONENT = "leading_opponent"
    PARTY = "party"


class TargetKind(Enum):
    REGION = "region"
    GROUPING = "grouping"
    CHOICE = "choice"


class ChoiceKind(Enum):
    """What the caller must supply when a policy card asks for a choice."""
    REGION = "region"
    GROUPING = "grouping"


@dataclass(frozen=True)
class PartyRef:
    kind: PartyRefKind
    party_id: Optional[str] = None


@dataclass(frozen=True)
class Target:
    kind: TargetKind
    target_id: Optional[str] = None
    choice: Optional[ChoiceKind] = None


@dataclass(frozen=True)
class Effect:
    party: PartyRef
    target: Target
    delta: float


PLAYER = PartyRef(PartyRefKind.PLAYER)
LEADING_OPPONENT = PartyRef(PartyRefKind.LEADING_OPPONENT)


def parse_party_ref(raw_party):
    if raw_party == RAW_PLAYER_PARTY:
        return PLAYER
    if raw_party == RAW_LEADING_OPPONENT:
        return LEADING_OPPONENT
    # Id sconosciuti restano PARTY: la risoluzione li scarta senza errore
    return PartyRef(PartyRefKind.PARTY, raw_party)


def parse_effect(raw_effect):
    """Converte un effetto di data.py nel tipo chiuso Effect."""
    party = parse_party_ref(raw_effect["party"])
    # Una regione singola ha la precedenza sul raggruppamento
    if raw_effect.get("region"):
        if raw_effect["region"] == RAW_CHOICE:
            target = Target(TargetKind.CHOICE, choice=ChoiceKind.REGION)
        else:
            target = Target(TargetKind.REGION, raw_effect["region"])
    elif raw_effect.get("grouping"):
        if raw_effect["grouping"] == RAW_CHOICE:
            target = Target(TargetKind.CHOICE, choice=ChoiceKind.GROUPING)
        else:
            target = Target(TargetKind.GROUPING, raw_effect["grouping"])
    else:
        raise ValueError(f"Effect without a target: {raw_effect}")
    return Effect(party, target, raw_effect["delta"])


def bind_choice(effects, choice_id):
    """Replaces every CHOICE placeholder with the concrete target picked by the caller."""
    bound = []
    for effect in effects:
        if effect.target.kind is TargetKind.CHOICE:
            kind = TargetKind.REGION if effect.target.choice is ChoiceKind.REGION else TargetKind.GROUPING
            effect = Effect(effect.party, Target(kind, choice_id), effect.delta)
        bound.append(effect)
    return bound


def resolve_target_regions(target, reference):
    """Lista delle regioni colpite da un target (vuota se non risolvibile)."""
    if target.kind is TargetKind.REGION:
        return [target.target_id]
    if target.kind is TargetKind.GROUPING:
        return reference.regions_in(target.target_id)
    # CHOICE: risolto dal chiamante prima di applicare gli effetti
    return []


def leading_opponent(support, reference, player_party):
    """
    Non-player party with the greatest support x seats total across all regions.
    Ties go to the party met first in enumeration order.
    """
    totals = {}
    for region_id, region in reference.regions.items():
        for party_id, value in support[region_id].items():
            if party_id == player_party:
                continue
            totals[party_id] = totals.get(party_id, 0) + value * region.seats
    if not totals:
        return config.DEFAULT_LEADING_OPPONENT
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return ranked[0][0]


def resolve_effect_party(party_ref, support, reference, player_party):
    if party_ref.kind is PartyRefKind.PLAYER:
        return player_party
    if party_ref.kind is PartyRefKind.LEADING_OPPONENT:
        return leading_opponent(support, reference, player_party)
    if party_ref.party_id in reference.parties:
        return party_ref.party_id
    return None


def apply_effects(effects, support, reference, player_party):
    """
    Applica una lista di effetti al support ledger (modificato sul posto).
    Il partito viene risolto regione per regione: il leader può cambiare
    mentre l'effetto viene applicato.
    Ritorna le modifiche effettive come (region_id, party_id, old, new).
    """
    changes = []
    for effect in effects:
        for region_id in resolve_target_regions(effect.target, reference):
            party_id = resolve_effect_party(
                effect.party, support, reference, player_party)
            if party_id is None:
                continue
            # Un partito regionale non viene toccato fuori dalla sua regione,
            # neanche con target "all"
            restricted_to = reference.parties[party_id].restricted_to
            if restricted_to and region_id != restricted_to:
                continue
            region_support = support[region_id]
            old_value = region_support.get(party_id, 0)
            new_value = utils.clamp(old_value + effect.delta,
                                    config.SUPPORT_MIN, config.SUPPORT_MAX)
            region_support[party_id] = new_value
            changes.append((region_id, party_id, old_value, new_value))
    return changes
