# campaign.py
# Campaign Economy (giocatore) e pianificatore delle campagne AI.
# Le funzioni ricevono il GameEngine e ne modificano lo stato sul posto;
# ogni rifiuto avviene prima di qualsiasi modifica.

import config
import effects
import utils
from effects import ChoiceKind
from utils import Refusal


def campaign_in_region(engine, region_id):
    """Player campaigns in a region: costs 2 CP, +7 support (capped at 90)."""
    region = engine.reference.regions[region_id]  # KeyError se la regione non esiste
    if engine.cp_remaining < config.CAMPAIGN_COST:
        return utils.refusal(Refusal.NOT_ENOUGH_POINTS)
    if engine.tokens[region_id] >= config.MAX_CAMPAIGN_TOKENS:
        return utils.refusal(Refusal.TOKEN_CAP)

    engine.tokens[region_id] += 1
    region_support = engine.support[region_id]
    region_support[engine.player_party] = min(
        config.CAMPAIGN_SUPPORT_CAP,
        region_support.get(engine.player_party, 0) + config.CAMPAIGN_SUPPORT_BONUS)
    engine.cp_remaining -= config.CAMPAIGN_COST
    utils.send_update(engine.update_queue, utils.UPDATE_TYPE_MESSAGE,
                      f"Campaigning in {region.name}! (+{config.CAMPAIGN_SUPPORT_BONUS}% support)")
    return utils.success(engine.cp_remaining)


def uncampaign_in_region(engine, region_id):
    """Rimuove un token dalla regione e rimborsa i CP."""
    region = engine.reference.regions[region_id]
    if engine.tokens[region_id] <= 0:
        return utils.refusal(Refusal.NO_TOKENS)

    engine.tokens[region_id] -= 1
    region_support = engine.support[region_id]
    region_support[engine.player_party] = max(
        config.SUPPORT_MIN,
        region_support.get(engine.player_party, 0) - config.CAMPAIGN_SUPPORT_BONUS)
    engine.cp_remaining += config.CAMPAIGN_COST
    utils.send_update(engine.update_queue, utils.UPDATE_TYPE_MESSAGE,
                      f"Campaign token removed from {region.name}.")
    return utils.success(engine.cp_remaining)


def resolve_choice(reference, choice_kind, choice):
    """
    Valida la scelta del giocatore per una carta policy.
    REGION: serve l'id di una regione. GROUPING: id di un raggruppamento
    (non "all") oppure di una regione, che viene mappata sul suo raggruppamento.
    Ritorna l'id del target o None se la scelta non è valida.
    """
    if not choice:
        return None
    if choice_kind is ChoiceKind.REGION:
        return choice if choice in reference.regions else None
    if choice in reference.groupings and choice != config.ALL_REGIONS_GROUPING:
        return choice
    if choice in reference.regions:
        grouping_id = reference.grouping_of(choice)
        if grouping_id in reference.groupings:
            return grouping_id
    return None


def play_policy_card(engine, card_id, choice=None):
    card = engine.reference.policies[card_id]
    if card_id in engine.used_policies:
        return utils.refusal(Refusal.CARD_USED)
    if not card.usable_by(engine.player_party):
        return utils.refusal(Refusal.CARD_NOT_OWNED)
    if card.cost > engine.cp_remaining:
        return utils.refusal(Refusal.NOT_ENOUGH_POINTS)

    card_effects = card.effects
    if card.requires_choice is not None:
        target_id = resolve_choice(engine.reference, card.requires_choice, choice)
        if target_id is None:
            return utils.refusal(Refusal.INVALID_CHOICE)
        card_effects = effects.bind_choice(card.effects, target_id)

    changes = effects.apply_effects(card_effects, engine.support,
                                    engine.reference, engine.player_party)
    engine.cp_remaining -= card.cost
    engine.used_policies.add(card_id)
    utils.send_update(engine.update_queue, utils.UPDATE_TYPE_MESSAGE,
                      f"Played {card.name}" + (f" on {choice}!" if choice else "!"))
    return utils.success(changes)


def rank_regions_for_party(reference, support, party):
    """Regioni ordinate per support x seggi, decrescente (parità: ordine di enumerazione)."""
    candidates = [
        (region_id, support[region_id].get(party.id, 0) * region.seats)
        for region_id, region in reference.regions.items()
        if party.contests_region(region_id)
    ]
    candidates.sort(key=lambda item: item[1], reverse=True)
    return [region_id for region_id, _ in candidates]


def simulate_ai_campaigns(engine):
    """
    Ogni partito non giocatore (già fondato) spende tutto il budget AI,
    2 CP per volta, sulle regioni più "preziose" in ordine.
    Ritorna {party_id: [region_id, ...]} con le regioni rinforzate.
    """
    budget = config.AI_CP_BUDGET[engine.difficulty]
    base_bonus = config.AI_CAMPAIGN_BONUS[engine.difficulty]
    noise = config.AI_CAMPAIGN_NOISE
    spent_by_party = {}

    for party_id, party in engine.reference.parties.items():
        if party_id == engine.player_party or not party.is_established(engine.year):
            continue
        cp_left = budget
        reinforced = []
        for region_id in rank_regions_for_party(engine.reference, engine.support, party):
            if cp_left < config.CAMPAIGN_COST:
                break
            region_support = engine.support[region_id]
            boost = base_bonus + engine.rng.random() * 2 * noise - noise
            region_support[party_id] = min(
                config.CAMPAIGN_SUPPORT_CAP, region_support.get(party_id, 0) + boost)
            cp_left -= config.CAMPAIGN_COST
            reinforced.append(region_id)
        spent_by_party[party_id] = reinforced
        if reinforced:
            utils.send_update(engine.update_queue, utils.UPDATE_TYPE_MESSAGE,
                              f"  AI {party.short_name} campaigns in: {', '.join(reinforced)}")
    return spent_by_party
