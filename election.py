# election.py
import copy
import random
import traceback

# Imports da altri moduli del progetto (assoluti)
import campaign
import config
import effects
import events
import generation
import progression
import utils
import voting
from utils import Refusal


class GameEngine:
    """
    One game: a player party on a difficulty, playing through the election
    calendar. Owns every piece of mutable state (support, tokens, deck,
    used cards, history); reference data is shared read-only.
    Commands return utils.ActionResult, queries never mutate.
    """

    def __init__(self, player_party, difficulty=config.DIFFICULTY_NORMAL,
                 reference=None, rng=None, seed=None, update_queue=None):
        self.reference = reference if reference is not None else generation.default_reference_data()
        if player_party not in self.reference.parties:
            raise KeyError(f"Unknown party '{player_party}'")
        if difficulty not in config.DIFFICULTIES:
            raise ValueError(f"Unknown difficulty '{difficulty}'")

        self.player_party = player_party
        self.difficulty = difficulty
        self.rng = rng if rng is not None else random.Random(seed)
        self.update_queue = update_queue if update_queue is not None else utils.create_update_queue()

        self.election_index = 0
        self.year = self.reference.schedule[0]

        # Support ledger e token: copie profonde, mai alias del baseline
        self.support = self.reference.baseline_support()
        self.tokens = {region_id: 0 for region_id in self.reference.regions}
        self.cp_remaining = config.PLAYER_CP_BUDGET[difficulty]

        self.event_deck = events.EventDeck(self.reference, self.rng)
        self.pending_event_ids = []
        self.used_policies = set()

        self.history = []
        self.total_player_seats = 0
        self.times_won = 0
        self.score = 0

        self.phase = config.PHASE_CAMPAIGN
        utils.send_update(self.update_queue, utils.UPDATE_TYPE_STATUS, {
            "year": self.year,
            "phase": self.phase,
            "party": self.player_party,
            "difficulty": self.difficulty,
        })

    # ── Queries ─────────────────────────────────────────────

    def current_year(self):
        return self.year

    def current_phase(self):
        return self.phase

    def campaign_points(self):
        return self.cp_remaining

    def support_snapshot(self):
        return copy.deepcopy(self.support)

    def token_snapshot(self):
        return dict(self.tokens)

    def is_game_over(self):
        return self.election_index >= len(self.reference.schedule)

    def election_history(self):
        return list(self.history)

    def pending_events(self):
        return [self.reference.events[card_id] for card_id in self.pending_event_ids]

    def available_policies(self):
        return [card for card in self.reference.policies.values()
                if card.usable_by(self.player_party) and card.id not in self.used_policies]

    def leading_party(self, region_id):
        """Party with the highest support among those allowed to contest the region."""
        region_support = self.support[region_id]
        contenders = [
            (party_id, region_support.get(party_id, 0))
            for party_id, party in self.reference.parties.items()
            if party.contests_region(region_id)
        ]
        if not contenders:
            return config.DEFAULT_LEADING_PARTY
        contenders.sort(key=lambda item: item[1], reverse=True)
        return contenders[0][0]

    def leading_opponent(self):
        return effects.leading_opponent(self.support, self.reference, self.player_party)

    def national_totals(self):
        """Per party: seat-weighted support, average support and seats it would win now."""
        totals = {party_id: {"weighted_support": 0, "seats": 0}
                  for party_id in self.reference.parties}
        for region_id, region in self.reference.regions.items():
            seats = voting.allocate_region(self.reference, self.support, region_id, self.year)
            for party_id in totals:
                totals[party_id]["weighted_support"] += \
                    self.support[region_id].get(party_id, 0) * region.seats
                totals[party_id]["seats"] += seats.get(party_id, 0)
        total_weight = self.reference.total_seats
        for party_totals in totals.values():
            party_totals["avg_support"] = party_totals["weighted_support"] / total_weight
        return totals

    def final_score(self):
        return progression.final_score(self.score, self.times_won, self.total_player_seats)

    def snapshot(self):
        """JSON-serialisable view of the whole engine state."""
        return {
            "player_party": self.player_party,
            "difficulty": self.difficulty,
            "election_index": self.election_index,
            "year": self.year,
            "phase": self.phase,
            "cp_remaining": self.cp_remaining,
            "support": self.support_snapshot(),
            "tokens": self.token_snapshot(),
            "event_deck": list(self.event_deck.card_ids),
            "pending_events": list(self.pending_event_ids),
            "used_policies": sorted(self.used_policies),
            "score": self.score,
            "times_won": self.times_won,
            "total_player_seats": self.total_player_seats,
            "history": [result.to_dict() for result in self.history],
        }

    def clone(self):
        """Copia indipendente (stato, deck e generatore) con una coda nuova."""
        twin = copy.copy(self)
        twin.rng = random.Random()
        twin.rng.setstate(self.rng.getstate())
        twin.update_queue = utils.create_update_queue()
        twin.support = copy.deepcopy(self.support)
        twin.tokens = dict(self.tokens)
        twin.event_deck = events.EventDeck(self.reference, twin.rng, self.event_deck.card_ids)
        twin.pending_event_ids = list(self.pending_event_ids)
        twin.used_policies = set(self.used_policies)
        twin.history = list(self.history)
        return twin

    # ── Commands ────────────────────────────────────────────

    def campaign(self, region_id):
        if self.is_game_over():
            return utils.refusal(Refusal.GAME_OVER)
        return campaign.campaign_in_region(self, region_id)

    def uncampaign(self, region_id):
        if self.is_game_over():
            return utils.refusal(Refusal.GAME_OVER)
        return campaign.uncampaign_in_region(self, region_id)

    def play_policy_card(self, card_id, choice=None):
        if self.is_game_over():
            return utils.refusal(Refusal.GAME_OVER)
        return campaign.play_policy_card(self, card_id, choice)

    def draw_events(self):
        """Pesca gli eventi del ciclo e li mette in attesa di applicazione."""
        if self.is_game_over():
            return utils.refusal(Refusal.GAME_OVER)
        drawn = self.event_deck.draw(self.year)
        self.pending_event_ids = [card.id for card in drawn]
        self.phase = config.PHASE_EVENT if drawn else config.PHASE_CAMPAIGN
        for card in drawn:
            utils.send_update(self.update_queue, utils.UPDATE_TYPE_EVENT, {
                "id": card.id,
                "year": self.year,
                "title": card.title,
                "description": card.description,
            })
        return utils.success(drawn)

    def apply_event(self, event):
        """Applies one event card (object or id); pending cards leave the pending list."""
        if self.is_game_over():
            return utils.refusal(Refusal.GAME_OVER)
        card_id = event.id if isinstance(event, generation.EventCard) else event
        card = self.reference.events[card_id]
        changes = effects.apply_effects(card.effects, self.support,
                                        self.reference, self.player_party)
        if card_id in self.pending_event_ids:
            self.pending_event_ids.remove(card_id)
        if self.phase == config.PHASE_EVENT and not self.pending_event_ids:
            self.phase = config.PHASE_CAMPAIGN
        utils.send_update(self.update_queue, utils.UPDATE_TYPE_MESSAGE,
                          f"Event applied: {card.title} ({len(changes)} changes)")
        return utils.success(changes)

    def run_ai_campaigns(self):
        if self.is_game_over():
            return utils.refusal(Refusal.GAME_OVER)
        self.phase = config.PHASE_ELECTION
        utils.send_update(self.update_queue, utils.UPDATE_TYPE_STATUS,
                          {"year": self.year, "phase": self.phase, "status": "AI campaigning..."})
        return utils.success(campaign.simulate_ai_campaigns(self))

    def run_election(self):
        if self.is_game_over():
            return utils.refusal(Refusal.GAME_OVER)
        result = voting.resolve_election(self.reference, self.support,
                                         self.year, self.player_party)
        self.history.append(result)
        self.total_player_seats += result.player_seats
        if result.player_won:
            self.times_won += 1
        self.score += progression.score_election(result)
        self.phase = config.PHASE_RESULTS

        utils.send_update(self.update_queue, utils.UPDATE_TYPE_RESULTS, result.to_dict())
        utils.send_update(
            self.update_queue, utils.UPDATE_TYPE_MESSAGE,
            f"{result.year}: {result.winner} {result.government} with {result.winner_seats} seats "
            f"(player {self.player_party}: {result.player_seats})")
        return utils.success(result)

    def advance(self):
        """Moves to the next scheduled election; refused once the calendar is exhausted."""
        if self.is_game_over():
            return utils.refusal(Refusal.NO_MORE_ELECTIONS)
        if self.election_index + 1 >= len(self.reference.schedule):
            self.election_index = len(self.reference.schedule)
            self.pending_event_ids = []
            self.phase = config.PHASE_GAME_OVER
            utils.send_update(self.update_queue, utils.UPDATE_TYPE_COMPLETE, self.final_score())
            return utils.refusal(Refusal.NO_MORE_ELECTIONS)

        self.election_index += 1
        self.year = self.reference.schedule[self.election_index]
        self.cp_remaining = config.PLAYER_CP_BUDGET[self.difficulty]
        for region_id in self.tokens:
            self.tokens[region_id] = 0
        self.pending_event_ids = []
        progression.apply_drift(self.support, self.reference, self.rng)
        self.phase = config.PHASE_CAMPAIGN
        utils.send_update(self.update_queue, utils.UPDATE_TYPE_STATUS,
                          {"year": self.year, "phase": self.phase})
        return utils.success(self.year)


def play_cycle(engine):
    """Un ciclo automatico: eventi, campagne AI, elezione."""
    drawn = engine.draw_events().value or []
    for card in drawn:
        engine.apply_event(card)
    engine.run_ai_campaigns()
    return engine.run_election().value


def run_full_simulation(player_party, difficulty=config.DIFFICULTY_NORMAL,
                        seed=None, reference=None, update_queue=None):
    """
    Plays the whole calendar without a player (events, AI, elections, drift)
    and returns the finished engine.
    """
    engine = None
    try:
        engine = GameEngine(player_party, difficulty, reference=reference,
                            seed=seed, update_queue=update_queue)
        while not engine.is_game_over():
            play_cycle(engine)
            engine.advance()
        return engine
    except Exception as e_sim:
        tb_str = traceback.format_exc()
        error_message_sim = f"Critical error in simulation ({player_party}, {difficulty}): {str(e_sim)}\n{tb_str}"
        if engine is not None:
            utils.send_update(engine.update_queue, utils.UPDATE_TYPE_ERROR, error_message_sim)
        print(error_message_sim)  # Stampa anche sulla console per debug
        raise
