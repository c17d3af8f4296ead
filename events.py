# events.py
import config


class EventDeck:
    """
    Draw pile of historical event cards, held as card ids.
    Shuffled once at construction; a drawn card never comes back.
    """

    def __init__(self, reference, rng, card_ids=None):
        self.reference = reference
        self.rng = rng
        if card_ids is None:
            card_ids = list(reference.events)
            self.rng.shuffle(card_ids)
        self.card_ids = list(card_ids)

    def __len__(self):
        return len(self.card_ids)

    def __contains__(self, card_id):
        return card_id in self.card_ids

    def relevant_ids(self, year):
        return [card_id for card_id in self.card_ids
                if self.reference.events[card_id].is_relevant(year)]

    def remove(self, card_id):
        """Rimozione per id (non per identità dell'oggetto)."""
        if card_id in self.card_ids:
            self.card_ids.remove(card_id)
            return True
        return False

    def draw(self, year):
        """
        Pesca 1 o 2 carte valide per l'anno (2 con probabilità 0.4).
        Lista vuota se nessuna carta copre l'anno.
        """
        relevant = self.relevant_ids(year)
        if self.rng.random() < config.EVENT_DOUBLE_DRAW_PROB:
            count = config.EVENTS_PER_DRAW_MAX
        else:
            count = config.EVENTS_PER_DRAW_MIN
        if not relevant:
            return []
        drawn_ids = self.rng.sample(relevant, min(count, len(relevant)))
        for card_id in drawn_ids:
            self.remove(card_id)
        return [self.reference.events[card_id] for card_id in drawn_ids]
