import queue
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

# --- Update Handling ---

# Types for the update queue (engine -> presentation)
UPDATE_TYPE_MESSAGE = "message"
UPDATE_TYPE_STATUS = "status"
UPDATE_TYPE_RESULTS = "results"
UPDATE_TYPE_EVENT = "event"
UPDATE_TYPE_ERROR = "error"
UPDATE_TYPE_COMPLETE = (
    "complete"  # Calendar exhausted, final score available
)


def create_update_queue():
    """Creates a fresh queue; each engine owns one."""
    return queue.Queue()


def send_update(update_queue, update_type, data=None):
    """Sends an update message to the given queue."""
    if update_queue is None:
        return
    try:
        update_queue.put_nowait((update_type, data))
    except queue.Full:
        # Coda limitata e piena: il messaggio si perde, lo stato no
        print(f"Warning: update queue full, dropping {update_type} update.")


def drain_updates(update_queue):
    """Returns every pending (update_type, data) tuple, emptying the queue."""
    updates = []
    while True:
        try:
            updates.append(update_queue.get_nowait())
        except queue.Empty:
            break
    return updates


def clamp(value, low, high):
    return max(low, min(high, value))


# --- Action Results ---

class Refusal(Enum):
    NOT_ENOUGH_POINTS = "Not enough Campaign Points."
    TOKEN_CAP = "Province already has max campaign tokens."
    NO_TOKENS = "No campaign tokens to remove in this province."
    CARD_USED = "Policy card already used this game."
    CARD_NOT_OWNED = "This policy card belongs to another party."
    INVALID_CHOICE = "This policy card needs a valid target."
    NO_MORE_ELECTIONS = "No more scheduled elections."
    GAME_OVER = "The game is over."


@dataclass(frozen=True)
class ActionResult:
    """Outcome of an engine command. Falsy when the command was refused."""
    ok: bool
    reason: Optional[Refusal] = None
    value: Any = None

    def __bool__(self):
        return self.ok

    @property
    def message(self):
        return self.reason.value if self.reason else ""


def success(value=None):
    return ActionResult(True, value=value)


def refusal(reason):
    return ActionResult(False, reason=reason)
