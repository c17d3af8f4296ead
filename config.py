# config.py
# Costanti di gioco. Nessun valore casuale qui: la casualità passa sempre
# dal random.Random iniettato nel motore.

# --- Difficoltà ---
DIFFICULTY_EASY = "easy"
DIFFICULTY_NORMAL = "normal"
DIFFICULTY_HARD = "hard"
DIFFICULTIES = (DIFFICULTY_EASY, DIFFICULTY_NORMAL, DIFFICULTY_HARD)

# Campaign points del giocatore per ciclo
PLAYER_CP_BUDGET = {
    DIFFICULTY_EASY: 14,
    DIFFICULTY_NORMAL: 10,
    DIFFICULTY_HARD: 7,
}
# Budget AI: più facile per il giocatore => AI più ricca, e viceversa
AI_CP_BUDGET = {
    DIFFICULTY_EASY: 6,
    DIFFICULTY_NORMAL: 10,
    DIFFICULTY_HARD: 14,
}
AI_CAMPAIGN_BONUS = {
    DIFFICULTY_EASY: 4,
    DIFFICULTY_NORMAL: 6,
    DIFFICULTY_HARD: 8,
}
AI_CAMPAIGN_NOISE = 2.0  # +/- uniforme

# --- Campaign Economy ---
CAMPAIGN_COST = 2
CAMPAIGN_SUPPORT_BONUS = 7
CAMPAIGN_SUPPORT_CAP = 90  # Vale anche per le campagne AI
MAX_CAMPAIGN_TOKENS = 3

# --- Support ---
SUPPORT_MIN = 0
SUPPORT_MAX = 95  # Clamp dopo eventi, policy e drift

# --- Seat Allocation ---
LEGISLATURE_SIZE = 338  # Somma dei seggi di tutte le regioni
# Esponente di esagerazione FPTP: una pluralità diventa una quota di seggi maggiore
SEAT_EXAGGERATION_EXPONENT = 1.6

# --- Drift tra un ciclo e l'altro ---
DRIFT_REGRESSION_RATE = 0.15  # 15% verso il baseline regionale
DRIFT_NOISE = 3.0             # +/- uniforme

# --- Eventi ---
EVENT_DOUBLE_DRAW_PROB = 0.4  # Probabilità di pescare 2 eventi invece di 1
EVENTS_PER_DRAW_MIN = 1
EVENTS_PER_DRAW_MAX = 2

# Fallback quando non ci sono dati per calcolare il leader
DEFAULT_LEADING_PARTY = "LPC"
DEFAULT_LEADING_OPPONENT = "CPC"

# Carte policy utilizzabili da qualunque partito
ANY_PARTY = "all"
# Raggruppamento che contiene tutte le regioni
ALL_REGIONS_GROUPING = "all"

# --- Scoring ---
MAJORITY_WIN_BONUS = 100
MINORITY_WIN_BONUS = 50
OFFICIAL_OPPOSITION_BONUS = 25
OFFICIAL_OPPOSITION_SEATS = 55

# (soglia minima, voto, commento) in ordine decrescente
GRADE_THRESHOLDS = [
    (2500, "S", "Political Legend"),
    (2000, "A", "Dominant Force"),
    (1500, "B", "Major Player"),
    (1000, "C", "Contender"),
    (500, "D", "Minor Party"),
]
FALLBACK_GRADE = ("F", "Fringe Party")

# --- Fasi del ciclo ---
PHASE_CAMPAIGN = "campaign"
PHASE_EVENT = "event"
PHASE_ELECTION = "election"
PHASE_RESULTS = "results"
PHASE_GAME_OVER = "game_over"

GOVERNMENT_MAJORITY = "majority"
GOVERNMENT_MINORITY = "minority"
