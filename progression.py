# progression.py
import config
import utils


def apply_drift(support, reference, rng):
    """
    Natural drift between cycles: every value moves 15% of the way back to
    its regional baseline, gets +/-3 uniform noise, then is clamped to [0, 95].
    """
    noise = config.DRIFT_NOISE
    for region_id, region_support in support.items():
        for party_id in reference.parties:
            current = region_support.get(party_id, 0)
            baseline = reference.baseline_for(region_id, party_id)
            drift = (baseline - current) * config.DRIFT_REGRESSION_RATE
            jitter = (rng.random() - 0.5) * 2 * noise
            region_support[party_id] = utils.clamp(
                current + drift + jitter, config.SUPPORT_MIN, config.SUPPORT_MAX)


def score_election(result):
    """Punti guadagnati dal giocatore in una singola elezione."""
    points = 0
    if result.player_won:
        if result.government == config.GOVERNMENT_MAJORITY:
            points += config.MAJORITY_WIN_BONUS
        else:
            points += config.MINORITY_WIN_BONUS
    elif result.player_seats >= config.OFFICIAL_OPPOSITION_SEATS:
        points += config.OFFICIAL_OPPOSITION_BONUS
    points += result.player_seats
    return points


def grade_for_score(score):
    for threshold, grade, comment in config.GRADE_THRESHOLDS:
        if score >= threshold:
            return grade, comment
    return config.FALLBACK_GRADE


def final_score(score, times_won, total_seats):
    grade, comment = grade_for_score(score)
    return {
        "score": score,
        "grade": grade,
        "comment": comment,
        "times_won": times_won,
        "total_seats": total_seats,
    }
