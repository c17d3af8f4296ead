import pytest

import config
import campaign
from election import GameEngine
from utils import Refusal

from conftest import FixedRandom


def test_campaign_spends_points_and_raises_support(engine):
    before = engine.support["ON"]["LPC"]
    result = engine.campaign("ON")
    assert result
    assert result.value == 8
    assert engine.cp_remaining == 8
    assert engine.tokens["ON"] == 1
    assert engine.support["ON"]["LPC"] == before + 7


def test_campaign_support_capped_at_90(engine):
    engine.support["NL"]["LPC"] = 88
    assert engine.campaign("NL")
    assert engine.support["NL"]["LPC"] == 90


def test_three_tokens_per_region(engine):
    for _ in range(3):
        assert engine.campaign("QC")
    result = engine.campaign("QC")
    assert not result
    assert result.reason is Refusal.TOKEN_CAP
    assert engine.tokens["QC"] == 3
    assert engine.cp_remaining == 4


def test_refused_campaign_leaves_state_untouched(engine):
    engine.cp_remaining = 1
    before = engine.snapshot()
    result = engine.campaign("BC")
    assert result.ok is False
    assert result.reason is Refusal.NOT_ENOUGH_POINTS
    assert result.message == "Not enough Campaign Points."
    assert engine.snapshot() == before


def test_campaign_then_uncampaign_round_trip(engine):
    before_points = engine.cp_remaining
    before_support = engine.support_snapshot()
    assert engine.campaign("MB")
    assert engine.uncampaign("MB")
    assert engine.cp_remaining == before_points
    assert engine.support_snapshot() == before_support
    assert engine.tokens["MB"] == 0


def test_uncampaign_without_tokens_fails(engine):
    before = engine.snapshot()
    result = engine.uncampaign("PE")
    assert not result
    assert result.reason is Refusal.NO_TOKENS
    assert engine.snapshot() == before


def test_uncampaign_floors_support_at_zero(engine):
    assert engine.campaign("AB")
    engine.support["AB"]["LPC"] = 3
    assert engine.uncampaign("AB")
    assert engine.support["AB"]["LPC"] == 0
    assert engine.cp_remaining == config.PLAYER_CP_BUDGET[config.DIFFICULTY_NORMAL]


def test_policy_card_applies_once(engine):
    result = engine.play_policy_card("P001")
    assert result
    assert engine.cp_remaining == 6
    assert engine.support["ON"]["LPC"] == 50
    assert engine.support["NL"]["LPC"] == 75
    assert "P001" in engine.used_policies

    before = engine.snapshot()
    again = engine.play_policy_card("P001")
    assert again.reason is Refusal.CARD_USED
    assert engine.snapshot() == before
    assert "P001" not in [card.id for card in engine.available_policies()]


def test_other_party_card_is_refused(engine):
    before = engine.snapshot()
    result = engine.play_policy_card("P004")
    assert result.reason is Refusal.CARD_NOT_OWNED
    assert engine.snapshot() == before


def test_unaffordable_card_is_refused(reference):
    engine = GameEngine("LPC", config.DIFFICULTY_HARD, reference=reference, seed=5)
    assert engine.play_policy_card("P001")
    assert engine.cp_remaining == 3
    before = engine.snapshot()
    result = engine.play_policy_card("P007", "ON")
    assert result.reason is Refusal.NOT_ENOUGH_POINTS
    assert engine.snapshot() == before


def test_grouping_choice_card(engine):
    before = engine.snapshot()
    missing = engine.play_policy_card("P002")
    assert missing.reason is Refusal.INVALID_CHOICE
    assert engine.play_policy_card("P002", "all").reason is Refusal.INVALID_CHOICE
    assert engine.snapshot() == before

    # una provincia viene mappata sul suo raggruppamento
    assert engine.play_policy_card("P002", "QC")
    assert engine.support["QC"]["LPC"] == 76
    assert engine.support["ON"]["LPC"] == 55
    assert engine.support["BC"]["LPC"] == 35


def test_grouping_choice_accepts_grouping_id(engine):
    assert engine.play_policy_card("P002", "prairies")
    assert engine.support["SK"]["LPC"] == 48
    assert engine.support["MB"]["LPC"] == 58


def test_region_choice_card(engine):
    assert engine.play_policy_card("P007", "west").reason is Refusal.INVALID_CHOICE
    assert engine.play_policy_card("P007", "AB")
    assert engine.support["AB"]["LPC"] == 32
    assert engine.support["BC"]["LPC"] == 35


def test_attack_ads_hit_leading_opponent(engine):
    assert engine.play_policy_card("P006")
    assert engine.support["ON"]["CPC"] == 38
    assert engine.support["ON"]["LPC"] == 50
    assert engine.support["ON"]["NDP"] == 10


def test_available_policies_for_party(engine):
    ids = [card.id for card in engine.available_policies()]
    assert ids == ["P001", "P002", "P003", "P006", "P007", "P008"]


def test_ranking_by_support_times_seats(reference):
    cpc = reference.parties["CPC"]
    ranked = campaign.rank_regions_for_party(reference, reference.baseline_support(), cpc)
    assert ranked[:5] == ["ON", "QC", "BC", "AB", "NS"]
    bq = reference.parties["BQ"]
    assert campaign.rank_regions_for_party(reference, reference.baseline_support(), bq) == ["QC"]


def test_ai_campaigns_spend_full_budget(fixed_engine):
    result = fixed_engine.run_ai_campaigns()
    assert result
    spent = result.value
    assert "LPC" not in spent
    # 1953: BQ non ancora fondato
    assert "BQ" not in spent
    assert spent["CPC"] == ["ON", "QC", "BC", "AB", "NS"]
    assert len(spent["NDP"]) == 5
    assert fixed_engine.support["ON"]["CPC"] == 49
    assert fixed_engine.support["YT"]["CPC"] == 30
    assert fixed_engine.phase == config.PHASE_ELECTION


def test_ai_budget_depends_on_difficulty(reference):
    easy = GameEngine("LPC", config.DIFFICULTY_EASY, reference=reference, rng=FixedRandom(0.5))
    hard = GameEngine("LPC", config.DIFFICULTY_HARD, reference=reference, rng=FixedRandom(0.5))
    easy_spent = easy.run_ai_campaigns().value
    hard_spent = hard.run_ai_campaigns().value
    assert len(easy_spent["CPC"]) == 3
    assert len(hard_spent["CPC"]) == 7
    assert easy.support["ON"]["CPC"] == 47
    assert hard.support["ON"]["CPC"] == 51


def test_ai_support_capped_at_90(fixed_engine):
    fixed_engine.support["ON"]["CPC"] = 88
    fixed_engine.run_ai_campaigns()
    assert fixed_engine.support["ON"]["CPC"] == 90


def test_regional_party_campaigns_only_at_home(reference):
    engine = GameEngine("LPC", config.DIFFICULTY_NORMAL, reference=reference, rng=FixedRandom(0.5))
    while engine.year < 1993:
        engine.advance()
    spent = engine.run_ai_campaigns().value
    assert spent["BQ"] == ["QC"]


@pytest.mark.parametrize("value, expected", [
    (0.0, 47),
    (0.999999, 51),
])
def test_ai_noise_spans_two_points(reference, value, expected):
    engine = GameEngine("LPC", config.DIFFICULTY_NORMAL, reference=reference, rng=FixedRandom(value))
    engine.run_ai_campaigns()
    assert engine.support["ON"]["CPC"] == pytest.approx(expected, abs=1e-4)
    assert engine.support["QC"]["CPC"] == pytest.approx(expected - 15, abs=1e-4)
