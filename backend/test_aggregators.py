"""Precautions, specialist scores, side effects and health advice."""
import pytest

from medadvisor.schemas.medicine import Medicine, SymptomInfo
from medadvisor.services.aggregators import (
    get_health_advice,
    get_potential_side_effects,
    get_precautions_for_symptoms,
    get_recommended_specialists,
)
from medadvisor.services.knowledge_base import KnowledgeBase, get_knowledge_base


def make_kb():
    return KnowledgeBase(
        medicines=[Medicine(id="M1", name="One", price=1.0)],
        symptom_medicines={"headache": ["M1"]},
        symptom_info={
            "headache": SymptomInfo(description="", precautions=("Rest", "Drink water")),
            "headache-adjacent-symptom": SymptomInfo(description="", precautions=("Drink water", "Dim the lights")),
        },
        specialists={
            "headache": {"General Practitioner": 0.6, "Neurologist": 0.4},
            "headache-adjacent-symptom": {"General Practitioner": 0.5},
        },
        side_effects={"M1": ["Nausea", "Dizziness"]},
        health_advice={"Cold": ["Rest", "Fluids"]},
    )


def test_specialist_scores_are_summed():
    kb = make_kb()
    scores = get_recommended_specialists(kb, ["headache", "headache-adjacent-symptom"])
    assert scores["General Practitioner"] == pytest.approx(1.1)
    assert scores["Neurologist"] == pytest.approx(0.4)


def test_specialists_empty_and_unmatched():
    kb = make_kb()
    assert get_recommended_specialists(kb, []) == {}
    assert get_recommended_specialists(kb, None) == {}
    assert get_recommended_specialists(kb, ["sprained ankle"]) == {}


def test_specialists_same_symptom_counts_once():
    kb = make_kb()
    scores = get_recommended_specialists(kb, ["headache", " HEADACHE "])
    assert scores["General Practitioner"] == pytest.approx(0.6)


def test_precautions_union_keeps_first_seen_order():
    kb = make_kb()
    result = get_precautions_for_symptoms(kb, ["headache", "headache-adjacent-symptom"])
    assert result == ["Rest", "Drink water", "Dim the lights"]


def test_precautions_empty_input():
    kb = make_kb()
    assert get_precautions_for_symptoms(kb, None) == []
    assert get_precautions_for_symptoms(kb, ["unknown"]) == []


def test_side_effects_per_medicine_not_merged():
    kb = get_knowledge_base()
    effects = get_potential_side_effects(kb, ["M001", "M003", "M999"])
    assert set(effects) == {"M001", "M003"}
    assert effects["M001"] == list(kb.side_effects_for("M001"))
    assert effects["M003"] == list(kb.side_effects_for("M003"))
    assert get_potential_side_effects(kb, None) == {}


def test_health_advice_single_lookup():
    kb = make_kb()
    assert get_health_advice(kb, " cold ") == ["Rest", "Fluids"]
    assert get_health_advice(kb, "gout") == []
    assert get_health_advice(kb, None) == []


def test_default_tables_headache_fever_specialists():
    kb = get_knowledge_base()
    scores = get_recommended_specialists(kb, ["headache", "fever"])
    assert scores["General Practitioner"] == pytest.approx(1.3)
    assert scores["Neurologist"] == pytest.approx(0.4)
    assert scores["Infectious Disease Specialist"] == pytest.approx(0.3)
