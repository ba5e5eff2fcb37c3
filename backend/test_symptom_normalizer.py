"""Symptom normalization and free-text splitting."""
from medadvisor.schemas.advice import SymptomQuery
from medadvisor.services.symptom_normalizer import normalize, normalize_all, split_symptom_text


def test_normalize():
    assert normalize("  Sore Throat ") == "sore throat"
    assert normalize(normalize("FEVER\t")) == "fever"
    assert normalize("   ") == ""
    assert normalize(None) == ""
    assert normalize(42) == ""


def test_normalize_all_keeps_order_and_duplicates():
    assert normalize_all(["Cough", " cough", "Fever"]) == ["cough", "cough", "fever"]
    assert normalize_all(None) == []


def test_split_symptom_text():
    assert split_symptom_text("fever, Cough ,,") == ["fever", "cough"]
    assert split_symptom_text("  headache  ") == ["headache"]
    assert split_symptom_text(" , ,") == []
    assert split_symptom_text("") == []
    assert split_symptom_text(None) == []


def test_symptom_query_accepts_text():
    query = SymptomQuery(symptoms=["Headache"], text="fever, Cough ,,")
    assert query.symptoms == ["Headache", "fever", "cough"]

    assert SymptomQuery(text="sore throat").symptoms == ["sore throat"]
    assert SymptomQuery(symptoms=None, text=None).symptoms == []
