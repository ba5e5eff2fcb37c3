"""Dosage advisor: sentinel text for bad input, banding, weight scaling."""
from medadvisor.schemas.advice import AgeBand
from medadvisor.services.dosage_advisor import (
    INVALID_INPUT_MESSAGE,
    NO_DOSAGE_MESSAGE,
    age_band_for,
    get_suggested_dosage,
)


def test_invalid_input_returns_sentinel():
    assert get_suggested_dosage("X", -1, 70) == INVALID_INPUT_MESSAGE
    assert get_suggested_dosage("M001", 30, 0) == INVALID_INPUT_MESSAGE
    assert get_suggested_dosage("", 30, 70) == INVALID_INPUT_MESSAGE
    assert get_suggested_dosage("   ", 30, 70) == INVALID_INPUT_MESSAGE
    assert get_suggested_dosage(None, 30, 70) == INVALID_INPUT_MESSAGE
    assert get_suggested_dosage("M001", float("nan"), 70) == INVALID_INPUT_MESSAGE
    assert get_suggested_dosage("M001", "thirty", 70) == INVALID_INPUT_MESSAGE
    assert get_suggested_dosage("M001", 10**400, 70) == INVALID_INPUT_MESSAGE
    assert get_suggested_dosage("M001", 30, 10**400) == INVALID_INPUT_MESSAGE
    assert get_suggested_dosage("M001", float("inf"), 70) == INVALID_INPUT_MESSAGE


def test_unknown_medicine_falls_back_to_consult_message():
    assert get_suggested_dosage("X", 30, 70) == NO_DOSAGE_MESSAGE
    assert get_suggested_dosage("M014", 30, 70) == NO_DOSAGE_MESSAGE


def test_age_bands():
    assert age_band_for(0.5) == AgeBand.INFANT
    assert age_band_for(2) == AgeBand.CHILD
    assert age_band_for(11.9) == AgeBand.CHILD
    assert age_band_for(12) == AgeBand.ADOLESCENT
    assert age_band_for(18) == AgeBand.ADULT
    assert age_band_for(64) == AgeBand.ADULT
    assert age_band_for(65) == AgeBand.SENIOR


def test_weight_scaled_child_dose():
    text = get_suggested_dosage("M001", 6, 20)
    assert text.startswith("Child (6 years, 20 kg):")
    assert "300 mg" in text  # 15 mg/kg


def test_weight_scaled_dose_is_capped():
    # 17-year-old at 90 kg would be 1350 mg; capped at the adult single dose
    text = get_suggested_dosage("M001", 17, 90)
    assert "1000 mg" in text
    assert text.startswith("Adolescent")


def test_fixed_band_text_for_adults_and_seniors():
    adult = get_suggested_dosage("M002", 40, 70)
    senior = get_suggested_dosage("M002", 70, 70)
    assert adult.startswith("Adult")
    assert "1200 mg/day" in adult
    assert senior.startswith("Senior")
    assert adult != senior


def test_aspirin_not_for_minors():
    assert "Reye's syndrome" in get_suggested_dosage("M005", 10, 30)
    assert "Reye's syndrome" not in get_suggested_dosage("M005", 30, 70)


def test_dosage_is_deterministic():
    assert get_suggested_dosage("M002", 8, 25.5) == get_suggested_dosage("M002", 8, 25.5)
