"""
Dosage Advisor: age/weight-banded dosage text.

Advisory text only. Bad input gets a sentinel message instead of an
exception, and medicines without a rule get a "consult a professional"
message. Band thresholds and per-medicine rules are fixed data below.
"""
import math
import logging
from typing import Dict, Optional, Tuple

from medadvisor.schemas.advice import AgeBand

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input: medicine id, age and weight must be provided and positive."
NO_DOSAGE_MESSAGE = "No specific dosage information available. Please consult a healthcare professional."

# Upper bounds (exclusive, years) for each band; anything older is SENIOR
AGE_BANDS = [
    (2, AgeBand.INFANT),
    (12, AgeBand.CHILD),
    (18, AgeBand.ADOLESCENT),
    (65, AgeBand.ADULT),
]

# medicine id -> (mg per kg per dose, max single dose mg, interval text)
# Applied to INFANT/CHILD/ADOLESCENT bands when the band text has {dose}.
WEIGHT_SCALED: Dict[str, Tuple[float, int, str]] = {
    "M001": (15.0, 1000, "every 4-6 hours, max 5 doses in 24 hours"),
    "M002": (10.0, 400, "every 6-8 hours, max 4 doses in 24 hours"),
    "M013": (15.0, 500, "every 8 hours for the prescribed course"),
}

DOSAGE_RULES: Dict[str, Dict[AgeBand, str]] = {
    "M001": {  # Tylenol / acetaminophen
        AgeBand.INFANT: "{dose} mg {interval}. Confirm with a pediatrician under 6 months.",
        AgeBand.CHILD: "{dose} mg {interval}.",
        AgeBand.ADOLESCENT: "{dose} mg {interval}.",
        AgeBand.ADULT: "500-1000 mg every 4-6 hours (max 3000 mg/day).",
        AgeBand.SENIOR: "500 mg every 6 hours (max 2000 mg/day); consider liver function.",
    },
    "M002": {  # Advil / ibuprofen
        AgeBand.INFANT: "{dose} mg {interval}. Not recommended under 6 months.",
        AgeBand.CHILD: "{dose} mg {interval}. Take with food.",
        AgeBand.ADOLESCENT: "{dose} mg {interval}. Take with food.",
        AgeBand.ADULT: "200-400 mg every 4-6 hours with food (max 1200 mg/day).",
        AgeBand.SENIOR: "200 mg every 8 hours with food; monitor kidney function and stomach.",
    },
    "M003": {  # Benadryl
        AgeBand.INFANT: "Not recommended under 2 years.",
        AgeBand.CHILD: "Ages 6-11: 12.5-25 mg every 4-6 hours. Not recommended under 6 years.",
        AgeBand.ADOLESCENT: "25-50 mg every 4-6 hours (max 300 mg/day).",
        AgeBand.ADULT: "25-50 mg every 4-6 hours (max 300 mg/day).",
        AgeBand.SENIOR: "Avoid if possible; high risk of confusion and falls.",
    },
    "M004": {  # NyQuil
        AgeBand.INFANT: "Not recommended under 12 years.",
        AgeBand.CHILD: "Not recommended under 12 years.",
        AgeBand.ADOLESCENT: "30 ml at bedtime. Do not combine with other acetaminophen products.",
        AgeBand.ADULT: "30 ml at bedtime. Do not combine with other acetaminophen products.",
        AgeBand.SENIOR: "15-30 ml at bedtime; start low because of drowsiness.",
    },
    "M005": {  # Aspirin
        AgeBand.INFANT: "Not recommended under 18 years (Reye's syndrome risk).",
        AgeBand.CHILD: "Not recommended under 18 years (Reye's syndrome risk).",
        AgeBand.ADOLESCENT: "Not recommended under 18 years (Reye's syndrome risk).",
        AgeBand.ADULT: "325-650 mg every 4-6 hours (max 4000 mg/day).",
        AgeBand.SENIOR: "Use the lowest effective dose; higher bleeding risk.",
    },
    "M006": {  # Claritin
        AgeBand.INFANT: "Not recommended under 2 years.",
        AgeBand.CHILD: "Ages 2-5: 5 mg once daily. Ages 6-11: 10 mg once daily.",
        AgeBand.ADOLESCENT: "10 mg once daily.",
        AgeBand.ADULT: "10 mg once daily.",
        AgeBand.SENIOR: "10 mg once daily, or every other day with kidney or liver problems.",
    },
    "M010": {  # Robitussin DM
        AgeBand.INFANT: "Not recommended under 4 years.",
        AgeBand.CHILD: "Ages 6-11: 5 ml every 4 hours. Not recommended under 6 years.",
        AgeBand.ADOLESCENT: "10 ml every 4 hours (max 6 doses/day).",
        AgeBand.ADULT: "10 ml every 4 hours (max 6 doses/day).",
        AgeBand.SENIOR: "10 ml every 4 hours (max 6 doses/day).",
    },
    "M008": {  # Tums
        AgeBand.INFANT: "Not recommended under 2 years.",
        AgeBand.CHILD: "Ages 2-11: 1 tablet as needed (max 3/day).",
        AgeBand.ADOLESCENT: "2-4 tablets as needed (max 10/day).",
        AgeBand.ADULT: "2-4 tablets as needed (max 10/day).",
        AgeBand.SENIOR: "2-4 tablets as needed (max 7/day).",
    },
    "M013": {  # Amoxicillin (prescription only)
        AgeBand.INFANT: "{dose} mg {interval}. Prescription required.",
        AgeBand.CHILD: "{dose} mg {interval}. Prescription required.",
        AgeBand.ADOLESCENT: "{dose} mg {interval}. Prescription required.",
        AgeBand.ADULT: "500 mg every 8 hours for the prescribed course. Prescription required.",
        AgeBand.SENIOR: "500 mg every 8-12 hours depending on kidney function. Prescription required.",
    },
    "M017": {  # Melatonin
        AgeBand.INFANT: "Not recommended.",
        AgeBand.CHILD: "Only on a doctor's advice.",
        AgeBand.ADOLESCENT: "1-3 mg 1 hour before bedtime.",
        AgeBand.ADULT: "1-5 mg 1 hour before bedtime.",
        AgeBand.SENIOR: "0.5-2 mg 1 hour before bedtime.",
    },
}


def age_band_for(age: float) -> AgeBand:
    for upper, band in AGE_BANDS:
        if age < upper:
            return band
    return AgeBand.SENIOR


def _positive_number(value) -> Optional[float]:
    # bool is an int subclass; True years old is not an age
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        # ints too large for a float
        return None
    if math.isnan(number) or math.isinf(number) or number <= 0:
        return None
    return number


def get_suggested_dosage(medicine_id: str, age: float, weight: float) -> str:
    """
    Dosage text for a medicine, patient age (years) and weight (kg).

    Returns INVALID_INPUT_MESSAGE for a blank id or non-positive age/weight,
    NO_DOSAGE_MESSAGE for medicines without a rule. Never raises.
    """
    med_id = medicine_id.strip() if isinstance(medicine_id, str) else ""
    age_years = _positive_number(age)
    weight_kg = _positive_number(weight)
    if not med_id or age_years is None or weight_kg is None:
        logger.info(f"[Dosage] Invalid input: id={medicine_id!r}, age={age!r}, weight={weight!r}")
        return INVALID_INPUT_MESSAGE

    rules = DOSAGE_RULES.get(med_id)
    if not rules:
        return NO_DOSAGE_MESSAGE

    band = age_band_for(age_years)
    text = rules[band]

    if "{dose}" in text:
        mg_per_kg, max_single, interval = WEIGHT_SCALED[med_id]
        dose = min(int(round(mg_per_kg * weight_kg)), max_single)
        text = text.format(dose=dose, interval=interval)

    return f"{band.value.capitalize()} ({age_years:g} years, {weight_kg:g} kg): {text}"
