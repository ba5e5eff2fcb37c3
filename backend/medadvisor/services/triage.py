"""
Triage: does any reported symptom need a clinician?

Exact match on normalized keys against the critical-symptom set. No fuzzy or
substring matching: "chest pain" is critical, "mild chest pain" is not,
unless the tables list it.

This check is independent of the recommendation engine. It does NOT
suppress recommendations; the caller decides how to present both.
"""
import logging
from typing import Iterable, List, Optional

from medadvisor.services.knowledge_base import KnowledgeBase
from medadvisor.services.symptom_normalizer import normalize

logger = logging.getLogger(__name__)


def is_medical_attention_required(kb: KnowledgeBase, symptoms: Optional[Iterable[str]]) -> bool:
    """True as soon as one normalized symptom is in the critical set."""
    if not symptoms:
        return False

    for raw in symptoms:
        key = normalize(raw)
        if kb.is_critical(key):
            logger.warning(f"[Triage] '{key}' requires medical attention")
            return True

    return False


def critical_symptoms_in(kb: KnowledgeBase, symptoms: Optional[Iterable[str]]) -> List[str]:
    """All distinct critical keys among the symptoms, in first-seen order.

    Used for reporting; `is_medical_attention_required` is the decision.
    """
    if not symptoms:
        return []

    found: List[str] = []
    for raw in symptoms:
        key = normalize(raw)
        if kb.is_critical(key) and key not in found:
            found.append(key)
    return found
