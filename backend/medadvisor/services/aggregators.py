"""
Aggregators over the knowledge base: precautions, specialist scores,
side effects and condition advice.

All of them skip unknown keys silently and return empty results for empty
input. Symptoms that normalize to the same key count once.
"""
import logging
from typing import Dict, Iterable, List, Optional

from medadvisor.services.knowledge_base import KnowledgeBase
from medadvisor.services.symptom_normalizer import normalize

logger = logging.getLogger(__name__)


def _distinct_keys(symptoms: Optional[Iterable[str]]) -> List[str]:
    keys: List[str] = []
    for raw in symptoms or ():
        key = normalize(raw)
        if key and key not in keys:
            keys.append(key)
    return keys


def get_precautions_for_symptoms(kb: KnowledgeBase, symptoms: Optional[Iterable[str]]) -> List[str]:
    """Union of precautions across symptoms, first-seen order, no repeats."""
    precautions: List[str] = []
    seen = set()
    for key in _distinct_keys(symptoms):
        for precaution in kb.info_for(key).precautions:
            if precaution not in seen:
                seen.add(precaution)
                precautions.append(precaution)
    return precautions


def get_recommended_specialists(kb: KnowledgeBase, symptoms: Optional[Iterable[str]]) -> Dict[str, float]:
    """
    Sum specialist relevance scores across symptoms.

    Additive on purpose: a specialist named by three symptoms gets the sum of
    the three scores, so it outranks one named by a single symptom.
    """
    scores: Dict[str, float] = {}
    for key in _distinct_keys(symptoms):
        for specialist, score in kb.specialists_for(key).items():
            scores[specialist] = scores.get(specialist, 0.0) + score
    return scores


def get_potential_side_effects(kb: KnowledgeBase, medicine_ids: Optional[Iterable[str]]) -> Dict[str, List[str]]:
    """Side effects per medicine id. Not merged; unknown ids are left out."""
    effects: Dict[str, List[str]] = {}
    for medicine_id in medicine_ids or ():
        if not isinstance(medicine_id, str) or medicine_id in effects:
            continue
        listed = kb.side_effects_for(medicine_id)
        if listed:
            effects[medicine_id] = list(listed)
        else:
            logger.debug(f"[SideEffects] No side effect data for '{medicine_id}'")
    return effects


def get_health_advice(kb: KnowledgeBase, condition: Optional[str]) -> List[str]:
    """Advice for one condition name (normalized like a symptom)."""
    return list(kb.advice_for(normalize(condition)))
