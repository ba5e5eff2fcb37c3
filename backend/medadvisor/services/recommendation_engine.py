"""
Symptom-to-Medicine Recommendation Engine

Purpose: Rank candidate medicines by how many of the reported symptoms each
         one addresses (its "coverage count").

Architecture Decision:
- DETERMINISTIC table lookup, no fuzzy matching
- Medicines deduplicated across symptoms by id
- Ranked by coverage, descending; ties keep first-seen order
- Optional cap applied only AFTER ranking, so a medicine covering many
  symptoms is never dropped for one that was merely seen earlier

Usage:
    from medadvisor.services.recommendation_engine import recommend_medicines_for_symptoms
    results = recommend_medicines_for_symptoms(kb, ["headache", "fever"], limit=20)
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from medadvisor.schemas.medicine import Medicine
from medadvisor.services.knowledge_base import KnowledgeBase
from medadvisor.services.symptom_normalizer import normalize

logger = logging.getLogger(__name__)


def rank_candidates(kb: KnowledgeBase, symptoms: Iterable[str]) -> List[Tuple[Medicine, int]]:
    """
    Tally coverage per medicine id and return (medicine, count) pairs, ranked.

    A symptom repeated in the input (after normalization) is counted once:
    coverage is over DISTINCT symptoms.
    """
    tally: Dict[str, int] = {}
    first_seen: Dict[str, Medicine] = {}
    seen_symptoms = set()

    for raw in symptoms:
        key = normalize(raw)
        if key in seen_symptoms:
            continue
        seen_symptoms.add(key)

        candidates = kb.medicines_for(key)
        if not candidates:
            logger.debug(f"[Recommender] No candidates for symptom '{key}'")
            continue

        for med in candidates:
            if med.id not in first_seen:
                first_seen[med.id] = med
                tally[med.id] = 0
            tally[med.id] += 1

    # dicts keep insertion order and sorted() is stable -> ties stay first-seen
    ranked_ids = sorted(first_seen, key=lambda med_id: -tally[med_id])
    return [(first_seen[med_id], tally[med_id]) for med_id in ranked_ids]


def recommend_medicines_for_symptoms(
    kb: KnowledgeBase,
    symptoms: Optional[Iterable[str]],
    limit: Optional[int] = None,
) -> List[Medicine]:
    """
    Ranked, deduplicated medicines for a list of raw symptoms.

    Args:
        kb: Knowledge base to look candidates up in
        symptoms: Raw symptom strings; None or empty gives []
        limit: Keep at most this many after ranking. None or <= 0 means no cap.

    Returns:
        Medicines ordered by coverage count, highest first.
    """
    if not symptoms:
        return []

    ranked = rank_candidates(kb, symptoms)
    results = [med for med, _ in ranked]

    if limit is not None and limit > 0 and len(results) > limit:
        logger.info(f"[Recommender] Capping {len(results)} candidates to {limit}")
        results = results[:limit]

    logger.info(f"[Recommender] Found {len(results)} medicines")
    return results
