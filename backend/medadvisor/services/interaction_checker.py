"""
Pairwise medicine interaction check.

Every unordered pair in the input is looked up once, in both table
directions (the interaction tables are populated one-sided). Severity comes
from the graded table when the pair has an entry; otherwise the fixed
CAUTION tag. Severity is never guessed from the description text.
"""
import logging
from typing import Iterable, List, Optional

from medadvisor.schemas.advice import InteractionRecord, InteractionReport, Severity
from medadvisor.services.knowledge_base import KnowledgeBase

logger = logging.getLogger(__name__)

DEFAULT_SEVERITY = Severity.CAUTION


def check_medicine_interactions(kb: KnowledgeBase, medicine_ids: Optional[Iterable[str]]) -> InteractionReport:
    """
    Check all pairs (i, j), i < j, of the given ids.

    Repeated ids are collapsed first (first occurrence kept) so a medicine is
    never checked against itself and no pair is reported twice.
    """
    ids: List[str] = []
    for medicine_id in medicine_ids or ():
        if isinstance(medicine_id, str) and medicine_id and medicine_id not in ids:
            ids.append(medicine_id)

    records: List[InteractionRecord] = []
    for i in range(len(ids)):
        for j in range(i + 1, len(ids)):
            description = kb.interaction_between(ids[i], ids[j])
            if description is None:
                continue
            severity = kb.interaction_severity(ids[i], ids[j]) or DEFAULT_SEVERITY
            records.append(
                InteractionRecord(
                    first_id=ids[i],
                    second_id=ids[j],
                    description=description,
                    severity=severity,
                )
            )
            logger.info(f"[Interactions] {ids[i]} + {ids[j]}: {severity.value}")

    return InteractionReport(interactions=records, has_interactions=len(records) > 0)
