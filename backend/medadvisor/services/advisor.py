"""
MedicineAdvisor: the advisory operations bound to one knowledge base.

One instance is built at app startup and shared by all requests. It holds
no mutable state, so concurrent calls need no locking.

Triage and recommendation are separate calls. `consult` runs both and
returns them side by side; a critical symptom does NOT remove the
recommendations, the caller decides how to present them.
"""
import logging
from typing import Dict, Iterable, List, Optional

from medadvisor.schemas.advice import ConsultationResponse, InteractionReport
from medadvisor.schemas.medicine import Medicine
from medadvisor.services import aggregators, dosage_advisor, interaction_checker, recommendation_engine, triage
from medadvisor.services.knowledge_base import KnowledgeBase
from medadvisor.services.symptom_normalizer import normalize

logger = logging.getLogger(__name__)


class MedicineAdvisor:

    def __init__(self, kb: KnowledgeBase, recommendation_limit: Optional[int] = None):
        self.kb = kb
        self.recommendation_limit = recommendation_limit

    def recommend_medicines_for_symptoms(self, symptoms: Optional[Iterable[str]]) -> List[Medicine]:
        return recommendation_engine.recommend_medicines_for_symptoms(
            self.kb, symptoms, limit=self.recommendation_limit
        )

    def is_medical_attention_required(self, symptoms: Optional[Iterable[str]]) -> bool:
        return triage.is_medical_attention_required(self.kb, symptoms)

    def critical_symptoms_in(self, symptoms: Optional[Iterable[str]]) -> List[str]:
        return triage.critical_symptoms_in(self.kb, symptoms)

    def get_precautions_for_symptoms(self, symptoms: Optional[Iterable[str]]) -> List[str]:
        return aggregators.get_precautions_for_symptoms(self.kb, symptoms)

    def get_recommended_specialists(self, symptoms: Optional[Iterable[str]]) -> Dict[str, float]:
        return aggregators.get_recommended_specialists(self.kb, symptoms)

    def get_potential_side_effects(self, medicine_ids: Optional[Iterable[str]]) -> Dict[str, List[str]]:
        return aggregators.get_potential_side_effects(self.kb, medicine_ids)

    def check_medicine_interactions(self, medicine_ids: Optional[Iterable[str]]) -> InteractionReport:
        return interaction_checker.check_medicine_interactions(self.kb, medicine_ids)

    def get_health_advice(self, condition: Optional[str]) -> List[str]:
        return aggregators.get_health_advice(self.kb, condition)

    def get_suggested_dosage(self, medicine_id: str, age: float, weight: float) -> str:
        return dosage_advisor.get_suggested_dosage(medicine_id, age, weight)

    def consult(self, symptoms: Optional[Iterable[str]]) -> ConsultationResponse:
        """Triage, recommendations, precautions and specialists in one pass."""
        symptoms = list(symptoms or [])
        keys = []
        for raw in symptoms:
            key = normalize(raw)
            if key and key not in keys:
                keys.append(key)

        critical = self.critical_symptoms_in(keys)
        unmatched = [
            k for k in keys
            if not self.kb.medicines_for(k) and not self.kb.is_critical(k)
        ]
        if unmatched:
            logger.info(f"[Advisor] Unmatched symptoms: {unmatched}")

        return ConsultationResponse(
            symptoms=keys,
            medical_attention_required=bool(critical),
            critical_symptoms=critical,
            recommended_medicines=self.recommend_medicines_for_symptoms(keys),
            precautions=self.get_precautions_for_symptoms(keys),
            specialists=self.get_recommended_specialists(keys),
            unmatched_symptoms=unmatched,
        )
