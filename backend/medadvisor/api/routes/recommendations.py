"""
Advisory endpoints: one per advisor operation, plus /consult.

/consult returns triage and recommendations together. They are computed
independently; the medical-attention flag never empties the medicine list.
Rendering policy (e.g. show only the warning) is up to the client.
"""
import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, Query, Request

from medadvisor.api.deps import get_advisor, get_notifier
from medadvisor.core.audit import AuditLog
from medadvisor.schemas.advice import (
    ConsultationResponse,
    DosageResponse,
    InteractionReport,
    MedicineIdQuery,
    SymptomQuery,
    TriageResponse,
)
from medadvisor.schemas.medicine import Medicine
from medadvisor.services.advisor import MedicineAdvisor
from medadvisor.services.notification_service import NotificationDispatcher
from medadvisor.services.symptom_normalizer import normalize_all

logger = logging.getLogger(__name__)
router = APIRouter()


def _notify_escalation(request: Request, notifier: NotificationDispatcher, critical: List[str]) -> str | None:
    contact = getattr(request.app.state, "escalation_contact", "")
    if not contact:
        return None
    notifier.send_email(
        contact,
        "Symptom triage escalation",
        f"Critical symptoms reported: {', '.join(critical)}. Clinician follow-up required.",
    )
    return contact


@router.post("/consult", response_model=ConsultationResponse)
def consult(
    body: SymptomQuery,
    request: Request,
    advisor: MedicineAdvisor = Depends(get_advisor),
    notifier: NotificationDispatcher = Depends(get_notifier),
):
    """Triage + ranked medicines + precautions + specialists for a symptom list."""
    result = advisor.consult(body.symptoms)

    notified = None
    if result.medical_attention_required:
        AuditLog.log_triage(result.symptoms, result.critical_symptoms, True)
        notified = _notify_escalation(request, notifier, result.critical_symptoms)

    AuditLog.log_consultation(
        result.symptoms,
        [m.id for m in result.recommended_medicines],
        result.medical_attention_required,
        notified=notified,
    )
    return result


@router.post("/medicines", response_model=list[Medicine])
def recommend_medicines(body: SymptomQuery, advisor: MedicineAdvisor = Depends(get_advisor)):
    """Medicines ranked by how many of the symptoms they cover."""
    return advisor.recommend_medicines_for_symptoms(body.symptoms)


@router.post("/triage", response_model=TriageResponse)
def triage(
    body: SymptomQuery,
    request: Request,
    advisor: MedicineAdvisor = Depends(get_advisor),
    notifier: NotificationDispatcher = Depends(get_notifier),
):
    required = advisor.is_medical_attention_required(body.symptoms)
    critical = advisor.critical_symptoms_in(body.symptoms) if required else []
    AuditLog.log_triage(normalize_all(body.symptoms), critical, required)
    if required:
        _notify_escalation(request, notifier, critical)
    return TriageResponse(medical_attention_required=required, critical_symptoms=critical)


@router.post("/precautions", response_model=list[str])
def precautions(body: SymptomQuery, advisor: MedicineAdvisor = Depends(get_advisor)):
    return advisor.get_precautions_for_symptoms(body.symptoms)


@router.post("/specialists", response_model=Dict[str, float])
def specialists(body: SymptomQuery, advisor: MedicineAdvisor = Depends(get_advisor)):
    """Specialists with scores summed across symptoms."""
    return advisor.get_recommended_specialists(body.symptoms)


@router.post("/side-effects", response_model=Dict[str, List[str]])
def side_effects(body: MedicineIdQuery, advisor: MedicineAdvisor = Depends(get_advisor)):
    return advisor.get_potential_side_effects(body.medicine_ids)


@router.post("/interactions", response_model=InteractionReport)
def interactions(body: MedicineIdQuery, advisor: MedicineAdvisor = Depends(get_advisor)):
    report = advisor.check_medicine_interactions(body.medicine_ids)
    if report.has_interactions:
        AuditLog.log_interactions(body.medicine_ids, [r.model_dump() for r in report.interactions])
    return report


@router.get("/advice/{condition}", response_model=list[str])
def health_advice(condition: str, advisor: MedicineAdvisor = Depends(get_advisor)):
    """Advice for a condition. Unknown conditions give an empty list, not a 404."""
    return advisor.get_health_advice(condition)


@router.get("/dosage", response_model=DosageResponse)
def dosage(
    medicine_id: str = Query(""),
    age: float = Query(0),
    weight: float = Query(0),
    advisor: MedicineAdvisor = Depends(get_advisor),
):
    """Advisory dosage text. Bad numbers give the invalid-input message with a 200."""
    return DosageResponse(
        medicine_id=medicine_id,
        age=age,
        weight=weight,
        recommendation=advisor.get_suggested_dosage(medicine_id, age, weight),
    )


@router.get("/symptoms", response_model=list[str])
def known_symptoms(advisor: MedicineAdvisor = Depends(get_advisor)):
    """Every symptom key the knowledge base recognizes."""
    return advisor.kb.known_symptoms()
