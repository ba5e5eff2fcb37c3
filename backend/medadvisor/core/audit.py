"""
Audit logging for advisory events.

One JSON line per event on the "audit" logger so escalations and safety
warnings can be shipped and searched separately from application logs.
Symptom text is logged as normalized keys only; no patient identifiers are
accepted here.
"""
import logging
import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

audit_logger = logging.getLogger("audit")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class AuditLog:
    """Central audit logging for advisory events."""

    @staticmethod
    def log_triage(
        symptoms: List[str],
        critical_symptoms: List[str],
        escalated: bool,
    ):
        """
        Log a triage decision.

        Escalations are logged at WARNING so they stand out in the stream.

        Usage:
            AuditLog.log_triage(["chest pain", "fever"], ["chest pain"], True)
        """
        log_entry = {
            "timestamp": _now(),
            "event_type": "triage.escalated" if escalated else "triage.self_care",
            "symptoms": symptoms,
            "critical_symptoms": critical_symptoms,
        }

        if escalated:
            audit_logger.warning(json.dumps(log_entry))
        else:
            audit_logger.info(json.dumps(log_entry))

    @staticmethod
    def log_interactions(medicine_ids: List[str], interactions: List[Dict[str, Any]]):
        """
        Log an interaction check that found at least one unsafe pair.

        Usage:
            AuditLog.log_interactions(["M001", "M005"], [{"first_id": "M001", ...}])
        """
        log_entry = {
            "timestamp": _now(),
            "event_type": "interactions.found",
            "medicine_ids": medicine_ids,
            "interaction_count": len(interactions),
            "pairs": [f"{i['first_id']}+{i['second_id']}" for i in interactions],
        }

        audit_logger.warning(json.dumps(log_entry))

    @staticmethod
    def log_consultation(
        symptoms: List[str],
        recommended_ids: List[str],
        medical_attention_required: bool,
        notified: Optional[str] = None,
    ):
        """
        Log a full consultation summary.

        Usage:
            AuditLog.log_consultation(["headache"], ["M001", "M002"], False)
        """
        log_entry = {
            "timestamp": _now(),
            "event_type": "consultation.completed",
            "symptoms": symptoms,
            "recommended_ids": recommended_ids,
            "medical_attention_required": medical_attention_required,
        }

        if notified:
            log_entry["notified"] = notified

        audit_logger.info(json.dumps(log_entry))

    @staticmethod
    def log_api_call(
        endpoint: str,
        method: str,
        status_code: int = 200,
        duration_ms: float = 0,
    ):
        """
        Log API calls for performance monitoring.

        Usage:
            AuditLog.log_api_call("/recommendations/consult", "POST", status_code=200, duration_ms=3.1)
        """
        log_entry = {
            "timestamp": _now(),
            "event_type": "api.call",
            "endpoint": endpoint,
            "method": method,
            "status_code": status_code,
            "duration_ms": duration_ms,
        }

        audit_logger.info(json.dumps(log_entry))
