"""Request/response models for the advisory endpoints, plus the report types
the interaction checker and dosage advisor return."""

from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from medadvisor.schemas.medicine import Medicine
from medadvisor.services.symptom_normalizer import split_symptom_text


class Severity(str, Enum):
    """Interaction severity. CAUTION is the fixed tag for ungraded pairs."""
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"
    CAUTION = "caution"


class AgeBand(str, Enum):
    INFANT = "infant"
    CHILD = "child"
    ADOLESCENT = "adolescent"
    ADULT = "adult"
    SENIOR = "senior"


class InteractionRecord(BaseModel):
    first_id: str
    second_id: str
    description: str
    severity: Severity = Severity.CAUTION


class InteractionReport(BaseModel):
    interactions: List[InteractionRecord] = Field(default_factory=list)
    has_interactions: bool = False


def _none_to_empty(v: Optional[List[str]]) -> List[str]:
    """Absent lists are empty lists. Non-string entries are dropped."""
    if not v:
        return []
    return [s for s in v if isinstance(s, str)]


class SymptomQuery(BaseModel):
    """Symptoms as a list, as comma-separated `text`, or both.

    Pieces split out of `text` are appended after the listed symptoms.
    """
    symptoms: List[str] = Field(default_factory=list)
    text: Optional[str] = None

    @field_validator("symptoms", mode="before")
    @classmethod
    def default_symptoms(cls, v):
        return _none_to_empty(v)

    @model_validator(mode="after")
    def merge_text(self):
        if self.text:
            self.symptoms = self.symptoms + split_symptom_text(self.text)
        return self


class MedicineIdQuery(BaseModel):
    medicine_ids: List[str] = Field(default_factory=list)

    @field_validator("medicine_ids", mode="before")
    @classmethod
    def default_ids(cls, v):
        return _none_to_empty(v)


class TriageResponse(BaseModel):
    medical_attention_required: bool
    critical_symptoms: List[str] = Field(default_factory=list)


class ConsultationResponse(BaseModel):
    """Triage and recommendations side by side.

    The two are computed independently; a critical symptom does not remove
    the recommendations. Rendering policy belongs to the caller.
    """
    symptoms: List[str]
    medical_attention_required: bool
    critical_symptoms: List[str] = Field(default_factory=list)
    recommended_medicines: List[Medicine] = Field(default_factory=list)
    precautions: List[str] = Field(default_factory=list)
    specialists: Dict[str, float] = Field(default_factory=dict)
    unmatched_symptoms: List[str] = Field(default_factory=list)


class DosageResponse(BaseModel):
    medicine_id: str
    age: float
    weight: float
    recommendation: str
