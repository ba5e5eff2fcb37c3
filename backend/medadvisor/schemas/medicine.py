from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple


class Medicine(BaseModel):
    """A medicine known to the knowledge base.

    Identity is `id`: two records with the same id are the same medicine for
    deduplication, whatever their other fields say.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float
    category: str = ""
    requires_prescription: bool = False
    description: str = ""
    side_effects: Tuple[str, ...] = ()


class SymptomInfo(BaseModel):
    """Descriptive info and self-care precautions for one symptom key."""
    model_config = ConfigDict(frozen=True)

    description: str = ""
    precautions: Tuple[str, ...] = ()


class MedicineRecord(BaseModel):
    """Catalog row as returned by the /medicines endpoints."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: float
    category: str
    requires_prescription: bool
    description: Optional[str] = None
    stock: int = 0
    side_effects: list[str] = Field(default_factory=list)


class StockAdjustment(BaseModel):
    """Signed change to a medicine's stock count."""
    delta: int
