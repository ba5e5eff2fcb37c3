"""Medicine catalog: listing, lookup by id, bulk id resolution and stock updates."""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from medadvisor.api.deps import get_db
from medadvisor.core.exceptions import AdvisorError
from medadvisor.schemas.advice import MedicineIdQuery
from medadvisor.schemas.medicine import MedicineRecord, StockAdjustment
from medadvisor.services import catalog_service

router = APIRouter()


@router.get("", response_model=list[MedicineRecord])
def list_medicines(
    otc_only: bool = Query(False),
    category: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Catalog listing. `otc_only` hides prescription medicines."""
    return catalog_service.list_medicines(db, otc_only=otc_only, category=category, search=search)


@router.post("/resolve", response_model=list[MedicineRecord])
def resolve_medicines(body: MedicineIdQuery, db: Session = Depends(get_db)):
    """Resolve advisor ids to catalog rows, in request order. Unknown ids are skipped."""
    return catalog_service.resolve_medicines(db, body.medicine_ids)


@router.get("/{medicine_id}", response_model=MedicineRecord)
def get_medicine(medicine_id: str, db: Session = Depends(get_db)):
    medicine = catalog_service.get_medicine(db, medicine_id)
    if not medicine:
        raise AdvisorError.not_found("Medicine", f"id={medicine_id}")
    return medicine


@router.post("/{medicine_id}/stock", response_model=MedicineRecord)
def adjust_stock(medicine_id: str, body: StockAdjustment, db: Session = Depends(get_db)):
    """Apply a signed stock change. Stock never goes below zero."""
    try:
        medicine = catalog_service.adjust_stock(db, medicine_id, body.delta)
    except ValueError as e:
        raise AdvisorError.bad_request(str(e))
    except SQLAlchemyError as e:
        db.rollback()
        raise AdvisorError.server_error(e)
    if not medicine:
        raise AdvisorError.not_found("Medicine", f"id={medicine_id}")
    return medicine
