"""Medicine catalog reads and stock updates. Resolves ids returned by the advisor to catalog rows."""
import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from medadvisor.models.medicine import Medicine

logger = logging.getLogger(__name__)


def get_medicine(db: Session, medicine_id: str) -> Medicine | None:
    if not medicine_id:
        return None
    return db.query(Medicine).filter(Medicine.id == medicine_id.strip()).first()


def resolve_medicines(db: Session, medicine_ids: Iterable[str]) -> List[Medicine]:
    """
    Rows for the given ids, in the order given.

    Unknown ids are skipped (logged at debug); repeated ids appear once.
    """
    ids = []
    for medicine_id in medicine_ids or ():
        if medicine_id and medicine_id not in ids:
            ids.append(medicine_id)
    if not ids:
        return []

    rows = {row.id: row for row in db.query(Medicine).filter(Medicine.id.in_(ids)).all()}
    missing = [i for i in ids if i not in rows]
    if missing:
        logger.debug(f"[Catalog] Unknown medicine ids skipped: {missing}")
    return [rows[i] for i in ids if i in rows]


def list_medicines(
    db: Session,
    otc_only: bool = False,
    category: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Medicine]:
    """Catalog listing with optional OTC / category / name filters, ordered by id."""
    q = db.query(Medicine)
    if otc_only:
        q = q.filter(Medicine.requires_prescription.is_(False))
    if category:
        q = q.filter(Medicine.category.ilike(category.strip()))
    if search:
        q = q.filter(Medicine.name.ilike(f"%{search.strip()}%"))
    return q.order_by(Medicine.id).all()


def adjust_stock(db: Session, medicine_id: str, delta: int) -> Medicine | None:
    """
    Adjust stock by delta. Returns None for an unknown id.

    Raises ValueError if the adjustment would take stock below zero; the row
    is left unchanged in that case.
    """
    medicine = get_medicine(db, medicine_id)
    if medicine is None:
        return None
    new_stock = medicine.stock + delta
    if new_stock < 0:
        raise ValueError(f"Insufficient stock for {medicine.id}: have {medicine.stock}, delta {delta}")
    medicine.stock = new_stock
    db.commit()
    db.refresh(medicine)
    logger.info(f"[Catalog] Stock for {medicine.id} adjusted by {delta} to {new_stock}")
    return medicine
