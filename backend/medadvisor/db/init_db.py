"""Create catalog tables and seed them from the knowledge base. Run on app startup."""
import logging
from typing import Optional

from sqlalchemy.orm import Session, sessionmaker

from medadvisor.db.base import Base
from medadvisor.db.session import SessionLocal, engine as default_engine
from medadvisor.models import medicine  # noqa: F401 - register models
from medadvisor.models.medicine import Medicine
from medadvisor.services.knowledge_base import KnowledgeBase, get_knowledge_base

logger = logging.getLogger(__name__)

DEFAULT_STOCK = 100


def seed_catalog(db: Session, kb: KnowledgeBase, stock: int = DEFAULT_STOCK) -> int:
    """Insert knowledge base medicines missing from the catalog. Returns rows added."""
    existing = {row.id for row in db.query(Medicine.id).all()}
    added = 0
    for med in kb.all_medicines():
        if med.id in existing:
            continue
        db.add(
            Medicine(
                id=med.id,
                name=med.name,
                price=med.price,
                category=med.category,
                requires_prescription=med.requires_prescription,
                description=med.description,
                stock=stock,
                side_effects=list(med.side_effects),
            )
        )
        added += 1
    db.commit()
    return added


def init_db(
    engine=None,
    session_factory: Optional[sessionmaker] = None,
    kb: Optional[KnowledgeBase] = None,
):
    engine = engine or default_engine
    session_factory = session_factory or SessionLocal
    Base.metadata.create_all(bind=engine)

    db = session_factory()
    try:
        added = seed_catalog(db, kb or get_knowledge_base())
        logger.info(f"[Catalog] Seeded {added} medicines")
    finally:
        db.close()
