from sqlalchemy import Column, Integer, String, Numeric, Boolean
from sqlalchemy.types import JSON
from medadvisor.db.base import Base


class Medicine(Base):
    """
    Medicine catalog row.

    Seeded from the knowledge base at startup; the id is the knowledge base
    medicine id, so recommendation results resolve straight to rows here.
    """
    __tablename__ = "medicines"

    id = Column(String(16), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    category = Column(String(64), nullable=False, default="")
    requires_prescription = Column(Boolean, default=False)
    description = Column(String(512), nullable=True)
    stock = Column(Integer, default=0)
    side_effects = Column(JSON, nullable=True, default=list)

    def __repr__(self):
        return f"<Medicine id={self.id} name={self.name}>"
