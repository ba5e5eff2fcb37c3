"""FastAPI dependencies: DB session and the services built in the app lifespan."""
from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from medadvisor.db.session import SessionLocal
from medadvisor.services.advisor import MedicineAdvisor
from medadvisor.services.notification_service import NotificationDispatcher


def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_advisor(request: Request) -> MedicineAdvisor:
    return request.app.state.advisor


def get_notifier(request: Request) -> NotificationDispatcher:
    return request.app.state.notifier
