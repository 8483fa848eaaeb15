from typing import Callable, Dict

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from artroad.extensions import db
from .content.gallery import gallery
from .content.leads import leads
from .content.services import services


def _safe_count(name: str, counter: Callable[[], int]) -> int:
    try:
        return counter()
    except SQLAlchemyError:
        # One failing counter degrades to zero instead of failing the dashboard
        db.session.rollback()
        current_app.logger.warning("admin.stats counter=%s failed", name, exc_info=True)
        return 0


def dashboard_stats() -> Dict[str, int]:
    """Flat counters for the admin dashboard header."""
    return {
        "services": _safe_count("services", services.count),
        "gallery": _safe_count("gallery", gallery.count),
        "leads": _safe_count("leads", leads.count),
        "newLeads": _safe_count("newLeads", lambda: leads.count(status="new")),
    }
