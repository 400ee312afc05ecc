"""Helpline listing service"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import Helpline
from .availability import EvaluationContext, destination, is_available

logger = logging.getLogger(__name__)

CONTACT_TYPES = ("voice", "text", "email", "webchat")
WINDOW_TEXT_KEYS = ("day", "opensAt", "closesAt", "from", "to")


def parse_open_now(value: Optional[str]) -> bool:
    """Only the literal string "true" turns the open-now filter on"""
    return value == "true"


def normalize_window(window) -> dict:
    """Keep the keys a window had, with non-string values blanked.

    A non-dict entry becomes {}, a window with no day that never matches.
    """
    if not isinstance(window, dict):
        return {}
    result = {}
    for key in WINDOW_TEXT_KEYS:
        if key in window:
            value = window[key]
            result[key] = value if isinstance(value, str) else None
    if "days" in window:
        days = window["days"]
        result["days"] = [d for d in days if isinstance(d, str)] if isinstance(days, list) else None
    return result


def normalize_method(method) -> Optional[dict]:
    """Stored contact method → {"value", "availability", "type"?, "instruction"?}

    is_available gives the same answer for the result as for the stored
    method. None when there is nothing to render.
    """
    if isinstance(method, str):
        return {"value": destination(method), "availability": []}
    if not isinstance(method, dict):
        return None

    availability = method.get("availability")
    if not availability:
        windows = []
    elif isinstance(availability, list):
        windows = [normalize_window(w) for w in availability]
    else:
        # unusable schedule: stays closed
        windows = [{}]

    result = {"value": destination(method), "availability": windows}
    for key in ("type", "instruction"):
        if isinstance(method.get(key), str):
            result[key] = method[key]
    return result


def normalize_contact(contact) -> dict:
    if not isinstance(contact, dict):
        return {}
    result = {}
    for kind in CONTACT_TYPES:
        method = normalize_method(contact.get(kind))
        if method is not None:
            result[kind] = method
    return result


def fetch_helplines(db: Session) -> List[dict]:
    """All helplines as plain documents, in insertion order"""
    rows = db.query(Helpline).order_by(Helpline.id).all()
    return [
        {**row.to_dict(), "contact": normalize_contact(row.contact)}
        for row in rows
    ]


def filter_open_now(helplines: List[dict], ctx: EvaluationContext) -> List[dict]:
    """Keep only reachable contact methods; drop helplines with none left.

    Returns copies; the input documents are not modified.
    """
    logger.info(
        f"Open-now filter: day={ctx.day_name} ({ctx.day_type.value}) "
        f"minutes={ctx.minutes_since_midnight}"
    )

    results = []
    for helpline in helplines:
        contact = helpline.get("contact")
        if not isinstance(contact, dict):
            contact = {}
        open_contact = {}
        for kind in CONTACT_TYPES:
            method = contact.get(kind)
            if is_available(method, ctx):
                open_contact[kind] = method
                logger.debug(f"[OPEN] {helpline.get('name')!r} via {kind}")

        if open_contact:
            results.append({**helpline, "contact": open_contact})

    logger.info(f"{len(results)} of {len(helplines)} helplines open now")
    return results


def list_helplines(helplines: List[dict], open_now: bool, ctx: EvaluationContext) -> List[dict]:
    if not open_now:
        return helplines
    return filter_open_now(helplines, ctx)
