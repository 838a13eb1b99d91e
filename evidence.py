"""
Evidence Normalization & Grading
-------------------------------
Purpose: turn raw titles and dates harvested from literature and trial
registries into normalized claim text, ISO dates and a heuristic evidence grade.

The grade is a transparency aid (B = stronger study design signal, C = anything
else). It says nothing about the medical accuracy of the harvested text.

Used by:
- sources.py when decoding PubMed and ClinicalTrials.gov responses
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Callable, Optional

from models import EvidenceGrade

TITLE_MAX_CHARS = 220

# Substrings in a publication title that indicate a stronger study design
PUBMED_B_MARKERS = (
    "meta-analysis",
    "systematic review",
    "randomized",
    "randomised",
    "phase 3",
)

# Formats seen in PubMed "pubdate", ClinicalTrials.gov date structs and seed data
_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m",
    "%Y/%m/%d",
    "%Y %b %d",
    "%Y %B %d",
    "%Y %b",
    "%Y %B",
    "%Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %Y",
    "%B %Y",
    "%m/%d/%Y",
)

_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
_WHITESPACE_RE = re.compile(r"\s+")


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def truncate_text(value: str, max_chars: int = TITLE_MAX_CHARS) -> str:
    """Collapse whitespace and cut to max_chars, marking the cut with '...'"""
    cleaned = _WHITESPACE_RE.sub(" ", value or "").strip()
    if len(cleaned) <= max_chars:
        return cleaned
    return f"{cleaned[:max_chars - 1]}..."


def _parse_date(value: str) -> Optional[date]:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        pass
    else:
        # Offsets are normalized to UTC before taking the calendar date
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
        return parsed.date()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None


def to_iso_date(value: Optional[str], today: Callable[[], date] = _utc_today) -> str:
    """
    Normalize a source date string to YYYY-MM-DD.

    Falls back to <year>-01-01 when only a 19xx/20xx year can be found, and to
    today's (UTC) date when nothing usable is present.
    """
    trimmed = (value or "").strip()
    if not trimmed:
        return today().isoformat()

    parsed = _parse_date(trimmed)
    if parsed is not None:
        return parsed.isoformat()

    match = _YEAR_RE.search(trimmed)
    if match:
        return f"{match.group(0)}-01-01"
    return today().isoformat()


def infer_pubmed_grade(title: str) -> EvidenceGrade:
    lower = (title or "").lower()
    if any(marker in lower for marker in PUBMED_B_MARKERS):
        return EvidenceGrade.B
    return EvidenceGrade.C


def infer_trials_grade(study_type: str, overall_status: str) -> EvidenceGrade:
    """Completed interventional studies grade B, everything else C"""
    if "INTERVENTIONAL" in (study_type or "").upper() and "COMPLETED" in (overall_status or "").upper():
        return EvidenceGrade.B
    return EvidenceGrade.C
