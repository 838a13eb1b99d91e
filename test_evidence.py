"""
Tests for evidence grading, date normalization and title truncation
"""

from datetime import date, datetime, timezone

from evidence import infer_pubmed_grade, infer_trials_grade, to_iso_date, truncate_text
from models import EvidenceGrade


def fixed_today():
    return date(2025, 7, 4)


def test_pubmed_grade_strong_designs():
    assert infer_pubmed_grade("Randomized controlled trial of X") is EvidenceGrade.B
    assert infer_pubmed_grade("A Systematic Review and Meta-Analysis of GLP-1 agonists") is EvidenceGrade.B
    assert infer_pubmed_grade("Randomised crossover study") is EvidenceGrade.B
    assert infer_pubmed_grade("Results from a PHASE 3 program") is EvidenceGrade.B


def test_pubmed_grade_everything_else():
    assert infer_pubmed_grade("Case report of X") is EvidenceGrade.C
    assert infer_pubmed_grade("Phase 2 dose finding") is EvidenceGrade.C
    assert infer_pubmed_grade("") is EvidenceGrade.C


def test_trials_grade_requires_completed_interventional():
    assert infer_trials_grade("INTERVENTIONAL", "COMPLETED") is EvidenceGrade.B
    assert infer_trials_grade("Interventional", "completed") is EvidenceGrade.B
    assert infer_trials_grade("OBSERVATIONAL", "COMPLETED") is EvidenceGrade.C
    assert infer_trials_grade("INTERVENTIONAL", "RECRUITING") is EvidenceGrade.C
    assert infer_trials_grade("", "Status not reported") is EvidenceGrade.C


def test_iso_date_passthrough():
    assert to_iso_date("2021-05-03") == "2021-05-03"


def test_iso_date_source_formats():
    assert to_iso_date("2023 Mar 5") == "2023-03-05"
    assert to_iso_date("2024 Jan") == "2024-01-01"
    assert to_iso_date("2022") == "2022-01-01"
    assert to_iso_date("2024-06") == "2024-06-01"
    assert to_iso_date("  2020-02-29  ") == "2020-02-29"
    assert to_iso_date("2024-01-15T08:30:00") == "2024-01-15"
    assert to_iso_date("Mar 2024") == "2024-03-01"
    assert to_iso_date("March 2024") == "2024-03-01"


def test_iso_date_offsets_become_utc():
    assert to_iso_date("2024-01-15T23:30:00-05:00") == "2024-01-16"
    assert to_iso_date("2024-01-16T01:00:00+02:00") == "2024-01-15"


def test_iso_date_year_fallback():
    assert to_iso_date("circa 2019") == "2019-01-01"
    assert to_iso_date("2024 Jan-Feb") == "2024-01-01"
    assert to_iso_date("Spring 1998") == "1998-01-01"


def test_iso_date_defaults_to_today():
    assert to_iso_date("", today=fixed_today) == "2025-07-04"
    assert to_iso_date(None, today=fixed_today) == "2025-07-04"
    assert to_iso_date("not a date", today=fixed_today) == "2025-07-04"
    # years outside 19xx/20xx are not trusted
    assert to_iso_date("year 1850", today=fixed_today) == "2025-07-04"


def test_iso_date_default_clock_is_utc_today():
    assert to_iso_date("") == datetime.now(timezone.utc).date().isoformat()


def test_truncate_collapses_whitespace():
    assert truncate_text("  A   study\n of\tBPC-157 ") == "A study of BPC-157"


def test_truncate_long_title():
    title = "word " * 100
    result = truncate_text(title)
    assert result.endswith("...")
    assert result[:-3] == " ".join(title.split())[:219]


def test_truncate_keeps_exact_limit():
    title = "x" * 220
    assert truncate_text(title) == title
