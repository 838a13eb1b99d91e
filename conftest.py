"""
Shared pytest fixtures: a throwaway SQLite knowledge base and offline evidence sources
"""

from datetime import date

import pytest

from database import open_store
from models import Citation, EvidenceGrade, Peptide
from sources import CLINICAL_TRIALS_SECTION, PUBMED_SECTION, LiveClaimCandidate


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'peptide_kb.db'}"


@pytest.fixture
def store(db_url):
    store = open_store(db_url)
    yield store
    store.close()


@pytest.fixture
def add_peptide(store):
    """Insert a published peptide directly, bypassing seed ingestion"""
    def _add(slug, name=None, last_live_refresh_at=None, is_published=True):
        return store.insert(Peptide, {
            "slug": slug,
            "canonical_name": name or slug.upper(),
            "is_published": is_published,
            "last_live_refresh_at": last_live_refresh_at,
        })
    return _add


@pytest.fixture
def add_citation(store):
    def _add(url="https://example.org/source", published_at=date(2024, 1, 1), title="Example source"):
        return store.insert(Citation, {"source_url": url, "published_at": published_at, "source_title": title})
    return _add


def pubmed_candidate(pmid, title="Case series of peptide use", published_at="2024-05-01"):
    return LiveClaimCandidate(
        section=PUBMED_SECTION,
        claim_text=f'Live refresh: Recent PubMed publication (PMID {pmid}) reports "{title}".',
        evidence_grade=EvidenceGrade.C,
        source_url=f"https://pubmed.ncbi.nlm.nih.gov/{pmid}/",
        source_title=f"PubMed PMID {pmid}",
        published_at=published_at,
    )


def trial_candidate(nct_id, status="COMPLETED", published_at="2024-06-01"):
    return LiveClaimCandidate(
        section=CLINICAL_TRIALS_SECTION,
        claim_text=f'Live refresh: ClinicalTrials.gov study {nct_id} ("A study") is listed as {status}.',
        evidence_grade=EvidenceGrade.B,
        source_url=f"https://clinicaltrials.gov/study/{nct_id}",
        source_title=f"ClinicalTrials.gov {nct_id}",
        published_at=published_at,
    )


class StaticSource:
    """Evidence source returning canned candidates (or raising) per peptide name"""

    def __init__(self, name, results=None, default=()):
        self.name = name
        self.results = results or {}
        self.default = default
        self.calls = []

    def recent_claims(self, peptide_name, max_items):
        self.calls.append((peptide_name, max_items))
        outcome = self.results.get(peptide_name, self.default)
        if isinstance(outcome, Exception):
            raise outcome
        return list(outcome)[:max_items]


class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self.invalid_json:
            raise ValueError("No JSON object could be decoded")
        return self.payload


class FakeHttp:
    """Stands in for requests.Session; routes GETs by URL"""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.requests.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        outcome = self.routes[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
