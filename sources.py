"""
External Evidence Sources for the Peptide Knowledge Base
PubMed (E-utilities search + summary) and ClinicalTrials.gov (v2 studies API)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from config import Config
from evidence import infer_pubmed_grade, infer_trials_grade, to_iso_date, truncate_text
from models import EvidenceGrade

logger = logging.getLogger(__name__)

PUBMED_SECTION = "Live Research (PubMed)"
CLINICAL_TRIALS_SECTION = "Live Research (ClinicalTrials)"
LIVE_SECTIONS = (PUBMED_SECTION, CLINICAL_TRIALS_SECTION)

# Every machine generated claim starts with this; curated claims never do
LIVE_CLAIM_PREFIX = "Live refresh:"

STATUS_NOT_REPORTED = "Status not reported"

USER_AGENT = "peptide-kb-sync/1.0"


class SourceError(RuntimeError):
    """An external source call failed (network, timeout, HTTP status or body)."""


@dataclass(frozen=True)
class LiveClaimCandidate:
    """A claim harvested from an external source, ready to be stored"""
    section: str
    claim_text: str
    evidence_grade: EvidenceGrade
    source_url: str
    source_title: str
    published_at: str  # YYYY-MM-DD


# ==================== TOLERANT JSON DECODING ====================

def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def fetch_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    session: Optional[requests.Session] = None,
    timeout: float = Config.HTTP_TIMEOUT_SECONDS,
) -> Dict[str, Any]:
    """
    GET a JSON object from an external API

    Args:
        url: Endpoint URL
        params: Query parameters
        session: Optional requests.Session (or compatible object) to send through
        timeout: Seconds before the call is abandoned

    Returns:
        The decoded JSON object

    Raises:
        SourceError: on network failure, timeout, non-success status, or a body
            that is not a JSON object
    """
    http = session or requests
    try:
        response = http.get(
            url,
            params=params,
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            timeout=timeout,
        )
    except requests.exceptions.RequestException as e:
        raise SourceError(f"Request to {url} failed: {e}") from e

    if not response.ok:
        raise SourceError(f"HTTP {response.status_code} from {url}")

    try:
        data = response.json()
    except ValueError as e:
        raise SourceError(f"Invalid JSON from {url}") from e

    if not isinstance(data, dict):
        raise SourceError(f"Unexpected JSON shape from {url}: {type(data).__name__}")
    return data


class PubMedSource:
    """Recent PubMed publications mentioning a peptide"""

    name = "pubmed"

    def __init__(
        self,
        api_key: Optional[str] = None,
        search_url: str = Config.PUBMED_ESEARCH_URL,
        summary_url: str = Config.PUBMED_ESUMMARY_URL,
        session: Optional[requests.Session] = None,
        timeout: float = Config.HTTP_TIMEOUT_SECONDS,
    ):
        self.api_key = (api_key or "").strip()
        self.search_url = search_url
        self.summary_url = summary_url
        self.session = session
        self.timeout = timeout

    @staticmethod
    def search_term(peptide_name: str) -> str:
        return f"{peptide_name}[Title/Abstract] AND (trial OR randomized OR meta-analysis OR review)"

    def _params(self, **params) -> Dict[str, Any]:
        if self.api_key:
            params["api_key"] = self.api_key
        return params

    def search_ids(self, peptide_name: str, max_items: int) -> List[str]:
        """Step 1: newest PMIDs for the peptide"""
        data = fetch_json(
            self.search_url,
            self._params(
                db="pubmed",
                retmode="json",
                retmax=str(max_items),
                sort="pub+date",
                term=self.search_term(peptide_name),
            ),
            session=self.session,
            timeout=self.timeout,
        )
        ids = _as_list(_as_dict(data.get("esearchresult")).get("idlist"))
        return [pmid for pmid in (_as_str(v).strip() for v in ids) if pmid]

    def summaries(self, ids: List[str]) -> Dict[str, Any]:
        """Step 2: title/pubdate records keyed by PMID"""
        data = fetch_json(
            self.summary_url,
            self._params(db="pubmed", id=",".join(ids), retmode="json"),
            session=self.session,
            timeout=self.timeout,
        )
        return _as_dict(data.get("result"))

    def recent_claims(self, peptide_name: str, max_items: int) -> List[LiveClaimCandidate]:
        ids = self.search_ids(peptide_name, max_items)
        if not ids:
            return []

        result = self.summaries(ids)
        claims = []
        for pmid in ids:
            entry = result.get(pmid)
            if not isinstance(entry, dict):
                continue
            title = truncate_text(_as_str(entry.get("title")))
            if not title:
                continue
            claims.append(LiveClaimCandidate(
                section=PUBMED_SECTION,
                claim_text=f'{LIVE_CLAIM_PREFIX} Recent PubMed publication (PMID {pmid}) reports "{title}".',
                evidence_grade=infer_pubmed_grade(title),
                source_url=f"https://pubmed.ncbi.nlm.nih.gov/{quote(pmid, safe='')}/",
                source_title=f"PubMed PMID {pmid}",
                published_at=to_iso_date(_as_str(entry.get("pubdate"))),
            ))
        return claims


class ClinicalTrialsSource:
    """Registered studies mentioning a peptide on ClinicalTrials.gov"""

    name = "clinicaltrials"

    def __init__(
        self,
        studies_url: str = Config.CLINICALTRIALS_STUDIES_URL,
        session: Optional[requests.Session] = None,
        timeout: float = Config.HTTP_TIMEOUT_SECONDS,
    ):
        self.studies_url = studies_url
        self.session = session
        self.timeout = timeout

    def studies(self, peptide_name: str, max_items: int) -> List[Any]:
        data = fetch_json(
            self.studies_url,
            {"query.term": peptide_name, "pageSize": str(max_items), "format": "json"},
            session=self.session,
            timeout=self.timeout,
        )
        return _as_list(data.get("studies"))

    @staticmethod
    def candidate_from_study(study: Any) -> Optional[LiveClaimCandidate]:
        """Decode one study record; None when the id or title is missing"""
        protocol = _as_dict(_as_dict(study).get("protocolSection"))
        identification = _as_dict(protocol.get("identificationModule"))
        status_module = _as_dict(protocol.get("statusModule"))
        design = _as_dict(protocol.get("designModule"))

        nct_id = _as_str(identification.get("nctId")).strip()
        brief_title = truncate_text(_as_str(identification.get("briefTitle")))
        if not nct_id or not brief_title:
            return None

        update_struct = status_module.get("lastUpdatePostDateStruct")
        if not isinstance(update_struct, dict):
            update_struct = _as_dict(status_module.get("lastUpdateSubmitDateStruct"))

        status_text = _as_str(status_module.get("overallStatus")) or STATUS_NOT_REPORTED
        return LiveClaimCandidate(
            section=CLINICAL_TRIALS_SECTION,
            claim_text=(
                f'{LIVE_CLAIM_PREFIX} ClinicalTrials.gov study {nct_id} ("{brief_title}") '
                f"is listed as {status_text}."
            ),
            evidence_grade=infer_trials_grade(_as_str(design.get("studyType")), status_text),
            source_url=f"https://clinicaltrials.gov/study/{quote(nct_id, safe='')}",
            source_title=f"ClinicalTrials.gov {nct_id}",
            published_at=to_iso_date(_as_str(update_struct.get("date"))),
        )

    def recent_claims(self, peptide_name: str, max_items: int) -> List[LiveClaimCandidate]:
        claims = []
        for study in self.studies(peptide_name, max_items):
            candidate = self.candidate_from_study(study)
            if candidate is not None:
                claims.append(candidate)
        return claims


def default_sources(session: Optional[requests.Session] = None) -> list:
    """Literature source first, then the trials registry"""
    return [
        PubMedSource(api_key=Config.NCBI_API_KEY, session=session),
        ClinicalTrialsSource(session=session),
    ]
