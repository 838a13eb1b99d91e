"""
Tests for the PubMed and ClinicalTrials.gov clients (no network)
"""

import pytest
import requests

from conftest import FakeHttp, FakeResponse
from models import EvidenceGrade
from sources import (
    CLINICAL_TRIALS_SECTION, PUBMED_SECTION, ClinicalTrialsSource, PubMedSource,
    SourceError, fetch_json
)

SEARCH_URL = "https://pubmed.test/esearch"
SUMMARY_URL = "https://pubmed.test/esummary"
STUDIES_URL = "https://trials.test/studies"


def pubmed(http, api_key=None):
    return PubMedSource(api_key=api_key, search_url=SEARCH_URL, summary_url=SUMMARY_URL, session=http)


def test_fetch_json_returns_object():
    http = FakeHttp({STUDIES_URL: FakeResponse({"studies": []})})
    assert fetch_json(STUDIES_URL, {"a": "1"}, session=http, timeout=15) == {"studies": []}
    assert http.requests[0]["timeout"] == 15


def test_fetch_json_http_error_is_hard_failure():
    http = FakeHttp({STUDIES_URL: FakeResponse({"studies": []}, status_code=503)})
    with pytest.raises(SourceError, match="HTTP 503"):
        fetch_json(STUDIES_URL, session=http)


def test_fetch_json_timeout():
    http = FakeHttp({STUDIES_URL: requests.exceptions.Timeout("read timed out")})
    with pytest.raises(SourceError, match="read timed out"):
        fetch_json(STUDIES_URL, session=http)


def test_fetch_json_rejects_bad_bodies():
    http = FakeHttp({STUDIES_URL: FakeResponse(invalid_json=True)})
    with pytest.raises(SourceError, match="Invalid JSON"):
        fetch_json(STUDIES_URL, session=http)

    http = FakeHttp({STUDIES_URL: FakeResponse(["not", "an", "object"])})
    with pytest.raises(SourceError, match="Unexpected JSON shape"):
        fetch_json(STUDIES_URL, session=http)


def test_pubmed_two_step_harvest():
    http = FakeHttp({
        SEARCH_URL: FakeResponse({"esearchresult": {"idlist": ["38000001", "38000002", "38000003"]}}),
        SUMMARY_URL: FakeResponse({"result": {
            "uids": ["38000001", "38000002", "38000003"],
            "38000001": {"title": "A  randomized\ntrial of semaglutide", "pubdate": "2023 Mar 5"},
            "38000002": {"title": "   ", "pubdate": "2023"},
            "38000003": {"title": "Case report", "pubdate": "Winter 2021"},
        }}),
    })

    claims = pubmed(http).recent_claims("Semaglutide", 3)

    assert len(claims) == 2
    first, second = claims
    assert first.section == PUBMED_SECTION
    assert first.claim_text == (
        'Live refresh: Recent PubMed publication (PMID 38000001) reports "A randomized trial of semaglutide".'
    )
    assert first.evidence_grade is EvidenceGrade.B
    assert first.source_url == "https://pubmed.ncbi.nlm.nih.gov/38000001/"
    assert first.source_title == "PubMed PMID 38000001"
    assert first.published_at == "2023-03-05"
    assert second.evidence_grade is EvidenceGrade.C
    assert second.published_at == "2021-01-01"

    search, summary = http.requests
    assert search["params"]["retmax"] == "3"
    assert search["params"]["sort"] == "pub+date"
    assert search["params"]["term"].startswith("Semaglutide[Title/Abstract]")
    assert "api_key" not in search["params"]
    assert summary["params"]["id"] == "38000001,38000002,38000003"


def test_pubmed_api_key_sent_on_both_calls():
    http = FakeHttp({
        SEARCH_URL: FakeResponse({"esearchresult": {"idlist": ["1"]}}),
        SUMMARY_URL: FakeResponse({"result": {"1": {"title": "T", "pubdate": "2020"}}}),
    })
    pubmed(http, api_key="abc123").recent_claims("BPC-157", 1)
    assert [r["params"]["api_key"] for r in http.requests] == ["abc123", "abc123"]


def test_pubmed_no_ids_skips_summary_call():
    http = FakeHttp({SEARCH_URL: FakeResponse({"esearchresult": {"idlist": []}})})
    assert pubmed(http).recent_claims("Obscure", 2) == []
    assert len(http.requests) == 1


def test_pubmed_tolerates_unexpected_shapes():
    http = FakeHttp({
        SEARCH_URL: FakeResponse({"esearchresult": {"idlist": ["7", 8, None, ""]}}),
        SUMMARY_URL: FakeResponse({"result": {"7": "not a record"}}),
    })
    assert pubmed(http).recent_claims("X", 3) == []


def study(nct_id="NCT01234567", title="Tesamorelin in adults", status="COMPLETED",
          study_type="INTERVENTIONAL", post_date="2024-02-10", submit_date=None):
    status_module = {}
    if status is not None:
        status_module["overallStatus"] = status
    if post_date is not None:
        status_module["lastUpdatePostDateStruct"] = {"date": post_date, "type": "ACTUAL"}
    if submit_date is not None:
        status_module["lastUpdateSubmitDateStruct"] = {"date": submit_date}
    return {"protocolSection": {
        "identificationModule": {"nctId": nct_id, "briefTitle": title},
        "statusModule": status_module,
        "designModule": {"studyType": study_type},
    }}


def test_trials_harvest():
    http = FakeHttp({STUDIES_URL: FakeResponse({"studies": [
        study(),
        study(nct_id="NCT07654321", status=None, study_type="OBSERVATIONAL",
              post_date=None, submit_date="2022-11"),
        study(nct_id="", title="Missing id"),
        study(nct_id="NCT00000001", title=""),
        "garbage",
    ]})})

    claims = ClinicalTrialsSource(studies_url=STUDIES_URL, session=http).recent_claims("Tesamorelin", 3)

    assert len(claims) == 2
    completed, unreported = claims
    assert completed.section == CLINICAL_TRIALS_SECTION
    assert completed.claim_text == (
        'Live refresh: ClinicalTrials.gov study NCT01234567 ("Tesamorelin in adults") is listed as COMPLETED.'
    )
    assert completed.evidence_grade is EvidenceGrade.B
    assert completed.source_url == "https://clinicaltrials.gov/study/NCT01234567"
    assert completed.source_title == "ClinicalTrials.gov NCT01234567"
    assert completed.published_at == "2024-02-10"

    assert unreported.claim_text.endswith("is listed as Status not reported.")
    assert unreported.evidence_grade is EvidenceGrade.C
    assert unreported.published_at == "2022-11-01"

    params = http.requests[0]["params"]
    assert params == {"query.term": "Tesamorelin", "pageSize": "3", "format": "json"}


def test_trials_missing_studies_key():
    http = FakeHttp({STUDIES_URL: FakeResponse({"totalCount": 0})})
    assert ClinicalTrialsSource(studies_url=STUDIES_URL, session=http).recent_claims("X", 2) == []
