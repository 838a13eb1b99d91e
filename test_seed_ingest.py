"""
Tests for bulk seed ingestion
"""

from dataclasses import replace

import pytest

from database import KnowledgeBaseStore, StoreError
from models import (
    Citation, DosingEntry, EvidenceGrade, Jurisdiction, JurisdictionCode, Peptide, PeptideAlias,
    PeptideClaim, PeptideProfile, PeptideUseCase, RegulatoryStatus, RegulatoryStatusValue,
    SafetyEntry, UseCase
)
from seed_data import SEED_CATALOG, StatusModel
from seed_ingest import IngestionError, SeedIngestor, ensure_jurisdictions, ingest_seed_catalog

TABLES = (
    Jurisdiction, Peptide, PeptideProfile, PeptideAlias, RegulatoryStatus, UseCase,
    PeptideUseCase, DosingEntry, SafetyEntry, Citation, PeptideClaim,
)


def seed(slug):
    return next(s for s in SEED_CATALOG if s.slug == slug)


def counts(store):
    return {model.__tablename__: len(store.select(model)) for model in TABLES}


def statuses(store, peptide_id):
    codes = {j.id: JurisdictionCode(j.code) for j in store.select(Jurisdiction)}
    return {
        (codes[row.jurisdiction_id], row.status)
        for row in store.select(RegulatoryStatus, peptide_id=peptide_id)
    }


def test_ensure_jurisdictions(store):
    lookup = ensure_jurisdictions(store)
    assert set(lookup) == set(JurisdictionCode)
    # repeatable
    assert ensure_jurisdictions(store) == lookup


def test_full_catalog(store):
    result = ingest_seed_catalog(store)
    assert result.to_dict() == {"processed": len(SEED_CATALOG), "total": len(SEED_CATALOG)}

    n = len(SEED_CATALOG)
    totals = counts(store)
    assert totals["peptides"] == n
    assert totals["peptide_profiles"] == n
    assert totals["peptide_regulatory_status"] == n * len(JurisdictionCode)
    assert totals["peptide_dosing_entries"] == n
    assert totals["peptide_safety_entries"] == n
    assert totals["peptide_claims"] == n
    assert totals["use_cases"] == len({s.use_case.slug for s in SEED_CATALOG})
    assert totals["peptide_aliases"] == sum(len(s.aliases) for s in SEED_CATALOG)
    assert all(p.is_published for p in store.select(Peptide))


def test_shared_sources_produce_one_citation(store):
    ingest_seed_catalog(store)

    distinct = {(s.claim.source_url, s.claim.published_at) for s in SEED_CATALOG}
    assert len(store.select(Citation)) == len(distinct)

    ipamorelin = store.select_one(Peptide, slug="ipamorelin")
    cjc = store.select_one(Peptide, slug="cjc-1295")
    (claim_a,) = store.select(PeptideClaim, peptide_id=ipamorelin.id)
    (claim_b,) = store.select(PeptideClaim, peptide_id=cjc.id)
    assert claim_a.citation_id == claim_b.citation_id


def test_second_run_is_idempotent(store):
    ingest_seed_catalog(store)
    before = counts(store)
    ids = {p.slug: p.id for p in store.select(Peptide)}

    ingest_seed_catalog(store)

    assert counts(store) == before
    assert {p.slug: p.id for p in store.select(Peptide)} == ids


def test_status_models(store):
    ingest_seed_catalog(store)

    semaglutide = store.select_one(Peptide, slug="semaglutide")
    assert statuses(store, semaglutide.id) == {
        (JurisdictionCode.US, RegulatoryStatusValue.US_FDA_APPROVED),
        (JurisdictionCode.EU, RegulatoryStatusValue.NON_US_APPROVED),
        (JurisdictionCode.UK, RegulatoryStatusValue.NON_US_APPROVED),
        (JurisdictionCode.CA, RegulatoryStatusValue.NON_US_APPROVED),
        (JurisdictionCode.AU, RegulatoryStatusValue.NON_US_APPROVED),
    }

    bpc = store.select_one(Peptide, slug="bpc-157")
    assert {status for _, status in statuses(store, bpc.id)} == {RegulatoryStatusValue.INVESTIGATIONAL}

    note = store.select(RegulatoryStatus, peptide_id=bpc.id)[0].notes
    assert note == "Auto-ingested seed dataset (investigational_all)."


def test_stale_status_rows_are_reconciled(store):
    ingest_seed_catalog(store)
    bpc = store.select_one(Peptide, slug="bpc-157")
    eu = store.select_one(Jurisdiction, code="EU")
    store.insert(RegulatoryStatus, {
        "peptide_id": bpc.id,
        "jurisdiction_id": eu.id,
        "status": RegulatoryStatusValue.RESEARCH_ONLY,
    })

    ingest_seed_catalog(store)

    eu_rows = store.select(RegulatoryStatus, peptide_id=bpc.id, jurisdiction_id=eu.id)
    assert [row.status for row in eu_rows] == [RegulatoryStatusValue.INVESTIGATIONAL]


def test_status_model_change_replaces_rows(store):
    ingestor = SeedIngestor(store, ensure_jurisdictions(store))
    original = seed("octreotide")
    peptide_id = ingestor.ingest(original)

    ingestor.ingest(replace(original, status_model=StatusModel.INVESTIGATIONAL_ALL))

    rows = store.select(RegulatoryStatus, peptide_id=peptide_id)
    assert len(rows) == len(JurisdictionCode)
    assert {row.status for row in rows} == {RegulatoryStatusValue.INVESTIGATIONAL}


def test_claim_regrade_keeps_row(store):
    ingestor = SeedIngestor(store, ensure_jurisdictions(store))
    original = seed("tb-500")
    peptide_id = ingestor.ingest(original)
    (before,) = store.select(PeptideClaim, peptide_id=peptide_id)
    claim_id = before.id

    ingestor.ingest(replace(original, claim=replace(original.claim, evidence_grade=EvidenceGrade.D)))

    (after,) = store.select(PeptideClaim, peptide_id=peptide_id)
    assert after.id == claim_id
    assert after.evidence_grade is EvidenceGrade.D


def test_changed_fields_overwrite_in_place(store):
    ingestor = SeedIngestor(store, ensure_jurisdictions(store))
    original = seed("liraglutide")
    peptide_id = ingestor.ingest(original)

    ingestor.ingest(replace(
        original,
        intro="Updated intro.",
        dosing=replace(original.dosing, notes="Updated dosing notes."),
        safety=replace(original.safety, monitoring="Updated monitoring."),
    ))

    assert store.select_one(PeptideProfile, peptide_id=peptide_id).intro == "Updated intro."
    (dosing,) = store.select(DosingEntry, peptide_id=peptide_id)
    assert dosing.notes == "Updated dosing notes."
    (safety,) = store.select(SafetyEntry, peptide_id=peptide_id)
    assert safety.monitoring == "Updated monitoring."


def test_new_dosing_population_adds_row(store):
    ingestor = SeedIngestor(store, ensure_jurisdictions(store))
    original = seed("octreotide")
    peptide_id = ingestor.ingest(original)

    ingestor.ingest(replace(original, dosing=replace(original.dosing, population="Pediatric cohort")))

    assert len(store.select(DosingEntry, peptide_id=peptide_id)) == 2


def test_aliases_are_additive(store):
    ingestor = SeedIngestor(store, ensure_jurisdictions(store))
    original = seed("semaglutide")
    peptide_id = ingestor.ingest(original)

    ingestor.ingest(replace(original, aliases=("NN9535",)))

    aliases = {a.alias for a in store.select(PeptideAlias, peptide_id=peptide_id)}
    assert aliases == set(original.aliases) | {"NN9535"}


class FailingDosingStore(KnowledgeBaseStore):
    def insert(self, model, row):
        if model is DosingEntry:
            raise StoreError(model.__tablename__, "disk full")
        return super().insert(model, row)


def test_store_failure_aborts_run(store):
    failing = FailingDosingStore(store.session)

    with pytest.raises(IngestionError) as excinfo:
        ingest_seed_catalog(failing)

    error = excinfo.value
    assert error.entity == "dosing entry"
    assert error.slug == SEED_CATALOG[0].slug
    assert "disk full" in str(error)

    # earlier writes for the failing seed are kept; later seeds never ran
    assert [p.slug for p in store.select(Peptide)] == [SEED_CATALOG[0].slug]
    assert store.select(PeptideClaim) == []


def test_catalog_covers_approved_peptide_programs():
    slugs = [s.slug for s in SEED_CATALOG]
    assert len(slugs) == len(set(slugs)) == 21
    for slug in (
        "dulaglutide", "exenatide", "lanreotide", "pasireotide", "tesamorelin", "glucagon",
        "desmopressin", "oxytocin", "bivalirudin", "enfuvirtide", "leuprolide", "triptorelin",
    ):
        assert slug in slugs
    assert slugs[0] == "semaglutide"
