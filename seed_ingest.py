"""
Bulk Seed Ingestion
Idempotently write every record of the seed catalog into the knowledge base
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Sequence

from citations import CitationResolver
from database import KnowledgeBaseStore, StoreError
from models import (
    DosingEntry, Jurisdiction, JurisdictionCode, Peptide, PeptideAlias, PeptideClaim,
    PeptideProfile, PeptideUseCase, RegulatoryStatus, SafetyEntry, UseCase
)
from seed_data import JURISDICTIONS, SEED_CATALOG, PeptideSeed, status_for_jurisdiction

logger = logging.getLogger(__name__)


class IngestionError(RuntimeError):
    """A store write failed during seed ingestion; the run is aborted."""

    def __init__(self, entity: str, slug: Optional[str], cause: Exception):
        where = f" for seed '{slug}'" if slug else ""
        super().__init__(f"Failed to write {entity}{where}: {cause}")
        self.entity = entity
        self.slug = slug


@dataclass
class IngestResult:
    processed: int
    total: int

    def to_dict(self) -> dict:
        return {"processed": self.processed, "total": self.total}


def ensure_jurisdictions(store: KnowledgeBaseStore) -> Dict[JurisdictionCode, int]:
    """Upsert the fixed jurisdiction list and return a code -> id lookup"""
    try:
        store.upsert(
            Jurisdiction,
            [{"code": code.value, "name": name} for code, name in JURISDICTIONS],
            conflict_key=["code"],
        )
        rows = store.select(Jurisdiction, Jurisdiction.code.in_([code.value for code, _ in JURISDICTIONS]))
    except StoreError as e:
        raise IngestionError("jurisdictions", None, e) from e

    lookup = {JurisdictionCode(row.code): row.id for row in rows}
    if JurisdictionCode.US not in lookup:
        raise IngestionError("jurisdictions", None, RuntimeError("US jurisdiction missing"))
    return lookup


class SeedIngestor:
    """Writes seed records one at a time against a store.

    One instance corresponds to one ingestion run; it owns the citation dedup
    cache for that run.
    """

    def __init__(self, store: KnowledgeBaseStore, jurisdiction_ids: Dict[JurisdictionCode, int]):
        self.store = store
        self.jurisdiction_ids = jurisdiction_ids
        self.us_id = jurisdiction_ids[JurisdictionCode.US]
        self.citations = CitationResolver(store)

    def ingest(self, seed: PeptideSeed) -> int:
        """Write one seed record; returns the peptide id"""
        peptide_id = self._step("peptide", seed, self._upsert_peptide)
        self._step("peptide profile", seed, self._upsert_profile, peptide_id)
        self._step("aliases", seed, self._upsert_aliases, peptide_id)
        self._step("regulatory status", seed, self._reconcile_status, peptide_id)
        self._step("use case", seed, self._upsert_use_case, peptide_id)
        self._step("dosing entry", seed, self._upsert_dosing, peptide_id)
        self._step("safety entry", seed, self._upsert_safety, peptide_id)
        citation_id = self._step("citation", seed, self._resolve_citation)
        self._step("claim", seed, self._upsert_claim, peptide_id, citation_id)
        return peptide_id

    def _step(self, entity, seed, fn, *args):
        try:
            return fn(seed, *args)
        except StoreError as e:
            raise IngestionError(entity, seed.slug, e) from e

    # ==================== PER-ENTITY WRITES ====================

    def _upsert_peptide(self, seed: PeptideSeed) -> int:
        (peptide,) = self.store.upsert(
            Peptide,
            [{
                "slug": seed.slug,
                "canonical_name": seed.name,
                "peptide_class": seed.peptide_class,
                "is_published": True,
                "updated_at": datetime.utcnow(),
            }],
            conflict_key=["slug"],
        )
        return peptide.id

    def _upsert_profile(self, seed: PeptideSeed, peptide_id: int):
        self.store.upsert(
            PeptideProfile,
            [{
                "peptide_id": peptide_id,
                "intro": seed.intro,
                "mechanism": seed.mechanism,
                "effectiveness_summary": seed.effectiveness_summary,
                "long_description": seed.long_description,
            }],
            conflict_key=["peptide_id"],
        )

    def _upsert_aliases(self, seed: PeptideSeed, peptide_id: int):
        # Additive only: aliases dropped from the seed are left in place
        for alias in seed.aliases:
            self.store.upsert(
                PeptideAlias,
                [{"peptide_id": peptide_id, "alias": alias}],
                conflict_key=["peptide_id", "alias"],
            )

    def _reconcile_status(self, seed: PeptideSeed, peptide_id: int):
        for code, _ in JURISDICTIONS:
            jurisdiction_id = self.jurisdiction_ids.get(code)
            if jurisdiction_id is None:
                continue
            status = status_for_jurisdiction(seed.status_model, code)

            # At most one status per peptide and jurisdiction survives
            self.store.delete(
                RegulatoryStatus,
                RegulatoryStatus.status != status,
                peptide_id=peptide_id,
                jurisdiction_id=jurisdiction_id,
            )
            self.store.upsert(
                RegulatoryStatus,
                [{
                    "peptide_id": peptide_id,
                    "jurisdiction_id": jurisdiction_id,
                    "status": status,
                    "notes": f"Auto-ingested seed dataset ({seed.status_model.value}).",
                }],
                conflict_key=["peptide_id", "jurisdiction_id", "status"],
            )

    def _upsert_use_case(self, seed: PeptideSeed, peptide_id: int):
        (use_case,) = self.store.upsert(
            UseCase,
            [{"slug": seed.use_case.slug, "name": seed.use_case.name}],
            conflict_key=["slug"],
        )
        self.store.upsert(
            PeptideUseCase,
            [{
                "peptide_id": peptide_id,
                "use_case_id": use_case.id,
                "jurisdiction_id": self.us_id,
                "evidence_grade": seed.use_case.evidence_grade,
                "consumer_summary": seed.use_case.consumer_summary,
                "clinical_summary": seed.use_case.clinical_summary,
            }],
            conflict_key=["peptide_id", "use_case_id", "jurisdiction_id"],
        )

    def _upsert_dosing(self, seed: PeptideSeed, peptide_id: int):
        dosing = seed.dosing
        natural_key = {
            "peptide_id": peptide_id,
            "jurisdiction_id": self.us_id,
            "context": dosing.context,
            "population": dosing.population,
        }
        payload = {
            **natural_key,
            "route": dosing.route,
            "starting_dose": dosing.starting_dose,
            "maintenance_dose": dosing.maintenance_dose,
            "frequency": dosing.frequency,
            "notes": dosing.notes,
        }
        existing = self.store.select_one(DosingEntry, **natural_key)
        if existing is not None:
            self.store.update(DosingEntry, payload, id=existing.id)
        else:
            self.store.insert(DosingEntry, payload)

    def _upsert_safety(self, seed: PeptideSeed, peptide_id: int):
        self.store.upsert(
            SafetyEntry,
            [{
                "peptide_id": peptide_id,
                "jurisdiction_id": self.us_id,
                "adverse_effects": seed.safety.adverse_effects,
                "contraindications": seed.safety.contraindications,
                "interactions": seed.safety.interactions,
                "monitoring": seed.safety.monitoring,
            }],
            conflict_key=["peptide_id", "jurisdiction_id"],
        )

    def _resolve_citation(self, seed: PeptideSeed) -> int:
        claim = seed.claim
        return self.citations.resolve(claim.source_url, claim.published_at, claim.source_title)

    def _upsert_claim(self, seed: PeptideSeed, peptide_id: int, citation_id: int):
        claim = seed.claim
        existing = self.store.select_one(
            PeptideClaim,
            peptide_id=peptide_id,
            section=claim.section,
            claim_text=claim.claim_text,
        )
        if existing is not None:
            self.store.update(
                PeptideClaim,
                {"evidence_grade": claim.evidence_grade, "citation_id": citation_id},
                id=existing.id,
            )
        else:
            self.store.insert(PeptideClaim, {
                "peptide_id": peptide_id,
                "section": claim.section,
                "claim_text": claim.claim_text,
                "evidence_grade": claim.evidence_grade,
                "citation_id": citation_id,
            })


def ingest_seed_catalog(
    store: KnowledgeBaseStore,
    catalog: Sequence[PeptideSeed] = SEED_CATALOG,
) -> IngestResult:
    """
    Ingest every seed record, in catalog order, exactly once.

    Any store failure raises IngestionError naming the entity and seed slug;
    rows written before the failure stay written.
    """
    jurisdiction_ids = ensure_jurisdictions(store)
    ingestor = SeedIngestor(store, jurisdiction_ids)

    processed = 0
    for seed in catalog:
        ingestor.ingest(seed)
        processed += 1
        logger.info("Ingested seed %s (%d/%d)", seed.slug, processed, len(catalog))

    logger.info(
        "Seed ingestion complete: %d/%d peptides, %d new citations",
        processed, len(catalog), ingestor.citations.created,
    )
    return IngestResult(processed=processed, total=len(catalog))
