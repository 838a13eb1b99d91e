"""
Live Evidence Refresh
Harvest recent PubMed and ClinicalTrials.gov evidence for the stalest published peptides
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from sqlalchemy import func

from citations import CitationResolver
from config import Config
from database import KnowledgeBaseStore
from models import Peptide, PeptideClaim
from sources import LIVE_CLAIM_PREFIX, LIVE_SECTIONS, LiveClaimCandidate, SourceError, default_sources

logger = logging.getLogger(__name__)

BATCH_SIZE_RANGE = (1, 50)
SOURCES_PER_PEPTIDE_RANGE = (1, 3)


@dataclass
class RefreshFailure:
    peptide_id: int
    slug: str
    error: str


@dataclass
class RefreshResult:
    peptides_scanned: int = 0
    claims_upserted: int = 0
    peptides_with_no_hits: int = 0
    failures: int = 0
    failed: List[RefreshFailure] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "peptidesScanned": self.peptides_scanned,
            "claimsUpserted": self.claims_upserted,
            "peptidesWithNoHits": self.peptides_with_no_hits,
            "failures": self.failures,
            "failed": [asdict(f) for f in self.failed],
        }


def _clamp(value, bounds, default: int) -> int:
    low, high = bounds
    try:
        number = int(value) if value is not None else default
    except (TypeError, ValueError):
        number = default
    return max(low, min(high, number))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def load_peptides_for_refresh(store: KnowledgeBaseStore, batch_size: int) -> List[Peptide]:
    """Published peptides, never-refreshed first, then oldest refresh, then id"""
    rows = store.select(
        Peptide,
        Peptide.is_published.is_(True),
        order_by=[Peptide.last_live_refresh_at.asc().nullsfirst(), Peptide.id.asc()],
        limit=batch_size,
    )
    return [row for row in rows if (row.canonical_name or "").strip()]


def harvest_candidates(
    executor: ThreadPoolExecutor,
    sources: Sequence,
    peptide_name: str,
    max_items: int,
    deadline: Optional[float] = None,
) -> List[LiveClaimCandidate]:
    """Query every source concurrently and join; any source failure fails the harvest.

    deadline bounds the whole fan-out in seconds. A source still running when
    it passes fails the harvest with SourceError; its worker thread is left to
    finish on its own (requests cannot be interrupted mid-call).
    """
    futures = [executor.submit(source.recent_claims, peptide_name, max_items) for source in sources]
    _, pending = wait(futures, timeout=deadline)
    if pending:
        for future in pending:
            future.cancel()
        late = [source.name for source, future in zip(sources, futures) if future in pending]
        raise SourceError(f"{', '.join(late)} did not answer within {deadline:g}s")

    candidates: List[LiveClaimCandidate] = []
    for source, future in zip(sources, futures):
        claims = future.result()
        logger.debug("%s returned %d candidates for %s", source.name, len(claims), peptide_name)
        candidates.extend(claims)

    # Identical text would collide on (peptide, section, claim_text)
    unique, seen = [], set()
    for candidate in candidates:
        key = (candidate.section, candidate.claim_text)
        if key not in seen:
            seen.add(key)
            unique.append(candidate)
    return unique


def replace_live_claims(
    store: KnowledgeBaseStore,
    peptide_id: int,
    candidates: Sequence[LiveClaimCandidate],
    citations: CitationResolver,
) -> int:
    """Swap a peptide's machine-generated live claims for the new candidates.

    Only rows in the live sections whose text starts with the live prefix are
    removed, so curated claims sharing a section name are kept. The delete and
    the inserts are separate writes, not one transaction.
    """
    if not candidates:
        return 0

    store.delete(
        PeptideClaim,
        PeptideClaim.section.in_(LIVE_SECTIONS),
        func.substr(PeptideClaim.claim_text, 1, len(LIVE_CLAIM_PREFIX)) == LIVE_CLAIM_PREFIX,
        peptide_id=peptide_id,
    )

    inserted = 0
    for candidate in candidates:
        citation_id = citations.resolve(candidate.source_url, candidate.published_at, candidate.source_title)
        store.insert(PeptideClaim, {
            "peptide_id": peptide_id,
            "section": candidate.section,
            "claim_text": candidate.claim_text,
            "evidence_grade": candidate.evidence_grade,
            "citation_id": citation_id,
        })
        inserted += 1
    return inserted


def refresh_live_evidence(
    store: KnowledgeBaseStore,
    batch_size: Optional[int] = None,
    sources_per_peptide: Optional[int] = None,
    sources: Optional[Sequence] = None,
    now: Callable[[], datetime] = _utc_now,
    harvest_deadline: Optional[float] = None,
) -> RefreshResult:
    """
    Refresh live evidence claims for one batch of peptides.

    Args:
        store: Knowledge base store
        batch_size: Peptides per run, clamped to 1-50 (default from config, 12)
        sources_per_peptide: Results per source, clamped to 1-3 (default from config, 2)
        sources: Evidence sources; defaults to PubMed then ClinicalTrials.gov
        now: Clock used for last_live_refresh_at
        harvest_deadline: Seconds allowed for one peptide's fan-out (default from config, 30)

    Returns:
        RefreshResult with scan, claim, no-hit and failure counts. A peptide that
        fails keeps its previous last_live_refresh_at so it is retried first.
    """
    batch_size = _clamp(batch_size, BATCH_SIZE_RANGE, Config.LIVE_REFRESH_BATCH_SIZE)
    sources_per_peptide = _clamp(
        sources_per_peptide, SOURCES_PER_PEPTIDE_RANGE, Config.LIVE_REFRESH_SOURCES_PER_PEPTIDE
    )
    sources = list(sources) if sources is not None else default_sources()
    if harvest_deadline is None:
        harvest_deadline = Config.HARVEST_DEADLINE_SECONDS

    # Plain values; ORM rows expire on every commit
    targets = [(p.id, p.slug, p.canonical_name.strip()) for p in load_peptides_for_refresh(store, batch_size)]
    logger.info("Live refresh: %d peptides selected (batch size %d)", len(targets), batch_size)

    result = RefreshResult()
    citations = CitationResolver(store, backfill_titles=True)

    with ThreadPoolExecutor(max_workers=max(1, len(sources))) as executor:
        for peptide_id, slug, name in targets:
            result.peptides_scanned += 1
            try:
                candidates = harvest_candidates(executor, sources, name, sources_per_peptide, harvest_deadline)
                if candidates:
                    result.claims_upserted += replace_live_claims(store, peptide_id, candidates, citations)
                else:
                    result.peptides_with_no_hits += 1
                store.update(Peptide, {"last_live_refresh_at": now()}, id=peptide_id)
            except Exception as e:
                result.failures += 1
                result.failed.append(RefreshFailure(peptide_id=peptide_id, slug=slug, error=str(e)))
                logger.warning("Live refresh failed for %s: %s", slug, e)

    logger.info(
        "Live refresh complete: %d scanned, %d claims, %d without hits, %d failures",
        result.peptides_scanned, result.claims_upserted, result.peptides_with_no_hits, result.failures,
    )
    return result
