"""
Citation resolution shared by seed ingestion and live refresh
"""

import logging
from datetime import date
from typing import Dict, Optional

from database import KnowledgeBaseStore
from models import Citation

logger = logging.getLogger(__name__)


def citation_key(source_url: str, published_at: str) -> str:
    """Dedup key for a citation: 'url|YYYY-MM-DD'"""
    return f"{source_url}|{published_at}"


class CitationResolver:
    """Find-or-create citations by (source_url, published_at).

    The cache lives on the instance, so one resolver belongs to exactly one
    ingestion or refresh invocation and nothing survives across runs.
    """

    def __init__(self, store: KnowledgeBaseStore, backfill_titles: bool = False):
        self.store = store
        self.backfill_titles = backfill_titles
        self.cache: Dict[str, int] = {}
        self.created = 0

    def resolve(self, source_url: str, published_at: str, source_title: Optional[str] = None) -> int:
        """Return the citation id for the pair, inserting a row only if none exists"""
        key = citation_key(source_url, published_at)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        published = date.fromisoformat(published_at)
        existing = self.store.select(
            Citation,
            order_by=[Citation.id.desc()],
            limit=1,
            source_url=source_url,
            published_at=published,
        )
        if existing:
            citation = existing[0]
            citation_id = citation.id
            if self.backfill_titles and source_title and not citation.source_title:
                self.store.update(Citation, {"source_title": source_title}, id=citation_id)
                logger.debug("Backfilled title for citation %s", citation_id)
        else:
            citation = self.store.insert(Citation, {
                "source_url": source_url,
                "source_title": source_title,
                "published_at": published,
            })
            citation_id = citation.id
            self.created += 1

        self.cache[key] = citation_id
        return citation_id
