#!/usr/bin/env python3
"""
Peptide Knowledge Base CLI
Batch job entry points for schema setup, seed ingestion and live evidence refresh
"""

import argparse
import json
import logging
import sys

from config import Config, ConfigurationError
from database import StoreError, open_store
from live_refresh import refresh_live_evidence
from seed_ingest import IngestionError, ensure_jurisdictions, ingest_seed_catalog

logger = logging.getLogger("cli")


def cmd_init_db(store, args):
    """Create tables and the fixed jurisdictions"""
    lookup = ensure_jurisdictions(store)
    return {"jurisdictions": sorted(code.value for code in lookup)}


def cmd_ingest_seed(store, args):
    """Ingest the full seed catalog"""
    return ingest_seed_catalog(store).to_dict()


def cmd_refresh_live(store, args):
    """Refresh live evidence for one batch of peptides"""
    return refresh_live_evidence(
        store,
        batch_size=args.batch_size,
        sources_per_peptide=args.sources_per_peptide,
    ).to_dict()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Peptide knowledge base sync jobs")
    parser.add_argument("--database-url", help="Override DATABASE_URL")
    parser.add_argument("--log-level", default=Config.LOG_LEVEL, help="Logging level (default: %(default)s)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create tables and jurisdictions").set_defaults(func=cmd_init_db)
    sub.add_parser("ingest-seed", help="Ingest the curated seed catalog").set_defaults(func=cmd_ingest_seed)

    refresh = sub.add_parser("refresh-live", help="Harvest PubMed and ClinicalTrials.gov evidence")
    refresh.add_argument("--batch-size", type=int, default=None,
                         help=f"Peptides per run, 1-50 (default: {Config.LIVE_REFRESH_BATCH_SIZE})")
    refresh.add_argument("--sources-per-peptide", type=int, default=None,
                         help=f"Results per source, 1-3 (default: {Config.LIVE_REFRESH_SOURCES_PER_PEPTIDE})")
    refresh.set_defaults(func=cmd_refresh_live)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        db_url = Config.require_database_url(args.database_url)
        store = open_store(db_url)
    except (ConfigurationError, StoreError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        summary = args.func(store, args)
    except (IngestionError, StoreError) as e:
        logger.error("%s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        store.close()

    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
