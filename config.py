"""
Configuration for the Peptide Knowledge Base sync jobs
"""

import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing; fatal before any work starts."""


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")


class Config:
    """Application configuration"""

    # Database configuration - use DATABASE_URL from environment if available
    DATABASE_URL = os.getenv("DATABASE_URL")

    # If no DATABASE_URL is set, fall back to SQLite for local development
    if not DATABASE_URL:
        DATABASE_URL = "sqlite:///peptide_kb.db"

    # External evidence sources
    NCBI_API_KEY = os.getenv("NCBI_API_KEY", "").strip()
    PUBMED_ESEARCH_URL = os.getenv(
        "PUBMED_ESEARCH_URL", "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/esearch.fcgi"
    )
    PUBMED_ESUMMARY_URL = os.getenv(
        "PUBMED_ESUMMARY_URL", "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/esummary.fcgi"
    )
    CLINICALTRIALS_STUDIES_URL = os.getenv(
        "CLINICALTRIALS_STUDIES_URL", "https://clinicaltrials.gov/api/v2/studies"
    )
    HTTP_TIMEOUT_SECONDS = _float_env("HTTP_TIMEOUT_SECONDS", 15.0)
    # Wall-clock cap on one peptide's harvest; PubMed makes two sequential calls
    HARVEST_DEADLINE_SECONDS = _float_env("HARVEST_DEADLINE_SECONDS", 2 * HTTP_TIMEOUT_SECONDS)

    # Live refresh defaults (clamped again at call time)
    LIVE_REFRESH_BATCH_SIZE = _int_env("LIVE_REFRESH_BATCH_SIZE", 12)
    LIVE_REFRESH_SOURCES_PER_PEPTIDE = _int_env("LIVE_REFRESH_SOURCES_PER_PEPTIDE", 2)

    # Admin gate
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")
    ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    # Application settings
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def require_database_url(cls, url: Optional[str] = None) -> str:
        """Return the database URL (an explicit override wins) or fail before any store access."""
        url = (url or cls.DATABASE_URL or "").strip()
        if not url:
            raise ConfigurationError("DATABASE_URL is not configured.")
        # Render/Heroku style URLs use the legacy scheme SQLAlchemy no longer accepts
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        return url

    @classmethod
    def has_admin_config(cls) -> bool:
        return bool(cls.ADMIN_PASSWORD or cls.ADMIN_PASSWORD_HASH)

    @classmethod
    def print_config(cls):
        """Print current configuration (hiding sensitive data)"""
        print("\n" + "="*60)
        print("PEPTIDE KNOWLEDGE BASE CONFIGURATION")
        print("="*60)
        print(f"Database: {cls.DATABASE_URL.split('@')[-1]}")
        print(f"PubMed search: {cls.PUBMED_ESEARCH_URL}")
        print(f"PubMed summary: {cls.PUBMED_ESUMMARY_URL}")
        print(f"ClinicalTrials: {cls.CLINICALTRIALS_STUDIES_URL}")
        print(f"NCBI API key: {'Configured' if cls.NCBI_API_KEY else 'Not configured'}")
        print(f"HTTP timeout: {cls.HTTP_TIMEOUT_SECONDS}s per call, "
              f"{cls.HARVEST_DEADLINE_SECONDS}s per peptide harvest")
        print(f"Live refresh batch: {cls.LIVE_REFRESH_BATCH_SIZE} peptides, "
              f"{cls.LIVE_REFRESH_SOURCES_PER_PEPTIDE} sources each")
        print(f"Admin user: {cls.ADMIN_USERNAME}")
        print(f"Admin password: {'*' * 8 if cls.has_admin_config() else 'Not set'}")
        print(f"Log level: {cls.LOG_LEVEL}")
        print("="*60 + "\n")


if __name__ == "__main__":
    Config.print_config()
