"""
Peptide Knowledge Base Database Models
SQLAlchemy ORM models for peptide records, regulatory status and evidence claims
"""

from datetime import datetime
from sqlalchemy import (
    create_engine, Column, Integer, String, Text, Date,
    DateTime, Boolean, ForeignKey, Enum, UniqueConstraint, Index
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker
import enum

Base = declarative_base()


class JurisdictionCode(enum.Enum):
    """Jurisdictions the knowledge base tracks"""
    US = "US"
    EU = "EU"
    UK = "UK"
    CA = "CA"
    AU = "AU"


class RegulatoryStatusValue(enum.Enum):
    """Regulatory standing of a peptide in one jurisdiction"""
    US_FDA_APPROVED = "US_FDA_APPROVED"
    NON_US_APPROVED = "NON_US_APPROVED"
    INVESTIGATIONAL = "INVESTIGATIONAL"
    RESEARCH_ONLY = "RESEARCH_ONLY"


class EvidenceGrade(enum.Enum):
    """Strength of evidence behind a claim or use case"""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    I = "I"  # insufficient


class DosingContext(enum.Enum):
    """Where a dosing entry comes from"""
    APPROVED_LABEL = "APPROVED_LABEL"
    STUDY_REPORTED = "STUDY_REPORTED"
    EXPERT_CONSENSUS = "EXPERT_CONSENSUS"


class Jurisdiction(Base):
    """Fixed set of regulatory jurisdictions"""
    __tablename__ = 'jurisdictions'

    id = Column(Integer, primary_key=True)
    code = Column(String(8), nullable=False, unique=True)
    name = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Jurisdiction(code='{self.code}')>"


class Peptide(Base):
    """Root peptide record"""
    __tablename__ = 'peptides'

    id = Column(Integer, primary_key=True)
    slug = Column(String(200), nullable=False, unique=True)
    canonical_name = Column(String(200), nullable=False)
    sequence = Column(Text)
    peptide_class = Column(String(200))
    is_published = Column(Boolean, nullable=False, default=False)

    # Live evidence refresh bookkeeping; NULL means never refreshed
    last_live_refresh_at = Column(DateTime(timezone=True))

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    profile = relationship("PeptideProfile", back_populates="peptide", uselist=False,
                           cascade="all, delete-orphan")
    aliases = relationship("PeptideAlias", back_populates="peptide", cascade="all, delete-orphan")
    claims = relationship("PeptideClaim", back_populates="peptide", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Peptide(slug='{self.slug}', canonical_name='{self.canonical_name}')>"


class PeptideProfile(Base):
    """Narrative content, one row per peptide"""
    __tablename__ = 'peptide_profiles'

    peptide_id = Column(Integer, ForeignKey('peptides.id', ondelete='CASCADE'), primary_key=True)
    intro = Column(Text)
    mechanism = Column(Text)
    effectiveness_summary = Column(Text)
    long_description = Column(Text)

    peptide = relationship("Peptide", back_populates="profile")


class PeptideAlias(Base):
    """Alternative names (brand names, codes); additive only"""
    __tablename__ = 'peptide_aliases'
    __table_args__ = (UniqueConstraint('peptide_id', 'alias'),)

    id = Column(Integer, primary_key=True)
    peptide_id = Column(Integer, ForeignKey('peptides.id', ondelete='CASCADE'), nullable=False)
    alias = Column(String(200), nullable=False)

    peptide = relationship("Peptide", back_populates="aliases")


class RegulatoryStatus(Base):
    """Status of a peptide in one jurisdiction"""
    __tablename__ = 'peptide_regulatory_status'
    __table_args__ = (UniqueConstraint('peptide_id', 'jurisdiction_id', 'status'),)

    id = Column(Integer, primary_key=True)
    peptide_id = Column(Integer, ForeignKey('peptides.id', ondelete='CASCADE'), nullable=False)
    jurisdiction_id = Column(Integer, ForeignKey('jurisdictions.id'), nullable=False)
    status = Column(Enum(RegulatoryStatusValue), nullable=False)
    notes = Column(Text)


class UseCase(Base):
    """Therapeutic use case shared across peptides"""
    __tablename__ = 'use_cases'

    id = Column(Integer, primary_key=True)
    slug = Column(String(200), nullable=False, unique=True)
    name = Column(String(200), nullable=False)


class PeptideUseCase(Base):
    """Jurisdiction-scoped link between a peptide and a use case"""
    __tablename__ = 'peptide_use_cases'
    __table_args__ = (UniqueConstraint('peptide_id', 'use_case_id', 'jurisdiction_id'),)

    id = Column(Integer, primary_key=True)
    peptide_id = Column(Integer, ForeignKey('peptides.id', ondelete='CASCADE'), nullable=False)
    use_case_id = Column(Integer, ForeignKey('use_cases.id'), nullable=False)
    jurisdiction_id = Column(Integer, ForeignKey('jurisdictions.id'))
    evidence_grade = Column(Enum(EvidenceGrade), nullable=False, default=EvidenceGrade.I)
    consumer_summary = Column(Text)
    clinical_summary = Column(Text)


class DosingEntry(Base):
    """Dosing guidance; natural key is (peptide, jurisdiction, context, population)"""
    __tablename__ = 'peptide_dosing_entries'

    id = Column(Integer, primary_key=True)
    peptide_id = Column(Integer, ForeignKey('peptides.id', ondelete='CASCADE'), nullable=False)
    jurisdiction_id = Column(Integer, ForeignKey('jurisdictions.id'))
    context = Column(Enum(DosingContext), nullable=False)
    population = Column(Text)
    route = Column(Text)
    starting_dose = Column(Text)
    maintenance_dose = Column(Text)
    frequency = Column(Text)
    notes = Column(Text)


class SafetyEntry(Base):
    """Safety profile per peptide and jurisdiction"""
    __tablename__ = 'peptide_safety_entries'
    __table_args__ = (UniqueConstraint('peptide_id', 'jurisdiction_id'),)

    id = Column(Integer, primary_key=True)
    peptide_id = Column(Integer, ForeignKey('peptides.id', ondelete='CASCADE'), nullable=False)
    jurisdiction_id = Column(Integer, ForeignKey('jurisdictions.id'))
    adverse_effects = Column(Text)
    contraindications = Column(Text)
    interactions = Column(Text)
    monitoring = Column(Text)


class Citation(Base):
    """External source backing one or more claims"""
    __tablename__ = 'citations'
    __table_args__ = (Index('ix_citations_source_url_published_at', 'source_url', 'published_at'),)

    id = Column(Integer, primary_key=True)
    source_url = Column(String(1000), nullable=False)
    source_title = Column(String(500))
    published_at = Column(Date, nullable=False)
    retrieved_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f"<Citation(source_url='{self.source_url}', published_at={self.published_at})>"


class PeptideClaim(Base):
    """Evidence claim about a peptide, grouped by section"""
    __tablename__ = 'peptide_claims'
    __table_args__ = (UniqueConstraint('peptide_id', 'section', 'claim_text'),)

    id = Column(Integer, primary_key=True)
    peptide_id = Column(Integer, ForeignKey('peptides.id', ondelete='CASCADE'), nullable=False)
    section = Column(String(200), nullable=False)
    claim_text = Column(Text, nullable=False)
    evidence_grade = Column(Enum(EvidenceGrade))
    citation_id = Column(Integer, ForeignKey('citations.id', ondelete='CASCADE'), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    peptide = relationship("Peptide", back_populates="claims")
    citation = relationship("Citation")

    def __repr__(self):
        return f"<PeptideClaim(section='{self.section}', text='{self.claim_text[:50]}...')>"


# Database initialization functions
def create_database(db_url="sqlite:///peptide_kb.db", echo=False):
    """Create all tables in the database"""
    engine = create_engine(db_url, echo=echo)
    Base.metadata.create_all(engine)
    return engine


def get_session(db_url="sqlite:///peptide_kb.db"):
    """Get a database session"""
    engine = create_engine(db_url, echo=False)
    Session = sessionmaker(bind=engine)
    return Session()


if __name__ == "__main__":
    # Create tables if running this file directly
    print("Creating database tables...")
    engine = create_database(echo=True)
    print("Database tables created successfully!")
