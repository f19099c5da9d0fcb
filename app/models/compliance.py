"""
Persistence for compliance check outcomes.

Only the outcome of a check is stored (agency, jurisdictions, score,
error messages). Documentation content is PHI and never written here.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Index, Integer, String, Uuid

from app.models.database import Base


# ---------------------------------------------------------------------------
# Compliance Check – one row per validated documentation record
# ---------------------------------------------------------------------------
class ComplianceCheck(Base):
    __tablename__ = "compliance_checks"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    agency_id = Column(String(128), nullable=False, comment="Agency that submitted the record")
    jurisdictions = Column(JSON, nullable=False, default=list, comment="Requested jurisdiction codes")
    documentation_type = Column(String(128), nullable=True)
    is_valid = Column(Boolean, nullable=False)
    compliance_score = Column(Integer, nullable=False)
    errors = Column(JSON, nullable=False, default=list, comment="Validation error messages")
    checked_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    __table_args__ = (Index("ix_compliance_checks_agency_checked", "agency_id", "checked_at"),)
