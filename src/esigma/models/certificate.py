"""
Certificate Pydantic models
"""

from typing import Optional, Union
from datetime import datetime

from esigma.models.base import CamelModel
from esigma.models.enums import CertificateStatus


class CertificateHolder(CamelModel):
    """Snapshot of the certified user"""
    id: str
    name: str
    email: str
    jurisdiction: Optional[str] = None


class CertificateSurvey(CamelModel):
    """Snapshot of the certified survey"""
    id: str
    title: str


class Certificate(CamelModel):
    id: str
    user_id: str
    user: Optional[CertificateHolder] = None
    survey_id: str
    survey: Optional[CertificateSurvey] = None
    result_id: Optional[str] = None
    certificate_number: str
    issued_at: datetime
    valid_until: Optional[datetime] = None
    download_count: int = 0
    status: Union[CertificateStatus, str] = CertificateStatus.ACTIVE


class CertificateFile(CamelModel):
    filename: str
    content_type: str = "application/pdf"
    content: bytes
