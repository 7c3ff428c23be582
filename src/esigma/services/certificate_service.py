"""
Certificate service - issued certificates, downloads and revocation
"""

import logging

from esigma.database.mappers import (
    CERTIFICATE_MAPPER,
    CERTIFICATE_SURVEY_EMBED,
    CERTIFICATE_USER_EMBED,
)
from esigma.database.query import OrderBy
from esigma.models.certificate import CertificateFile
from esigma.models.enums import CertificateStatus
from esigma.services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)


class CertificateService(BaseService):
    """Service for certificate operations"""

    async def get_certificates(self) -> ServiceResult:
        """
        List certificates, most recently issued first

        Returns:
            ServiceResult with list of Certificate, each carrying holder and
            survey snapshots
        """
        if self.demo_mode:
            return self.demo_list("certificates")

        try:
            rows = await self.db.select(
                "certificates",
                order_by=[OrderBy("issued_at", descending=True)],
                embeds=[CERTIFICATE_USER_EMBED, CERTIFICATE_SURVEY_EMBED]
            )
            certificates = [CERTIFICATE_MAPPER.to_model(row) for row in rows]
            return ServiceResult.ok("Certificates fetched successfully", certificates)

        except Exception as e:
            return self.failure("get_certificates", e, "Failed to fetch certificates", data=[])

    async def download_certificate(self, certificate_id: str) -> ServiceResult:
        """
        Produce a downloadable certificate file

        The content is a placeholder, not a rendered document. Works without
        a database.
        """
        logger.info(f"Generating placeholder download for certificate {certificate_id}")
        certificate_file = CertificateFile(
            filename=f"certificate-{certificate_id}.pdf",
            content=f"Certificate {certificate_id}".encode("utf-8")
        )
        return ServiceResult.ok("Certificate downloaded successfully", certificate_file)

    async def revoke_certificate(self, certificate_id: str) -> ServiceResult:
        """Mark a certificate revoked"""
        if self.demo_mode:
            return self.not_configured()

        try:
            logger.info(f"Revoking certificate {certificate_id}")
            await self.db.update(
                "certificates",
                CERTIFICATE_MAPPER.to_row({"status": CertificateStatus.REVOKED.value}),
                filters={"id": certificate_id}
            )
            return ServiceResult.ok("Certificate revoked successfully")

        except Exception as e:
            return self.failure("revoke_certificate", e, "Failed to revoke certificate")
