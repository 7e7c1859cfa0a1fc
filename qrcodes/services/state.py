"""
Lifecycle of an advertiser QR code.

A code starts ``active`` and can only leave that state: it becomes ``expired``
once its expiry date has passed and ``inactive`` once it has used up its
maximum number of scans. The same check runs lazily on every scan and from the
periodic sweep in :mod:`qrcodes.tasks`, so applying it twice is harmless.
"""
import logging
from django.utils import timezone

from ..models import QRCode, QRCodeStatus


logger = logging.getLogger(__name__)


def evaluate_status(qr_code: QRCode, now=None) -> str:
    """Return the status ``qr_code`` should have at ``now``."""
    if qr_code.status != QRCodeStatus.ACTIVE:
        return qr_code.status

    now = now or timezone.now()
    if qr_code.expires_at is not None and qr_code.expires_at < now:
        return QRCodeStatus.EXPIRED
    if qr_code.max_scans and qr_code.scans_count >= qr_code.max_scans:
        return QRCodeStatus.INACTIVE
    return QRCodeStatus.ACTIVE


def apply_status(qr_code: QRCode, now=None) -> str:
    """
    Persist the evaluated status when it differs from the stored one.

    Only rows that are still active are updated, so a terminal status is never
    overwritten.
    """
    new_status = evaluate_status(qr_code, now)
    if new_status == qr_code.status:
        return new_status

    QRCode.objects.filter(pk=qr_code.pk, status=QRCodeStatus.ACTIVE).update(
        status=new_status, updated_at=timezone.now())
    logger.info(f"QR code {qr_code.qr_code} moved from {qr_code.status} to {new_status}")
    qr_code.status = new_status
    return new_status
