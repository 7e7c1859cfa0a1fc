from celery import shared_task
from django.utils import timezone
import logging

from .models import QRCode, QRCodeStatus
from .services.state import apply_status


logger = logging.getLogger(__name__)


@shared_task
def expire_qr_codes():
    """
    Move active QR codes past their expiry date or scan limit to their
    terminal status. Returns how many codes changed.
    """
    now = timezone.now()
    changed = 0
    for qr_code in QRCode.objects.filter(status=QRCodeStatus.ACTIVE):
        if apply_status(qr_code, now) != QRCodeStatus.ACTIVE:
            changed += 1
    logger.info(f"QR sweep finished, {changed} code(s) deactivated")
    return changed
