"""
Public scan of an advertiser QR code.

Checks run in a fixed order: request shape, lookup, current status, expiry,
duplicate device, scan limit. The first failing check decides the answer. A
scan that passes every check is redeemed on the spot and receives a
redemption code.
"""
import logging
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.validators import validate_ipv46_address
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from ..exceptions import (
    InvalidScanRequest, QRCodeNotFound, QRCodeNotActive, QRCodeExpired,
    QRCodeLimitReached, DuplicateScan,
)
from ..models import QRCode, QRCodeStatus, Engagement, EngagementStatus, CLAIMED_STATUSES
from ..utils.helper import generate_redemption_code
from .state import evaluate_status, apply_status


logger = logging.getLogger(__name__)
User = get_user_model()


def _resolve_driver(driver_id):
    if not driver_id:
        return None
    try:
        return User.objects.filter(pk=driver_id, role=User.Role.DRIVER).first()
    except (ValidationError, ValueError):
        logger.warning(f"Ignoring malformed driver id on scan: {driver_id}")
        return None


def _clean_ip_address(ip_address):
    if not ip_address:
        return None
    try:
        validate_ipv46_address(ip_address)
    except ValidationError:
        return None
    return ip_address


def _record_engagement(qr_code, device_id, status, context, **fields):
    return Engagement.objects.create(
        qr_code=qr_code,
        device_id=device_id,
        status=status,
        **context,
        **fields,
    )


def _check_eligibility(qr_code, device_id, context, now):
    """
    Return the error the scan must be rejected with, or None when the device
    may claim the offer. Rejections that leave a trace are written here.
    """
    if qr_code.status != QRCodeStatus.ACTIVE:
        _record_engagement(
            qr_code, device_id, EngagementStatus.FAILED, context,
            reason=f"QR code is {qr_code.status}",
        )
        return QRCodeNotActive(
            f"This campaign is no longer active ({qr_code.status})",
            status=qr_code.status,
        )

    new_status = evaluate_status(qr_code, now)
    if new_status == QRCodeStatus.EXPIRED:
        apply_status(qr_code, now)
        return QRCodeExpired("This offer has expired", status=QRCodeStatus.EXPIRED)

    # A device that already holds the offer is told so even when the scan
    # limit has been reached since.
    already_claimed = Engagement.objects.filter(
        qr_code=qr_code, device_id=device_id, status__in=CLAIMED_STATUSES,
    ).exists()
    if already_claimed:
        _record_engagement(
            qr_code, device_id, EngagementStatus.DUPLICATE, context,
            reason="Device has already scanned this QR code",
        )
        logger.info(f"Duplicate scan detected for {qr_code.qr_code} from device {device_id}")
        return DuplicateScan(
            "You've already claimed this offer",
            success=False,
            status=EngagementStatus.DUPLICATE,
            reason="This device has already scanned this QR code",
        )

    if new_status == QRCodeStatus.INACTIVE:
        apply_status(qr_code, now)
        return QRCodeLimitReached(
            "This offer has reached its maximum redemption limit",
            status=QRCodeStatus.INACTIVE,
        )

    return None


def _unique_redemption_code():
    code = generate_redemption_code()
    while Engagement.objects.filter(redemption_code=code).exists():
        code = generate_redemption_code()
    return code


def _redeem(qr_code, device_id, context, magazine_barcode, driver, now):
    is_unique_device = not Engagement.objects.filter(
        qr_code=qr_code, device_id=device_id).exists()

    engagement = _record_engagement(
        qr_code, device_id, EngagementStatus.REDEEMED, context,
        redeemed_at=now,
        redemption_code=_unique_redemption_code(),
        magazine_barcode=magazine_barcode or None,
        driver=driver,
    )

    QRCode.objects.filter(pk=qr_code.pk).update(
        scans_count=F('scans_count') + 1,
        redemptions_count=F('redemptions_count') + 1,
        unique_scans_count=F('unique_scans_count') + (1 if is_unique_device else 0),
        updated_at=timezone.now(),
    )
    qr_code.refresh_from_db(fields=['scans_count', 'unique_scans_count', 'redemptions_count', 'updated_at'])
    return engagement


def scan_qr_code(qr_code, device_id, ip_address=None, user_agent=None, magazine_barcode=None,
                 driver_id=None, location=None, metadata=None, now=None):
    """
    Validate a scan and, when eligible, redeem the offer for ``device_id``.

    Raises a :class:`~qrcodes.exceptions.QRCodeError` subclass when the scan is
    rejected. The QR code row is locked for the duration of the checks so two
    scans of the same code are processed one after the other.
    """
    if not qr_code or not isinstance(qr_code, str) or not qr_code.strip():
        raise InvalidScanRequest("Invalid QR code - must be a non-empty string")
    if not device_id or not isinstance(device_id, str):
        raise InvalidScanRequest("Device ID is required")

    now = now or timezone.now()
    code = qr_code.strip()
    location = location or {}
    context = {
        'ip_address': _clean_ip_address(ip_address),
        'user_agent': user_agent or None,
        'city': location.get('city'),
        'region': location.get('region'),
        'country': location.get('country'),
        'latitude': location.get('latitude'),
        'longitude': location.get('longitude'),
        'metadata': metadata or None,
        'scanned_at': now,
    }

    logger.info(f"QR scan request for {code} from device {device_id}")

    with transaction.atomic():
        record = QRCode.objects.select_for_update().filter(qr_code=code).first()
        if record is None:
            raise QRCodeNotFound("QR code not found - invalid or expired")

        error = _check_eligibility(record, device_id, context, now)
        if error is None:
            engagement = _redeem(
                record, device_id, context, magazine_barcode, _resolve_driver(driver_id), now)

    # Raised outside the atomic block so the rejection trace is committed.
    if error is not None:
        logger.info(f"QR scan rejected for {code}: {error.error}")
        raise error

    logger.info(f"QR scan successful for {code}, redemption code {engagement.redemption_code}")

    return {
        "success": True,
        "message": "Offer claimed successfully!",
        "offer": {
            "title": record.promo_title,
            "description": record.promo_description,
            "redemptionCode": engagement.redemption_code,
            "promoLink": record.promo_link,
            "terms": record.promo_terms,
            "expiresAt": record.expires_at,
        },
        "engagement": {
            "id": engagement.id,
            "scannedAt": engagement.scanned_at,
            "status": engagement.status,
        },
    }
