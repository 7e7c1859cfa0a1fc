from django.conf import settings
from django.db.models import Count

from ..models import QRCode
from ..utils.helper import truncate_device_id


def get_qr_analytics(campaign_id):
    """
    Aggregate the stored counters of the campaign's QR code.

    Read only: counters are reported as stored on the QR code, engagements are
    only used for the status breakdown and the recent scans list.
    """
    qr_code = QRCode.objects.filter(campaign_id=campaign_id).order_by('-created_at').first()

    if qr_code is None:
        return {
            "success": True,
            "analytics": {
                "totalScans": 0,
                "uniqueDevices": 0,
                "redemptions": 0,
                "conversionRate": 0,
                "status": "no_qr_code",
            },
        }

    status_breakdown = {
        row['status']: row['total']
        for row in qr_code.engagements.order_by().values('status').annotate(total=Count('id'))
    }

    limit = getattr(settings, 'QR_RECENT_SCANS_LIMIT', 10)
    recent_scans = [
        {
            "deviceId": truncate_device_id(engagement.device_id),
            "scannedAt": engagement.scanned_at,
            "status": engagement.status,
            "location": engagement.city or "Unknown",
        }
        for engagement in qr_code.engagements.order_by('-scanned_at', '-id')[:limit]
    ]

    return {
        "success": True,
        "analytics": {
            "totalScans": qr_code.scans_count,
            "uniqueDevices": qr_code.unique_scans_count,
            "redemptions": qr_code.redemptions_count,
            "conversionRate": qr_code.conversion_rate,
            "status": qr_code.status,
            "qrCode": qr_code.qr_code,
            "createdAt": qr_code.created_at,
            "expiresAt": qr_code.expires_at,
            "maxScans": qr_code.max_scans,
            "statusBreakdown": status_breakdown,
            "recentScans": recent_scans,
        },
    }
