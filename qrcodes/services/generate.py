import logging
from django.conf import settings
from django.db import transaction

from campaigns.models import AdCampaign
from ..exceptions import MissingFieldsError, CampaignNotFound
from ..models import QRCode, QRCodeStatus
from ..storage import StorageFactory
from ..utils.helper import generate_qr_code_id, parse_campaign_id
from ..utils.qr_image import render_qr_png, png_data_uri


logger = logging.getLogger(__name__)


def _new_qr_code_id():
    qr_code_id = generate_qr_code_id()
    while QRCode.objects.filter(qr_code=qr_code_id).exists():
        qr_code_id = generate_qr_code_id()
    return qr_code_id


def generate_campaign_qr(campaign_id, promo_title, promo_link, promo_description=None,
                         promo_terms=None, expires_at=None, max_scans=None, storage=None,
                         campaign=None):
    """
    Create the promotional QR code of a campaign.

    The PNG encodes exactly the generated QR code id, which is the value the
    scan endpoint looks up. ``storage`` defaults to the backend configured in
    ``QR_IMAGE_STORAGE``.
    """
    if not campaign_id or not promo_title or not promo_link:
        raise MissingFieldsError("Missing required fields: campaignId, promoTitle, promoLink")

    if campaign is None:
        campaign_pk = parse_campaign_id(campaign_id)
        if campaign_pk is not None:
            campaign = AdCampaign.objects.filter(pk=campaign_pk).first()
    if campaign is None:
        raise CampaignNotFound("Campaign not found")

    storage = storage or StorageFactory.get_storage()

    qr_code_id = _new_qr_code_id()
    png_bytes = render_qr_png(qr_code_id)

    qr_image_url = storage.upload(
        png_bytes,
        f"qr-{qr_code_id}.png",
        getattr(settings, 'QR_IMAGE_FOLDER', 'advertiser-qr-codes'),
    )
    logger.info(f"Advertiser QR code uploaded: {qr_image_url}")

    qr_image_data = png_data_uri(png_bytes)

    with transaction.atomic():
        qr_code = QRCode.objects.create(
            campaign=campaign,
            qr_code=qr_code_id,
            qr_image_url=qr_image_url,
            qr_image_data=qr_image_data,
            promo_title=promo_title,
            promo_description=promo_description,
            promo_link=promo_link,
            promo_terms=promo_terms,
            expires_at=expires_at,
            max_scans=max_scans,
            status=QRCodeStatus.ACTIVE,
        )
        campaign.qr_code = qr_code
        campaign.save(update_fields=['qr_code', 'updated_at'])

    return {
        "success": True,
        "message": "QR code generated successfully",
        "qrCode": {
            "id": qr_code.id,
            "qrCodeId": qr_code_id,
            "qrImageUrl": qr_code.qr_image_url,
            "qrImageData": qr_image_data,
            "promoTitle": promo_title,
            "promoLink": promo_link,
            "status": qr_code.status,
        },
    }
