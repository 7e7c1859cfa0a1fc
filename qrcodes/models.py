from decimal import Decimal, ROUND_HALF_UP
from django.db import models
from django.conf import settings
from django.utils import timezone
from campaigns.models import AdCampaign


class QRCodeStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    PAUSED = "paused", "Paused"
    EXPIRED = "expired", "Expired"
    INACTIVE = "inactive", "Inactive"


class EngagementStatus(models.TextChoices):
    SCANNED = "scanned", "Scanned"
    REDEEMED = "redeemed", "Redeemed"
    DUPLICATE = "duplicate", "Duplicate"
    FAILED = "failed", "Failed"
    EXPIRED = "expired", "Expired"


# An engagement in one of these states means the device already holds the offer.
CLAIMED_STATUSES = (EngagementStatus.SCANNED, EngagementStatus.REDEEMED)


def compute_conversion_rate(redemptions, scans):
    """Percentage of scans that led to a redemption, rounded to 2 decimals."""
    if not scans:
        return 0
    rate = Decimal(redemptions) * 100 / Decimal(scans)
    return float(rate.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class QRCode(models.Model):
    campaign = models.ForeignKey(AdCampaign, on_delete=models.CASCADE, related_name='qr_codes')
    qr_code = models.CharField(max_length=64, unique=True)
    qr_image_url = models.URLField(max_length=500, blank=True, null=True)
    qr_image_data = models.TextField(blank=True, null=True)
    promo_title = models.CharField(max_length=255)
    promo_description = models.TextField(blank=True, null=True)
    promo_link = models.CharField(max_length=500)
    promo_terms = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=10, choices=QRCodeStatus.choices, default=QRCodeStatus.ACTIVE)
    expires_at = models.DateTimeField(blank=True, null=True)
    max_scans = models.PositiveIntegerField(blank=True, null=True)
    scans_count = models.PositiveIntegerField(default=0)
    unique_scans_count = models.PositiveIntegerField(default=0)
    redemptions_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'QR code'
        indexes = [
            models.Index(fields=['campaign'], name='qrcode_campaign_idx'),
            models.Index(fields=['status'], name='qrcode_status_idx'),
            models.Index(fields=['created_at'], name='qrcode_created_idx'),
        ]

    def __str__(self):
        return self.qr_code

    @property
    def conversion_rate(self):
        return compute_conversion_rate(self.redemptions_count, self.scans_count)

    @property
    def is_expired(self):
        return self.expires_at is not None and self.expires_at < timezone.now()


class Engagement(models.Model):
    qr_code = models.ForeignKey(QRCode, on_delete=models.CASCADE, related_name='engagements')
    device_id = models.CharField(max_length=255)
    scanned_at = models.DateTimeField(default=timezone.now)
    status = models.CharField(max_length=10, choices=EngagementStatus.choices, default=EngagementStatus.SCANNED)
    redemption_code = models.CharField(max_length=12, unique=True, blank=True, null=True)
    redeemed_at = models.DateTimeField(blank=True, null=True)
    reason = models.TextField(blank=True, null=True)
    ip_address = models.GenericIPAddressField(blank=True, null=True)
    user_agent = models.TextField(blank=True, null=True)
    magazine_barcode = models.CharField(max_length=100, blank=True, null=True)
    driver = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, blank=True, null=True, related_name='qr_engagements')
    city = models.CharField(max_length=100, blank=True, null=True)
    region = models.CharField(max_length=100, blank=True, null=True)
    country = models.CharField(max_length=100, blank=True, null=True)
    latitude = models.FloatField(blank=True, null=True)
    longitude = models.FloatField(blank=True, null=True)
    metadata = models.JSONField(blank=True, null=True)

    class Meta:
        ordering = ['-scanned_at']
        indexes = [
            models.Index(fields=['qr_code', 'device_id'], name='engagement_qr_device_idx'),
            models.Index(fields=['device_id'], name='engagement_device_idx'),
            models.Index(fields=['scanned_at'], name='engagement_scanned_idx'),
            models.Index(fields=['status'], name='engagement_status_idx'),
        ]

    def __str__(self):
        return f"{self.device_id} - {self.status}"

    def save(self, *args, **kwargs):
        if self.status == EngagementStatus.REDEEMED and not self.redeemed_at:
            self.redeemed_at = timezone.now()
        super().save(*args, **kwargs)
