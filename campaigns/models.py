from django.db import models
from django.conf import settings


class AdCampaign(models.Model):

    class CampaignType(models.TextChoices):
        MAGAZINE = "magazine", "Magazine"
        DIGITAL = "digital", "Digital"
        QR_ENGAGEMENT = "qr_engagement", "QR Engagement"

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        PENDING_REVIEW = "pending_review", "Pending Review"
        APPROVED = "approved", "Approved"
        ACTIVE = "active", "Active"
        PAUSED = "paused", "Paused"
        COMPLETED = "completed", "Completed"
        CANCELLED = "cancelled", "Cancelled"
        REJECTED = "rejected", "Rejected"

    advertiser = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='campaigns')
    campaign_name = models.CharField(max_length=255)
    campaign_description = models.TextField(blank=True, null=True)
    campaign_type = models.CharField(
        max_length=20, choices=CampaignType.choices, default=CampaignType.MAGAZINE)
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.DRAFT)
    budget = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    start_date = models.DateTimeField(blank=True, null=True)
    end_date = models.DateTimeField(blank=True, null=True)
    qr_code = models.OneToOneField(
        'qrcodes.QRCode', on_delete=models.SET_NULL, blank=True, null=True, related_name='linked_campaign')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.campaign_name
