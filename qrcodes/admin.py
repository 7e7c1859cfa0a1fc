from django.contrib import admin
from .models import QRCode, Engagement


@admin.register(QRCode)
class QRCodeAdmin(admin.ModelAdmin):
    list_display = ('qr_code', 'campaign', 'scans_count', 'redemptions_count', 'status', 'created_at')
    list_filter = ('status',)
    search_fields = ('qr_code', 'promo_title')
    readonly_fields = ('scans_count', 'unique_scans_count', 'redemptions_count', 'qr_image_data')


@admin.register(Engagement)
class EngagementAdmin(admin.ModelAdmin):
    list_display = ('qr_code', 'device_id', 'status', 'redemption_code', 'scanned_at')
    list_filter = ('status',)
    search_fields = ('device_id', 'redemption_code', 'magazine_barcode')
