from django.contrib import admin
from .models import AdCampaign


@admin.register(AdCampaign)
class AdCampaignAdmin(admin.ModelAdmin):
    list_display = ('campaign_name', 'advertiser', 'campaign_type', 'status', 'created_at')
    list_filter = ('status', 'campaign_type')
    search_fields = ('campaign_name',)
