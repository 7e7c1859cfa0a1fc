from django.urls import path
from .views import GenerateCampaignQRView, ScanQRView, QRAnalyticsView

urlpatterns = [
    path('advertiser/generate/', GenerateCampaignQRView.as_view(), name='generate-campaign-qr'),
    path('advertiser/analytics/', QRAnalyticsView.as_view(), name='qr-analytics'),
    path('public/scan/', ScanQRView.as_view(), name='scan-qr'),
]
