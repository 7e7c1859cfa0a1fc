from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
import logging

from campaigns.models import AdCampaign
from users.permissions import IsPartnerOrAdmin, IsCampaignOwner
from .exceptions import QRCodeError
from .serializers import GenerateQRSerializer, ScanQRSerializer
from .services.analytics import get_qr_analytics
from .services.generate import generate_campaign_qr
from .services.scan import scan_qr_code
from .storage import StorageFactory
from .utils.helper import parse_campaign_id


logger = logging.getLogger(__name__)


def error_response(error: QRCodeError):
    return Response(error.to_response_data(), status=error.status_code)


class GenerateCampaignQRView(APIView):
    permission_classes = [IsPartnerOrAdmin, IsCampaignOwner]

    def get_storage(self):
        return StorageFactory.get_storage()

    def post(self, request):
        serializer = GenerateQRSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {'error': 'Invalid QR code request', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )
        data = serializer.validated_data

        campaign = None
        campaign_pk = parse_campaign_id(data.get('campaignId'))
        if campaign_pk is not None:
            campaign = AdCampaign.objects.filter(pk=campaign_pk).first()
            if campaign is not None:
                self.check_object_permissions(request, campaign)

        try:
            result = generate_campaign_qr(
                campaign_id=data.get('campaignId'),
                promo_title=data.get('promoTitle'),
                promo_link=data.get('promoLink'),
                promo_description=data.get('promoDescription'),
                promo_terms=data.get('promoTerms'),
                expires_at=data.get('expiresAt'),
                max_scans=data.get('maxScans'),
                storage=self.get_storage(),
                campaign=campaign,
            )
        except QRCodeError as e:
            return error_response(e)
        except Exception as e:
            logger.error(f"Generate QR error: {str(e)}")
            return Response(
                {'error': 'Failed to generate QR code', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return Response(result, status=status.HTTP_200_OK)


class ScanQRView(APIView):
    """
    Public endpoint hit by the QR landing page, no authentication required.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = ScanQRSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {'error': 'Invalid scan request', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )
        data = serializer.validated_data

        try:
            result = scan_qr_code(
                qr_code=data.get('qrCode'),
                device_id=data.get('deviceId'),
                ip_address=data.get('ipAddress') or request.META.get('REMOTE_ADDR'),
                user_agent=data.get('userAgent') or request.META.get('HTTP_USER_AGENT'),
                magazine_barcode=data.get('magazineBarcode'),
                driver_id=data.get('driverId'),
                location=data.get('location'),
                metadata=data.get('metadata'),
            )
        except QRCodeError as e:
            return error_response(e)
        except Exception as e:
            logger.error(f"QR scan error: {str(e)}")
            return Response(
                {'error': 'Failed to process QR code scan', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return Response(result, status=status.HTTP_200_OK)

    def options(self, request, *args, **kwargs):
        response = super().options(request, *args, **kwargs)
        response['Access-Control-Allow-Origin'] = '*'
        response['Access-Control-Allow-Methods'] = 'POST, OPTIONS'
        response['Access-Control-Allow-Headers'] = 'Content-Type'
        return response


class QRAnalyticsView(APIView):
    permission_classes = [IsPartnerOrAdmin, IsCampaignOwner]

    def get(self, request):
        campaign_id = request.query_params.get('campaignId')

        if not campaign_id:
            return Response(
                {'error': 'Campaign ID is required'},
                status=status.HTTP_400_BAD_REQUEST
            )
        campaign_pk = parse_campaign_id(campaign_id)
        if campaign_pk is None:
            return Response(
                {'error': 'Campaign ID must be numeric'},
                status=status.HTTP_400_BAD_REQUEST
            )

        campaign = AdCampaign.objects.filter(pk=campaign_pk).first()
        if campaign is not None:
            self.check_object_permissions(request, campaign)

        try:
            result = get_qr_analytics(campaign_pk)
        except Exception as e:
            logger.error(f"Get QR analytics error: {str(e)}")
            return Response(
                {'error': 'Failed to fetch analytics', 'details': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return Response(result, status=status.HTTP_200_OK)
