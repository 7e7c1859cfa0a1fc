import shutil
import tempfile
from datetime import timedelta
from unittest.mock import patch

from cloudinary.exceptions import Error as CloudinaryError
from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase
from rest_framework_simplejwt.tokens import AccessToken

from campaigns.models import AdCampaign
from .exceptions import QRCodeNotFound, InvalidScanRequest, StorageUploadError
from .models import QRCode, QRCodeStatus, Engagement, EngagementStatus, compute_conversion_rate
from .services.scan import scan_qr_code
from .services.state import evaluate_status, apply_status
from .storage import CloudinaryImageStorage, LocalImageStorage, StorageFactory
from .tasks import expire_qr_codes
from .views import GenerateCampaignQRView
from .utils.helper import (
    generate_qr_code_id, generate_redemption_code, truncate_device_id, parse_campaign_id,
)
from .utils.qr_image import build_qr, render_qr_png, png_data_uri


User = get_user_model()
PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'
MEDIA_ROOT = tempfile.mkdtemp()


def make_user(username, role):
    return User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password='testpassword',
        role=role,
    )


def make_campaign(advertiser, name='Hotel Promo'):
    return AdCampaign.objects.create(advertiser=advertiser, campaign_name=name)


def make_qr_code(campaign, code='ADV-QR-TEST-0001', **fields):
    defaults = {
        'promo_title': '40% Hotel Discount',
        'promo_description': 'Two nights for the price of one',
        'promo_link': 'https://example.com/redeem',
        'promo_terms': 'Valid on weekdays only',
    }
    defaults.update(fields)
    return QRCode.objects.create(campaign=campaign, qr_code=code, **defaults)


class HelperTests(TestCase):

    def test_redemption_code_is_12_uppercase_alphanumeric(self):
        for _ in range(20):
            self.assertRegex(generate_redemption_code(), r'^[A-Z0-9]{12}$')

    def test_qr_code_id_format(self):
        self.assertRegex(generate_qr_code_id(), r'^ADV-QR-\d{13}-[A-Z0-9]{6}$')

    def test_truncate_device_id(self):
        self.assertEqual(truncate_device_id('abcdefghijklmnopqrstuvwxyz'), 'abcdefghijkl...')

    def test_parse_campaign_id(self):
        self.assertEqual(parse_campaign_id('42'), 42)
        self.assertEqual(parse_campaign_id(7), 7)
        self.assertIsNone(parse_campaign_id('camp-1'))
        self.assertIsNone(parse_campaign_id('²'))
        self.assertIsNone(parse_campaign_id(None))

    def test_conversion_rate(self):
        self.assertEqual(compute_conversion_rate(0, 0), 0)
        self.assertEqual(compute_conversion_rate(12, 50), 24.00)
        self.assertEqual(compute_conversion_rate(1, 3), 33.33)
        self.assertEqual(compute_conversion_rate(2, 3), 66.67)


class QRImageTests(TestCase):

    def test_qr_encodes_exactly_the_code(self):
        code = generate_qr_code_id()
        qr = build_qr(code)
        self.assertEqual(len(qr.data_list), 1)
        self.assertEqual(qr.data_list[0].data, code.encode('utf-8'))

    def test_render_returns_png(self):
        png = render_qr_png('ADV-QR-1700000000000-ABC123')
        self.assertTrue(png.startswith(PNG_SIGNATURE))

    def test_data_uri(self):
        self.assertTrue(png_data_uri(PNG_SIGNATURE).startswith('data:image/png;base64,'))


@override_settings(MEDIA_ROOT=MEDIA_ROOT)
class StorageTests(TestCase):

    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
        super().tearDownClass()

    def test_cloudinary_storage_returns_secure_url(self):
        calls = []

        def fake_upload(file, **options):
            calls.append((file.name, options))
            return {'secure_url': 'https://res.cloudinary.com/demo/qr.png'}

        storage = CloudinaryImageStorage(uploader=fake_upload)
        url = storage.upload(PNG_SIGNATURE, 'qr-ADV.png', 'advertiser-qr-codes')

        self.assertEqual(url, 'https://res.cloudinary.com/demo/qr.png')
        self.assertEqual(calls[0][0], 'qr-ADV.png')
        self.assertEqual(calls[0][1]['folder'], 'advertiser-qr-codes')

    def test_cloudinary_failure_raises_storage_error(self):
        def failing_upload(file, **options):
            raise CloudinaryError('bad credentials')

        storage = CloudinaryImageStorage(uploader=failing_upload)
        with self.assertRaises(StorageUploadError):
            storage.upload(PNG_SIGNATURE, 'qr-ADV.png', 'advertiser-qr-codes')

    def test_local_storage_saves_under_folder(self):
        url = LocalImageStorage().upload(PNG_SIGNATURE, 'qr-ADV.png', 'advertiser-qr-codes')
        self.assertTrue(url.startswith('/media/advertiser-qr-codes/'))
        self.assertTrue(url.endswith('qr-ADV.png'))

    def test_factory(self):
        self.assertIsInstance(StorageFactory.get_storage('local'), LocalImageStorage)
        self.assertIsInstance(StorageFactory.get_storage('cloudinary'), CloudinaryImageStorage)
        with self.assertRaises(ValueError):
            StorageFactory.get_storage('s3')


class StateTests(TestCase):

    def setUp(self):
        self.partner = make_user('partner', User.Role.PARTNER)
        self.campaign = make_campaign(self.partner)
        self.now = timezone.now()

    def test_active_code_stays_active(self):
        qr_code = make_qr_code(self.campaign, expires_at=self.now + timedelta(days=1), max_scans=5)
        self.assertEqual(evaluate_status(qr_code, self.now), QRCodeStatus.ACTIVE)

    def test_past_expiry_evaluates_to_expired(self):
        qr_code = make_qr_code(self.campaign, expires_at=self.now - timedelta(minutes=1))
        self.assertEqual(evaluate_status(qr_code, self.now), QRCodeStatus.EXPIRED)

    def test_scan_limit_evaluates_to_inactive(self):
        qr_code = make_qr_code(self.campaign, max_scans=3, scans_count=3)
        self.assertEqual(evaluate_status(qr_code, self.now), QRCodeStatus.INACTIVE)

    def test_expiry_wins_over_scan_limit(self):
        qr_code = make_qr_code(
            self.campaign, expires_at=self.now - timedelta(days=1), max_scans=1, scans_count=1)
        self.assertEqual(evaluate_status(qr_code, self.now), QRCodeStatus.EXPIRED)

    def test_apply_status_is_idempotent(self):
        qr_code = make_qr_code(self.campaign, expires_at=self.now - timedelta(days=1))
        self.assertEqual(apply_status(qr_code, self.now), QRCodeStatus.EXPIRED)
        self.assertEqual(apply_status(qr_code, self.now), QRCodeStatus.EXPIRED)
        qr_code.refresh_from_db()
        self.assertEqual(qr_code.status, QRCodeStatus.EXPIRED)

    def test_terminal_status_is_never_reactivated(self):
        qr_code = make_qr_code(self.campaign, status=QRCodeStatus.INACTIVE)
        self.assertEqual(apply_status(qr_code, self.now), QRCodeStatus.INACTIVE)
        qr_code.refresh_from_db()
        self.assertEqual(qr_code.status, QRCodeStatus.INACTIVE)

    def test_sweep_task_expires_stale_codes(self):
        make_qr_code(self.campaign, code='ADV-QR-A', expires_at=self.now - timedelta(days=1))
        make_qr_code(self.campaign, code='ADV-QR-B', max_scans=2, scans_count=2)
        make_qr_code(self.campaign, code='ADV-QR-C')

        self.assertEqual(expire_qr_codes(), 2)
        self.assertEqual(QRCode.objects.get(qr_code='ADV-QR-A').status, QRCodeStatus.EXPIRED)
        self.assertEqual(QRCode.objects.get(qr_code='ADV-QR-B').status, QRCodeStatus.INACTIVE)
        self.assertEqual(QRCode.objects.get(qr_code='ADV-QR-C').status, QRCodeStatus.ACTIVE)
        self.assertEqual(expire_qr_codes(), 0)


class ScanServiceTests(TestCase):

    def setUp(self):
        self.partner = make_user('partner', User.Role.PARTNER)
        self.driver = make_user('driver', User.Role.DRIVER)
        self.campaign = make_campaign(self.partner)
        self.qr_code = make_qr_code(self.campaign)

    def test_missing_fields_are_rejected(self):
        with self.assertRaises(InvalidScanRequest):
            scan_qr_code('', 'dev-A')
        with self.assertRaises(InvalidScanRequest):
            scan_qr_code('   ', 'dev-A')
        with self.assertRaises(InvalidScanRequest):
            scan_qr_code(self.qr_code.qr_code, '')

    def test_unknown_code(self):
        with self.assertRaises(QRCodeNotFound):
            scan_qr_code('ADV-QR-MISSING', 'dev-A')
        self.assertFalse(Engagement.objects.exists())

    def test_code_is_stripped_before_lookup(self):
        result = scan_qr_code(f"  {self.qr_code.qr_code}  ", 'dev-A')
        self.assertTrue(result['success'])

    def test_redemption_records_magazine_and_driver(self):
        scan_qr_code(
            self.qr_code.qr_code, 'dev-A',
            magazine_barcode='MAG-0042',
            driver_id=self.driver.id,
            location={'city': 'Lagos', 'country': 'NG'},
        )
        engagement = Engagement.objects.get()
        self.assertEqual(engagement.status, EngagementStatus.REDEEMED)
        self.assertEqual(engagement.magazine_barcode, 'MAG-0042')
        self.assertEqual(engagement.driver, self.driver)
        self.assertEqual(engagement.city, 'Lagos')
        self.assertIsNotNone(engagement.redeemed_at)

    def test_unknown_driver_is_not_linked(self):
        scan_qr_code(self.qr_code.qr_code, 'dev-A', driver_id=self.partner.id)
        self.assertIsNone(Engagement.objects.get().driver)

    def test_malformed_driver_id_and_ip_are_dropped(self):
        result = scan_qr_code(
            self.qr_code.qr_code, 'dev-A', ip_address='not-an-ip', driver_id='drv-42')

        self.assertTrue(result['success'])
        engagement = Engagement.objects.get()
        self.assertIsNone(engagement.ip_address)
        self.assertIsNone(engagement.driver)

    def test_prior_failed_engagement_does_not_count_as_new_device(self):
        Engagement.objects.create(
            qr_code=self.qr_code, device_id='dev-A', status=EngagementStatus.FAILED,
            reason='QR code is paused')

        scan_qr_code(self.qr_code.qr_code, 'dev-A')

        self.qr_code.refresh_from_db()
        self.assertEqual(self.qr_code.scans_count, 1)
        self.assertEqual(self.qr_code.redemptions_count, 1)
        self.assertEqual(self.qr_code.unique_scans_count, 0)


class ScanQRViewTests(APITestCase):

    def setUp(self):
        self.partner = make_user('partner', User.Role.PARTNER)
        self.campaign = make_campaign(self.partner)
        self.qr_code = make_qr_code(self.campaign)
        self.url = reverse('scan-qr')

    def scan(self, device_id, code=None, **extra):
        payload = {'qrCode': code or self.qr_code.qr_code, 'deviceId': device_id, **extra}
        return self.client.post(self.url, payload, format='json')

    def test_first_scan_redeems_offer(self):
        response = self.scan('dev-A')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        offer = response.data['offer']
        self.assertRegex(offer['redemptionCode'], r'^[A-Z0-9]{12}$')
        self.assertEqual(offer['title'], '40% Hotel Discount')
        self.assertEqual(offer['promoLink'], 'https://example.com/redeem')
        self.assertEqual(offer['terms'], 'Valid on weekdays only')
        self.assertEqual(response.data['engagement']['status'], 'redeemed')

        self.qr_code.refresh_from_db()
        self.assertEqual(self.qr_code.scans_count, 1)
        self.assertEqual(self.qr_code.redemptions_count, 1)
        self.assertEqual(self.qr_code.unique_scans_count, 1)

    def test_second_scan_from_same_device_is_duplicate(self):
        self.scan('dev-A')
        self.qr_code.refresh_from_db()
        counters = (self.qr_code.scans_count, self.qr_code.unique_scans_count, self.qr_code.redemptions_count)

        response = self.scan('dev-A')

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['status'], 'duplicate')
        self.assertFalse(response.data['success'])
        self.assertIn('reason', response.data)

        self.qr_code.refresh_from_db()
        self.assertEqual(
            (self.qr_code.scans_count, self.qr_code.unique_scans_count, self.qr_code.redemptions_count),
            counters)
        self.assertEqual(
            Engagement.objects.filter(device_id='dev-A', status=EngagementStatus.DUPLICATE).count(), 1)

    def test_redemption_codes_differ_between_devices(self):
        first = self.scan('dev-A').data['offer']['redemptionCode']
        second = self.scan('dev-B').data['offer']['redemptionCode']
        self.assertNotEqual(first, second)

    def test_expired_code_is_rejected_and_marked_expired(self):
        self.qr_code.expires_at = timezone.now() - timedelta(hours=1)
        self.qr_code.save()

        response = self.scan('dev-A')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'This offer has expired')
        self.assertEqual(response.data['status'], 'expired')
        self.qr_code.refresh_from_db()
        self.assertEqual(self.qr_code.status, QRCodeStatus.EXPIRED)
        self.assertFalse(Engagement.objects.exists())

    def test_scan_limit_reached_marks_inactive(self):
        self.qr_code.max_scans = 2
        self.qr_code.scans_count = 2
        self.qr_code.save()

        response = self.scan('dev-A')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['status'], 'inactive')
        self.qr_code.refresh_from_db()
        self.assertEqual(self.qr_code.status, QRCodeStatus.INACTIVE)
        self.assertFalse(Engagement.objects.exists())

    def test_inactive_code_records_failed_engagement(self):
        self.qr_code.status = QRCodeStatus.PAUSED
        self.qr_code.save()

        response = self.scan('dev-A')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['status'], 'paused')
        engagement = Engagement.objects.get()
        self.assertEqual(engagement.status, EngagementStatus.FAILED)
        self.assertEqual(engagement.reason, 'QR code is paused')

    def test_unknown_code_is_404(self):
        response = self.scan('dev-A', code='ADV-QR-DOES-NOT-EXIST')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_missing_device_id_is_400(self):
        response = self.client.post(self.url, {'qrCode': self.qr_code.qr_code}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Device ID is required')

    def test_missing_code_is_400(self):
        response = self.client.post(self.url, {'deviceId': 'dev-A'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_malformed_optional_fields_do_not_block_the_scan(self):
        response = self.scan('dev-A', ipAddress='unknown', driverId='drv-42')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        engagement = Engagement.objects.get()
        self.assertEqual(engagement.status, EngagementStatus.REDEEMED)
        self.assertIsNone(engagement.ip_address)
        self.assertIsNone(engagement.driver)

    def test_blank_ip_address_falls_back_to_remote_addr(self):
        response = self.scan('dev-A', ipAddress='')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(Engagement.objects.get().ip_address, '127.0.0.1')

    def test_valid_ip_address_is_stored(self):
        self.scan('dev-A', ipAddress='41.58.12.7')
        self.assertEqual(Engagement.objects.get().ip_address, '41.58.12.7')

    def test_scan_is_public(self):
        self.client.credentials()
        response = self.scan('dev-A')
        self.assertEqual(response.status_code, status.HTTP_200_OK)


@override_settings(MEDIA_ROOT=MEDIA_ROOT, QR_IMAGE_STORAGE='local')
class GenerateCampaignQRViewTests(APITestCase):

    @classmethod
    def tearDownClass(cls):
        shutil.rmtree(MEDIA_ROOT, ignore_errors=True)
        super().tearDownClass()

    def setUp(self):
        self.partner = make_user('partner', User.Role.PARTNER)
        self.campaign = make_campaign(self.partner, name='camp-1')
        self.url = reverse('generate-campaign-qr')
        self.authenticate(self.partner)

    def authenticate(self, user):
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken.for_user(user)}')

    def generate(self, **extra):
        payload = {
            'campaignId': self.campaign.id,
            'promoTitle': '40% Hotel Discount',
            'promoLink': 'https://example.com/redeem',
            **extra,
        }
        return self.client.post(self.url, payload, format='json')

    def test_partner_generates_qr_for_own_campaign(self):
        response = self.generate(promoTerms='Weekdays only', maxScans=100)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data['qrCode']
        self.assertTrue(response.data['success'])
        self.assertEqual(data['status'], 'active')
        self.assertTrue(data['qrImageUrl'].endswith('.png'))
        self.assertTrue(data['qrImageData'].startswith('data:image/png;base64,'))

        qr_code = QRCode.objects.get(qr_code=data['qrCodeId'])
        self.assertEqual(qr_code.id, data['id'])
        self.assertEqual(qr_code.max_scans, 100)
        self.assertEqual(qr_code.promo_terms, 'Weekdays only')
        self.assertEqual((qr_code.scans_count, qr_code.unique_scans_count, qr_code.redemptions_count), (0, 0, 0))
        self.campaign.refresh_from_db()
        self.assertEqual(self.campaign.qr_code, qr_code)

    def test_generated_image_encodes_the_scannable_code(self):
        data = self.generate().data['qrCode']
        qr = build_qr(data['qrCodeId'])
        self.assertEqual(qr.data_list[0].data, data['qrCodeId'].encode('utf-8'))

        response = self.client.post(
            reverse('scan-qr'), {'qrCode': data['qrCodeId'], 'deviceId': 'dev-A'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_missing_fields(self):
        response = self.client.post(self.url, {'campaignId': self.campaign.id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Missing required fields: campaignId, promoTitle, promoLink')

    def test_unknown_campaign(self):
        response = self.generate(campaignId=999999)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'Campaign not found')

    def test_non_numeric_campaign_id_is_unknown_campaign(self):
        response = self.generate(campaignId='camp-1')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'Campaign not found')
        self.assertFalse(QRCode.objects.exists())

    def test_numeric_string_campaign_id_is_accepted(self):
        response = self.generate(campaignId=str(self.campaign.id))
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_partner_cannot_generate_for_other_campaign(self):
        other = make_user('other', User.Role.PARTNER)
        self.authenticate(other)
        response = self.generate()
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(QRCode.objects.exists())

    def test_admin_can_generate_for_any_campaign(self):
        self.authenticate(make_user('admin', User.Role.ADMIN))
        response = self.generate()
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_driver_is_forbidden(self):
        self.authenticate(make_user('driver', User.Role.DRIVER))
        response = self.generate()
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_unauthenticated_is_rejected(self):
        self.client.credentials()
        response = self.generate()
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_upload_failure_is_500(self):
        def failing_upload(file, **options):
            raise CloudinaryError("bad credentials")

        storage = CloudinaryImageStorage(uploader=failing_upload)
        with patch.object(GenerateCampaignQRView, "get_storage", return_value=storage):
            response = self.generate()

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['error'], 'Failed to generate QR code')
        self.assertFalse(QRCode.objects.exists())

    def test_single_scan_campaign_scenario(self):
        qr_code_id = self.generate(maxScans=1).data['qrCode']['qrCodeId']
        scan_url = reverse('scan-qr')

        first = self.client.post(scan_url, {'qrCode': qr_code_id, 'deviceId': 'dev-A'}, format='json')
        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(len(first.data['offer']['redemptionCode']), 12)

        again = self.client.post(scan_url, {'qrCode': qr_code_id, 'deviceId': 'dev-A'}, format='json')
        self.assertEqual(again.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(again.data['status'], 'duplicate')

        other = self.client.post(scan_url, {'qrCode': qr_code_id, 'deviceId': 'dev-B'}, format='json')
        self.assertEqual(other.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(QRCode.objects.get(qr_code=qr_code_id).status, QRCodeStatus.INACTIVE)


class QRAnalyticsViewTests(APITestCase):

    def setUp(self):
        self.partner = make_user('partner', User.Role.PARTNER)
        self.campaign = make_campaign(self.partner)
        self.url = reverse('qr-analytics')
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken.for_user(self.partner)}')

    def test_campaign_without_qr_code(self):
        response = self.client.get(self.url, {'campaignId': self.campaign.id})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        analytics = response.data['analytics']
        self.assertEqual(analytics['status'], 'no_qr_code')
        self.assertEqual(analytics['totalScans'], 0)
        self.assertEqual(analytics['conversionRate'], 0)

    def test_reports_stored_counters(self):
        qr_code = make_qr_code(
            self.campaign, scans_count=50, unique_scans_count=40, redemptions_count=12)
        Engagement.objects.create(
            qr_code=qr_code, device_id='device-0123456789abcdef', status=EngagementStatus.REDEEMED,
            redemption_code='ABCDEFGHJKLM', city='Lagos')
        Engagement.objects.create(
            qr_code=qr_code, device_id='device-0123456789abcdef', status=EngagementStatus.DUPLICATE)

        response = self.client.get(self.url, {'campaignId': self.campaign.id})

        analytics = response.data['analytics']
        self.assertEqual(analytics['totalScans'], 50)
        self.assertEqual(analytics['uniqueDevices'], 40)
        self.assertEqual(analytics['redemptions'], 12)
        self.assertEqual(analytics['conversionRate'], 24.00)
        self.assertEqual(analytics['status'], 'active')
        self.assertEqual(analytics['statusBreakdown'], {'redeemed': 1, 'duplicate': 1})
        self.assertEqual(len(analytics['recentScans']), 2)
        for scan in analytics['recentScans']:
            self.assertEqual(scan['deviceId'], 'device-01234...')
        self.assertEqual(
            {scan['location'] for scan in analytics['recentScans']}, {'Lagos', 'Unknown'})

    def test_recent_scans_are_limited_to_ten(self):
        qr_code = make_qr_code(self.campaign)
        for i in range(15):
            Engagement.objects.create(qr_code=qr_code, device_id=f'dev-{i}', status=EngagementStatus.FAILED)

        response = self.client.get(self.url, {'campaignId': self.campaign.id})

        self.assertEqual(len(response.data['analytics']['recentScans']), 10)
        self.assertEqual(response.data['analytics']['statusBreakdown'], {'failed': 15})

    def test_campaign_id_is_required(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Campaign ID is required')

    def test_non_ascii_digit_campaign_id_is_400(self):
        response = self.client.get(self.url, {'campaignId': '²'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Campaign ID must be numeric')

    def test_partner_cannot_read_other_campaign(self):
        other_campaign = make_campaign(make_user('other', User.Role.PARTNER))
        response = self.client.get(self.url, {'campaignId': other_campaign.id})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_analytics_is_read_only(self):
        qr_code = make_qr_code(self.campaign, expires_at=timezone.now() - timedelta(days=1))
        self.client.get(self.url, {'campaignId': self.campaign.id})
        qr_code.refresh_from_db()
        self.assertEqual(qr_code.status, QRCodeStatus.ACTIVE)
        self.assertEqual(qr_code.scans_count, 0)
