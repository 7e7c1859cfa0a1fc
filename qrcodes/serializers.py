from rest_framework import serializers


class GenerateQRSerializer(serializers.Serializer):
    # Presence of campaignId, promoTitle and promoLink is checked by the
    # generation service so the error body lists all three. Campaign ids are
    # numeric; any other value is answered as an unknown campaign.
    campaignId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    promoTitle = serializers.CharField(required=False, allow_blank=True, max_length=255)
    promoLink = serializers.CharField(required=False, allow_blank=True, max_length=500)
    promoDescription = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    promoTerms = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    expiresAt = serializers.DateTimeField(required=False, allow_null=True)
    maxScans = serializers.IntegerField(required=False, allow_null=True, min_value=1)


class LocationSerializer(serializers.Serializer):
    city = serializers.CharField(required=False, allow_blank=True, max_length=100)
    region = serializers.CharField(required=False, allow_blank=True, max_length=100)
    country = serializers.CharField(required=False, allow_blank=True, max_length=100)
    latitude = serializers.FloatField(required=False, allow_null=True)
    longitude = serializers.FloatField(required=False, allow_null=True)


class ScanQRSerializer(serializers.Serializer):
    # Empty code/device values are rejected by the scan handler itself.
    qrCode = serializers.CharField(required=False, allow_blank=True, default='')
    deviceId = serializers.CharField(required=False, allow_blank=True, default='', max_length=255)
    # Optional context is stored as received; invalid values are dropped by the
    # scan handler instead of failing the scan.
    ipAddress = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    userAgent = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    magazineBarcode = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    driverId = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    location = LocationSerializer(required=False, allow_null=True)
    metadata = serializers.JSONField(required=False, allow_null=True)


