from rest_framework import status


class QRCodeError(Exception):
    """Base QR exception, carries the HTTP status and body to answer with"""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, error, **extra):
        super().__init__(error)
        self.error = error
        self.extra = extra

    def to_response_data(self):
        return {"error": self.error, **self.extra}


class InvalidScanRequest(QRCodeError):
    """Raised when the code or the device id is missing"""
    pass


class MissingFieldsError(QRCodeError):
    """Raised when required QR generation fields are missing"""
    pass


class QRCodeNotFound(QRCodeError):
    """Raised when no QR code matches the scanned value"""
    status_code = status.HTTP_404_NOT_FOUND


class CampaignNotFound(QRCodeError):
    """Raised when the campaign a QR code is generated for does not exist"""
    status_code = status.HTTP_404_NOT_FOUND


class QRCodeNotActive(QRCodeError):
    """Raised when the QR code is paused, expired or inactive"""
    pass


class QRCodeExpired(QRCodeError):
    """Raised when the offer expiry date has passed"""
    pass


class QRCodeLimitReached(QRCodeError):
    """Raised when the QR code has used up its maximum scans"""
    pass


class DuplicateScan(QRCodeError):
    """Raised when the device already claimed the offer"""
    status_code = status.HTTP_409_CONFLICT


class StorageUploadError(Exception):
    """Raised when the QR image could not be stored"""
    pass
