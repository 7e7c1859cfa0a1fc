import secrets
import string
import time


REDEMPTION_CODE_LENGTH = 12
REDEMPTION_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_qr_code_id(prefix="ADV-QR"):
    """Unique QR identifier, e.g. ADV-QR-1735689600000-X7K2PQ."""
    timestamp = int(time.time() * 1000)
    rand_str = ''.join(secrets.choice(REDEMPTION_CODE_ALPHABET) for _ in range(6))
    return f"{prefix}-{timestamp}-{rand_str}"


def generate_redemption_code(length=REDEMPTION_CODE_LENGTH):
    """Generate a random 12-character alphanumeric code."""
    return ''.join(secrets.choice(REDEMPTION_CODE_ALPHABET) for _ in range(length))


def truncate_device_id(device_id, keep=12):
    return f"{device_id[:keep]}..."


def parse_campaign_id(value):
    """Campaign primary key from request input, None when it is not an integer."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None
