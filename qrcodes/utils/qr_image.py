import base64
from io import BytesIO

import qrcode
from qrcode.constants import ERROR_CORRECT_H


QR_IMAGE_WIDTH = 500
QR_IMAGE_BORDER = 2


def build_qr(data, width=QR_IMAGE_WIDTH, border=QR_IMAGE_BORDER):
    """
    Build a high error-correction QR code for ``data`` sized to roughly
    ``width`` pixels.
    """
    qr = qrcode.QRCode(version=None, error_correction=ERROR_CORRECT_H, border=border)
    qr.add_data(data)
    qr.make(fit=True)
    qr.box_size = max(1, width // (qr.modules_count + 2 * border))
    return qr


def render_qr_png(data):
    qr = build_qr(data)
    img = qr.make_image(fill_color="black", back_color="white")

    buffer = BytesIO()
    img.save(buffer)
    return buffer.getvalue()


def png_data_uri(png_bytes):
    return f"data:image/png;base64,{base64.b64encode(png_bytes).decode('ascii')}"
