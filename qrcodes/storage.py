from abc import ABC, abstractmethod
from io import BytesIO
import logging
import uuid

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from .exceptions import StorageUploadError


logger = logging.getLogger(__name__)


# Abstract base class for QR image storage
class QRImageStorage(ABC):
    @abstractmethod
    def upload(self, content: bytes, filename: str, folder: str) -> str:
        """Store ``content`` and return the public URL of the stored file."""
        pass


class CloudinaryImageStorage(QRImageStorage):
    def __init__(self, uploader=None):
        self.uploader = uploader or cloudinary.uploader.upload

    def upload(self, content: bytes, filename: str, folder: str) -> str:
        image_file = BytesIO(content)
        image_file.name = filename
        try:
            upload_result = self.uploader(
                image_file,
                folder=folder,
                public_id=f"{uuid.uuid4()}-{filename.rsplit('.', 1)[0]}",
                resource_type="image",
            )
        except CloudinaryError as e:
            logger.error(f"Cloudinary upload failed for {filename}: {e}")
            raise StorageUploadError(f"Failed to upload file: {e}") from e
        return upload_result['secure_url']


class LocalImageStorage(QRImageStorage):
    def __init__(self, storage=None):
        self.storage = storage or default_storage

    def upload(self, content: bytes, filename: str, folder: str) -> str:
        try:
            name = self.storage.save(f"{folder}/{uuid.uuid4()}-{filename}", ContentFile(content))
        except OSError as e:
            logger.error(f"Local upload failed for {filename}: {e}")
            raise StorageUploadError(f"Failed to upload file: {e}") from e
        return self.storage.url(name)


# Factory class to create storage instances
class StorageFactory:
    @staticmethod
    def get_storage(backend: str = None) -> QRImageStorage:
        backend = (backend or settings.QR_IMAGE_STORAGE).lower()
        if backend == "cloudinary":
            return CloudinaryImageStorage()
        elif backend == "local":
            return LocalImageStorage()
        else:
            raise ValueError(f"Unknown QR image storage backend: {backend}")
