from django.db import models
from django.contrib.auth.models import (AbstractBaseUser, PermissionsMixin)
from django.core.validators import EmailValidator
import uuid
from .manager import UserManager


class User(AbstractBaseUser, PermissionsMixin):

    class Role(models.TextChoices):
        DRIVER = "driver", "Driver"
        PARTNER = "partner", "Partner"
        ADMIN = "admin", "Admin"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, db_index=True)
    fullname = models.CharField(max_length=250, blank=True, null=True, db_index=True)
    username = models.CharField(max_length=250, unique=True, db_index=True)
    email = models.EmailField(
        unique=True,
        db_index=True,
        validators=[EmailValidator(message="Enter a valid email address"),]
    )
    phone_number = models.CharField(max_length=20, blank=True, null=True)
    role = models.CharField(choices=Role.choices, max_length=10, default=Role.DRIVER)
    is_active = models.BooleanField(default=True)
    is_admin = models.BooleanField(default=False)
    date_joined = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    def __str__(self):
        return self.username

    @property
    def is_staff(self):
        return self.is_admin

    @property
    def is_partner(self):
        return self.role == self.Role.PARTNER

    @property
    def is_platform_admin(self):
        return self.role == self.Role.ADMIN or self.is_superuser
