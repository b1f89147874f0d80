from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models
from django.utils.translation import gettext_lazy as _

from common.models import BaseModel

from .managers import UserManager


class User(AbstractBaseUser, PermissionsMixin, BaseModel):
    email = models.EmailField(max_length=255, unique=True)
    name = models.CharField(max_length=255, blank=True)
    time_zone = models.CharField(max_length=255, default="UTC")
    is_staff = models.BooleanField(
        default=False,
        help_text=_("Designates whether the user can log into this admin site."),
    )
    is_active = models.BooleanField(
        default=True,
        help_text=_(
            "Designates whether this user should be treated as "
            "active. Unselect this instead of deleting accounts."
        ),
    )

    objects: UserManager = UserManager()

    USERNAME_FIELD = "email"

    def get_full_name(self):
        return self.name

    def get_short_name(self):
        return self.name.split(" ")[0] if self.name else self.email

    def __str__(self):
        return f"{self.name} <{self.email}>"


class Credential(BaseModel):
    """
    Authorization material granting access to an external calendar or video provider on behalf
    of a user. The `type` suffix (`_calendar` or `_video`) tells which integration handles it.
    """

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="credentials")
    type = models.CharField(max_length=255)  # noqa: A003
    key = models.JSONField(default=dict, blank=True)

    def __str__(self):
        return f"Credential(id={self.id}, type={self.type}, user_id={self.user_id})"
