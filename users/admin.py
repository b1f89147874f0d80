from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils.translation import gettext_lazy as _

from .models import Credential, User


@admin.register(User)
class CustomUserAdmin(UserAdmin):
    list_display = ("id", "email", "name", "time_zone", "created", "modified")
    list_filter = ("is_active", "is_staff", "groups")
    search_fields = ("email", "name")
    ordering = ("email",)
    filter_horizontal = (
        "groups",
        "user_permissions",
    )

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (_("Profile"), {"fields": ("name", "time_zone")}),
        (
            _("Permissions"),
            {
                "fields": (
                    "is_active",
                    "is_staff",
                    "is_superuser",
                    "groups",
                    "user_permissions",
                )
            },
        ),
    )
    add_fieldsets = ((None, {"classes": ("wide",), "fields": ("email", "password1", "password2")}),)


@admin.register(Credential)
class CredentialAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "type", "created")
    list_filter = ("type",)
    search_fields = ("user__email", "type")
    exclude = ("key",)
