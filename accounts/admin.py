from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from accounts.forms import CustomUserCreationForm
from accounts.models import CustomUser
from accounts.models import UserProfile
from gameplan.admin import DescriptiveSearchMixin


class UserProfileInline(admin.StackedInline):
    model = UserProfile
    can_delete = False
    readonly_fields = ("created_at", "updated_at")


@admin.register(CustomUser)
class CustomUserAdmin(DescriptiveSearchMixin, BaseUserAdmin):
    model = CustomUser
    add_form = CustomUserCreationForm
    inlines = (UserProfileInline,)
    list_display = ("email", "is_staff", "is_active", "date_joined")
    search_fields = ("email", "profile__first_name", "profile__last_name")
    ordering = ("email",)
    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (
            "Permissions",
            {
                "fields": (
                    "is_active",
                    "is_staff",
                    "is_superuser",
                    "groups",
                    "user_permissions",
                ),
            },
        ),
        ("Important dates", {"fields": ("last_login", "date_joined")}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "password1", "password2"),
            },
        ),
    )

    def get_inline_instances(self, request, obj=None):
        # The profile is created by a signal when the user is saved.
        if obj is None:
            return []
        return super().get_inline_instances(request, obj)


@admin.register(UserProfile)
class UserProfileAdmin(DescriptiveSearchMixin, admin.ModelAdmin):
    model = UserProfile
    list_display = ("user", "first_name", "last_name", "updated_at")
    search_fields = ("user__email", "first_name", "last_name")
