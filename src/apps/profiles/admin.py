from django.contrib import admin

from src.apps.profiles.models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("filename", "avatar", "created_at")
    search_fields = ("avatar",)
    readonly_fields = ("created_at", "updated_at")
    ordering = ("-created_at",)
