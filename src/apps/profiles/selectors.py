"""
Profile selectors (read operations).
"""

from uuid import UUID

from django.db.models import QuerySet

from src.apps.profiles.models import Profile


def get_profile_by_id(*, profile_id: UUID) -> Profile | None:
    try:
        return Profile.objects.get(id=profile_id)
    except Profile.DoesNotExist:
        return None


def list_profiles() -> QuerySet[Profile]:
    """Every profile, newest first."""
    return Profile.objects.order_by("-created_at")
