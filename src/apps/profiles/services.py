"""
Profile services — handles avatar upload, validation, and deletion.

Uploaded avatars are media files: they are stored through the "default"
storage under MEDIA_ROOT/avatars/. When a name is already taken the storage
appends a random suffix (``photo.png`` -> ``photo_a1B2c3D.png``) instead of
overwriting the existing file.
"""

from pathlib import Path

import structlog
from django.conf import settings
from django.core.files.uploadedfile import UploadedFile
from django.db import transaction

from src.apps.profiles.models import Profile
from src.common.exceptions import ValidationError

logger = structlog.get_logger(__name__)

ALLOWED_EXTENSIONS = {
    ".gif",
    ".jpeg",
    ".jpg",
    ".png",
    ".webp",
    ".pdf",
    ".txt",
}


def _max_upload_size() -> int:
    return getattr(settings, "MAX_UPLOAD_SIZE", 5 * 1024 * 1024)


def validate_upload(file: UploadedFile, max_size: int | None = None) -> None:
    """
    Validate an uploaded file.

    Raises:
        ValidationError: If the file is empty, too large, or has an
        extension outside ALLOWED_EXTENSIONS.
    """
    if max_size is None:
        max_size = _max_upload_size()

    if not file.size:
        raise ValidationError("The submitted file is empty.")

    if file.size > max_size:
        raise ValidationError(
            f"File too large ({file.size} bytes). Maximum is {max_size} bytes.",
            extra={"max_size": max_size},
        )

    ext = Path(file.name or "").suffix.lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise ValidationError(
            f"File type '{ext or 'unknown'}' not allowed. "
            f"Accepted: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
        )


@transaction.atomic
def create_profile(*, file: UploadedFile, max_size: int | None = None) -> Profile:
    """Validate and persist an uploaded avatar. Returns the new Profile."""
    validate_upload(file, max_size=max_size)

    profile = Profile(avatar=file)
    profile.save()

    logger.info(
        "profile_created",
        profile_id=str(profile.id),
        original_name=file.name,
        stored_name=profile.avatar.name,
        size=file.size,
    )
    return profile


@transaction.atomic
def delete_profile(*, profile: Profile) -> None:
    """Delete the stored avatar from MEDIA_ROOT, then the database row."""
    profile_id = str(profile.id)
    stored_name = profile.avatar.name if profile.avatar else ""
    if profile.avatar:
        # FileSystemStorage.delete ignores files that are already gone.
        profile.avatar.delete(save=False)
    profile.delete()
    logger.info("profile_deleted", profile_id=profile_id, stored_name=stored_name)
