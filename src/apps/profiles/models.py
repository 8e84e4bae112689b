from pathlib import PurePosixPath

from django.db import models

from src.common.models import BaseModel


class Profile(BaseModel):
    """
    A user-uploaded file. The upload is a media file: it lives under
    MEDIA_ROOT and is never collected, fingerprinted or versioned.
    """

    avatar = models.FileField(upload_to="avatars/")

    class Meta(BaseModel.Meta):
        db_table = "profiles"

    @property
    def url(self) -> str:
        if self.avatar:
            return self.avatar.url
        return ""

    @property
    def filename(self) -> str:
        if self.avatar:
            return PurePosixPath(self.avatar.name).name
        return ""

    @property
    def size(self) -> int | None:
        """Size on disk, or None when the stored file has gone missing."""
        if not self.avatar:
            return None
        try:
            return self.avatar.size
        except FileNotFoundError:
            return None

    def __str__(self) -> str:
        return self.filename or str(self.id)
