"""
Profile & storage API endpoints.

Mounted at: /api/v1/
Full paths:  /api/v1/profiles/...   uploads (media files)
             /api/v1/storage/       static/media configuration
"""

from uuid import UUID

from django.http import HttpRequest
from ninja import File, Router
from ninja.files import UploadedFile

from src.apps.profiles import selectors as profile_selectors
from src.apps.profiles import services as profile_services
from src.apps.profiles.schemas import (
    ErrorSchema,
    MessageSchema,
    ProfileListSchema,
    ProfileSchema,
    StorageInfoSchema,
)
from src.common.exceptions import NotFoundError
from src.common.pagination import paginate_queryset
from src.common.storage import describe_storage

router = Router(tags=["Profiles"])
storage_router = Router(tags=["Storage"])


def _get_profile_or_404(profile_id: UUID):
    profile = profile_selectors.get_profile_by_id(profile_id=profile_id)
    if profile is None:
        raise NotFoundError(f"Profile {profile_id} not found.")
    return profile


@router.get("/profiles/", response=ProfileListSchema)
def list_profiles(request: HttpRequest, page: int = 1, page_size: int = 25):
    qs, total, page, page_size = paginate_queryset(
        profile_selectors.list_profiles(), page=page, page_size=page_size,
    )
    return {
        "count": total,
        "page": page,
        "page_size": page_size,
        "results": list(qs),
    }


@router.post(
    "/profiles/",
    response={201: ProfileSchema, 400: ErrorSchema},
)
def upload_profile(request: HttpRequest, avatar: UploadedFile = File(...)):
    profile = profile_services.create_profile(file=avatar)
    return 201, profile


@router.get(
    "/profiles/{profile_id}",
    response={200: ProfileSchema, 404: ErrorSchema},
)
def get_profile(request: HttpRequest, profile_id: UUID):
    return _get_profile_or_404(profile_id)


@router.delete(
    "/profiles/{profile_id}",
    response={200: MessageSchema, 404: ErrorSchema},
)
def delete_profile(request: HttpRequest, profile_id: UUID):
    profile = _get_profile_or_404(profile_id)
    profile_services.delete_profile(profile=profile)
    return {"message": f"Profile {profile_id} deleted."}


@storage_router.get("/storage/", response=StorageInfoSchema)
def storage_info(request: HttpRequest):
    return describe_storage()
