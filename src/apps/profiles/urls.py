from django.urls import path

from src.apps.profiles import views

app_name = "profiles"

urlpatterns = [
    path("", views.profile_list_view, name="list"),
    path("upload/", views.upload_view, name="upload"),
]
