from django.urls import path

from src.apps.pages import views

app_name = "pages"

urlpatterns = [
    path("", views.home_view, name="home"),
]
