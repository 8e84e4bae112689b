from django.apps import AppConfig


class CommonConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.common'
    verbose_name = "Common"

    def ready(self):
        from src.common import checks  # noqa: F401
