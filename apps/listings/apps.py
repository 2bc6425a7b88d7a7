from django.apps import AppConfig


class ListingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.listings"

    def ready(self) -> None:  # pragma: no cover - import side effects
        from . import signals  # noqa: F401
