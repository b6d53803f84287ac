from django.apps import AppConfig


class MediaUrlsConfig(AppConfig):
    name = 'media_urls'
    verbose_name = 'Media URLs'

    def ready(self):
        """Register system checks and settings signals when the app is ready"""
        from media_urls import checks, signals  # noqa: F401
