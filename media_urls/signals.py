from django.core.signals import setting_changed
from django.dispatch import receiver

from media_urls.service.config import CDN_SETTING_NAMES, reload_provider_config


@receiver(setting_changed)
def reload_cdn_config(sender, setting, **kwargs):
    """
    Publish a new ProviderConfig snapshot when a CDN setting changes.
    This keeps override_settings and runtime reconfiguration in sync.
    """
    if setting in CDN_SETTING_NAMES:
        reload_provider_config()
