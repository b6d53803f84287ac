"""
System checks for CDN configuration.

Invalid base URLs are reported as errors so `manage.py check`, `runserver`
and `migrate` refuse to start instead of serving broken media URLs.
A missing base URL only degrades to relative paths, so it is a warning.
"""

from django.core.checks import Error, Tags, Warning, register

from media_urls.service.config import (
    is_absolute_http_url,
    load_provider_config,
)
from media_urls.service.constants import KIND_DEFAULT, PROVIDERS


@register(Tags.compatibility)
def check_cdn_configuration(app_configs, **kwargs):
    config = load_provider_config()
    messages = []

    for name, url in config.configured_urls():
        if not is_absolute_http_url(url):
            messages.append(
                Error(
                    f'{name} is not a valid absolute URL: {url!r}',
                    hint='Use a full http(s) URL such as https://cdn.example.com',
                    id='media_urls.E001',
                )
            )

    if config.provider and config.provider.strip().lower() not in PROVIDERS:
        messages.append(
            Warning(
                f'Unknown MEDIA_CDN_PROVIDER {config.provider!r}, using {config.active_provider}',
                hint=f'Set MEDIA_CDN_PROVIDER to one of: {", ".join(PROVIDERS)}',
                id='media_urls.W001',
            )
        )

    if not config.disabled and not config.base_url_for(KIND_DEFAULT):
        messages.append(
            Warning(
                f'No base URL configured for CDN provider {config.active_provider}',
                hint='Media URLs will be returned as relative paths',
                id='media_urls.W002',
            )
        )

    return messages
