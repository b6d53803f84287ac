"""Context processors for media_urls app."""

from media_urls.service.config import get_cdn_provider, is_cdn_enabled


def media_cdn_settings(request):
    """Make CDN settings available to all templates."""
    return {
        'cdn_provider': get_cdn_provider(),
        'cdn_enabled': is_cdn_enabled(),
    }
