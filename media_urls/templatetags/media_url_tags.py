from django import template

from media_urls.service.builder import build_url, fallback_avatar_url
from media_urls.service.constants import KIND_DEFAULT, KIND_FOLDER, KIND_VIDEO

register = template.Library()


@register.simple_tag
def media_url(path, **params):
    """
    Build a CDN URL for an asset path.

    Examples:
        {% media_url post.cover_path w=640 auto="format" %}
        {% media_url path as cover %}
    """
    return build_url(path, KIND_DEFAULT, params)


@register.simple_tag
def media_folder_url(path, **params):
    return build_url(path, KIND_FOLDER, params)


@register.simple_tag
def media_video_url(path, **params):
    return build_url(path, KIND_VIDEO, params)


@register.simple_tag
def fallback_avatar(name, **params):
    """
    Placeholder avatar tinted by name.

    Examples:
        {% fallback_avatar user.display_name w=64 h=64 %}
    """
    return fallback_avatar_url(name, params)
