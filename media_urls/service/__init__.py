"""
Service layer for media URL building.

This module contains the CDN URL translator and its configuration adapter,
independent of Django models and views. These functions are used by:
- Model mixins and serializers (media_urls/builders.py)
- Template tags (media_urls/templatetags/media_url_tags.py)
- The CLI management commands (management/commands/mediaurl.py, checkcdn.py)
"""
