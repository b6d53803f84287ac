"""
URL configuration for mediacdn project.

The media URL translator exposes no views of its own; it only renders URLs
that point at the CDN. When the CDN is disabled those URLs are site-relative
('/static/avatars/A.png'), so in development the local asset root is served
at the site root.
"""

from django.conf import settings
from django.conf.urls.static import static

urlpatterns = []

# Serve local assets in development when the CDN is disabled
if settings.MEDIA_CDN_DISABLED:
    urlpatterns += static('/', document_root=settings.MEDIA_ROOT)
