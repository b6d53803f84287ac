"""
Model mixin for building media URLs.

Mix into models or serializers that expose asset paths:

    class Post(MediaUrlBuilderMixin, models.Model):
        def cover_url(self):
            return self.build_media_url(self.cover_path, {'w': 800, 'auto': 'format'})
"""

from media_urls.service.builder import get_translator
from media_urls.service.config import get_cdn_provider
from media_urls.service.constants import KIND_DEFAULT, KIND_FOLDER, KIND_VIDEO


class MediaUrlBuilderMixin:
    """Media URL helpers backed by the published CDN configuration"""

    def cdn_provider(self):
        return get_cdn_provider()

    def build_media_url(self, path, append_params=None):
        return get_translator().build_url(path, KIND_DEFAULT, append_params)

    def build_media_folder_url(self, path, append_params=None):
        return get_translator().build_url(path, KIND_FOLDER, append_params)

    def build_media_video_url(self, path, append_params=None):
        return get_translator().build_url(path, KIND_VIDEO, append_params)

    def fallback_avatar(self, name='', append_params=None):
        return get_translator().fallback_avatar_url(name, append_params)
