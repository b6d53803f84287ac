from django.template import Context, Template
from django.test import RequestFactory, TestCase, override_settings

from media_urls.context_processors import media_cdn_settings
from media_urls.templatetags.media_url_tags import (
    fallback_avatar,
    media_folder_url,
    media_url,
    media_video_url,
)


@override_settings(
    MEDIA_CDN_PROVIDER='cloudflare',
    MEDIA_CDN_DISABLED=False,
    CLOUDFLARE_CDN_URL='https://cdn.example.com',
    CLOUDFLARE_FOLDER_CDN_URL='https://folder.example.com',
    CLOUDFLARE_VIDEO_CDN_URL='',
    CLOUDFLARE_CDN_PATH_PREFIX='cdn',
)
class MediaUrlTagsTest(TestCase):
    def render(self, source, **context):
        return Template('{% load media_url_tags %}' + source).render(Context(context))

    def test_media_url_tag(self):
        """Test media_url renders a translated CDN URL"""
        html = self.render('{% media_url path w=640 %}', path='posts/cover.jpg')
        self.assertEqual(html, 'https://cdn.example.com/cdn/posts/cover.jpg?width=640')

    def test_media_url_as_variable(self):
        """Test the tag result can be stored with 'as'"""
        html = self.render('{% media_url path as cover %}<img src="{{ cover }}">', path='a.jpg')
        self.assertEqual(html, '<img src="https://cdn.example.com/cdn/a.jpg">')

    def test_ampersands_are_escaped_in_html(self):
        """Test multi-param URLs are autoescaped for HTML attributes"""
        html = self.render('{% media_url path w=10 h=20 %}', path='a.jpg')
        self.assertEqual(html, 'https://cdn.example.com/cdn/a.jpg?height=20&amp;width=10')

    def test_fallback_avatar_tag(self):
        """Test fallback_avatar renders the tinted placeholder"""
        html = self.render('{% fallback_avatar name %}', name='Alice')
        self.assertEqual(
            html, 'https://cdn.example.com/cdn/static/avatars/A.png?blend-color=6366f1'
        )

    def test_tag_functions(self):
        """Test the tag callables directly"""
        self.assertEqual(media_url('a.jpg'), 'https://cdn.example.com/cdn/a.jpg')
        self.assertEqual(media_folder_url('f/a.jpg'), 'https://folder.example.com/cdn/f/a.jpg')
        self.assertEqual(media_video_url('v/a.mp4'), 'https://cdn.example.com/cdn/v/a.mp4')
        self.assertIn('avatars/blank.png', fallback_avatar(''))


class ContextProcessorTest(TestCase):
    @override_settings(MEDIA_CDN_PROVIDER='imgix', IMGIX_URL='https://x.imgix.net', MEDIA_CDN_DISABLED=False)
    def test_enabled(self):
        """Test provider and enabled flag are exposed"""
        request = RequestFactory().get('/')
        self.assertEqual(
            media_cdn_settings(request), {'cdn_provider': 'imgix', 'cdn_enabled': True}
        )

    @override_settings(MEDIA_CDN_PROVIDER='cloudflare', CLOUDFLARE_CDN_URL='https://cdn.example.com', MEDIA_CDN_DISABLED=True)
    def test_disabled(self):
        """Test a disabled CDN is reported as not enabled"""
        request = RequestFactory().get('/')
        self.assertFalse(media_cdn_settings(request)['cdn_enabled'])
