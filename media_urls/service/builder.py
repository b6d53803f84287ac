"""
Media URL building.

Turns a relative asset path plus canonical transform parameters into an
absolute URL on the configured CDN. The translator is a pure function of
its ProviderConfig snapshot and arguments: no I/O, no shared mutable state.
"""

import re
from typing import Optional
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from media_urls.service.config import ProviderConfig, get_provider_config
from media_urls.service.constants import (
    FALLBACK_AVATAR_BLANK,
    FALLBACK_AVATAR_COLORS,
    FALLBACK_AVATAR_PATH,
    KIND_AVATAR,
    KIND_DEFAULT,
    MEDIA_KINDS,
    PROVIDER_IMGIX,
)
from media_urls.service.translate import compact_params, translate_params

_PATH_SAFE_CHARS = "/%:@!$&'()*+,;=~"


def local_url(path):
    """Site-relative URL used when the CDN is disabled"""
    return '/' + path.lstrip('/')


def join_url_path(*segments):
    """
    Join URL path segments with single slashes.

    Examples:
        ('/', 'cdn', '/images/a.jpg') -> '/cdn/images/a.jpg'
        ('/zone/', '', 'a//b.jpg') -> '/zone/a/b.jpg'
    """
    joined = '/'.join(segment for segment in segments if segment)
    return re.sub(r'/{2,}', '/', '/' + joined)


def _query_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def merge_query(base_query, params):
    """
    Merge transform params into a base URL's query string.

    The base query is kept verbatim, repeated keys included, and wins on
    key collision. Added params are sorted so the same inputs always
    serialize identically.
    """
    base_keys = {key for key, _ in parse_qsl(base_query, keep_blank_values=True)}
    items = sorted(
        (key, _query_value(value)) for key, value in params.items() if key not in base_keys
    )
    added = urlencode(items, quote_via=quote, safe=',')
    return '&'.join(part for part in (base_query, added) if part)


def avatar_color(name):
    """Pick a palette color from the byte sum of the name"""
    data = (name or '').encode('utf-8')
    return FALLBACK_AVATAR_COLORS[sum(data) % len(FALLBACK_AVATAR_COLORS)]


def avatar_path(name):
    initial = name[0].upper() if name else FALLBACK_AVATAR_BLANK
    return FALLBACK_AVATAR_PATH.format(initial=initial)


class MediaUrlTranslator:
    """
    Build CDN URLs against one ProviderConfig snapshot.

    Args:
        config: ProviderConfig snapshot
        logger: Optional callback for log messages
    """

    def __init__(self, config: ProviderConfig, logger=None):
        self.config = config
        self.logger = logger

    def _log(self, message):
        if self.logger:
            self.logger(message)

    @property
    def provider(self) -> str:
        return self.config.active_provider

    def _url_path(self, base_path, path):
        if self.provider == PROVIDER_IMGIX:
            # Imgix sources map the bucket root onto the host root
            return join_url_path(path)
        return join_url_path(base_path, self.config.cloudflare_path_prefix, path)

    def build_url(self, path, kind=KIND_DEFAULT, params=None) -> str:
        """
        Build an absolute CDN URL for a relative asset path.

        Args:
            path: Asset path relative to the bucket (e.g., 'o/abc/photo.jpg')
            kind: 'default', 'folder', 'video' or 'avatar'
            params: Transform params in the canonical (Imgix) vocabulary

        Returns:
            str: Absolute URL; a local '/path' URL when the CDN is disabled;
                 the path unchanged when no base URL is configured
        """
        if kind not in MEDIA_KINDS:
            raise ValueError(f'Unknown media kind: {kind!r}')

        if not path:
            return path

        if self.config.disabled:
            return local_url(path)

        base_url = self.config.base_url_for(kind)
        if not base_url:
            self._log(
                f'No {self.provider} base URL configured for {kind} media, '
                f'serving {path} without CDN'
            )
            return path

        try:
            base = urlsplit(base_url)
        except ValueError as e:
            self._log(
                f'Unparsable {self.provider} base URL {base_url!r} ({e}), '
                f'serving {path} without CDN'
            )
            return path

        url_path = quote(self._url_path(base.path, path), safe=_PATH_SAFE_CHARS)
        query = merge_query(base.query, translate_params(self.provider, params, logger=self.logger))

        return urlunsplit((base.scheme, base.netloc, url_path, query, ''))

    def fallback_avatar_url(self, name='', params=None, allow_override=False) -> str:
        """
        Build the placeholder avatar URL for a name.

        The tint is derived from the name, so the same name always gets the
        same color. The computed blend-color replaces any caller-supplied one
        unless allow_override is set.

        Args:
            name: Display name (may be empty)
            params: Extra transform params
            allow_override: Let a caller-supplied 'blend-color' win

        Returns:
            str: Avatar URL
        """
        name = name or ''
        color_param = {'blend-color': avatar_color(name)}
        extra = compact_params(params)

        if allow_override:
            merged = {**color_param, **extra}
        else:
            merged = {**extra, **color_param}

        return self.build_url(avatar_path(name), KIND_AVATAR, merged)


def get_translator(config: Optional[ProviderConfig] = None, logger=None) -> MediaUrlTranslator:
    """Translator over the given config, or the published snapshot"""
    return MediaUrlTranslator(config or get_provider_config(), logger=logger)


def build_url(path, kind=KIND_DEFAULT, params=None, logger=None) -> str:
    """Build a CDN URL using the published configuration snapshot"""
    return get_translator(logger=logger).build_url(path, kind, params)


def fallback_avatar_url(name='', params=None, allow_override=False, logger=None) -> str:
    """Build a placeholder avatar URL using the published configuration snapshot"""
    return get_translator(logger=logger).fallback_avatar_url(
        name, params, allow_override=allow_override
    )
