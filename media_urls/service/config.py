"""
Configuration adapter for CDN provider settings.

Centralizes access to Django settings so the URL builder only ever sees an
immutable ProviderConfig snapshot. Reloading publishes a new snapshot instead
of mutating the current one, so a request never observes a half-updated
configuration.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urlsplit

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from media_urls.service.constants import (
    DEFAULT_CLOUDFLARE_PATH_PREFIX,
    DEFAULT_PROVIDER,
    KIND_DEFAULT,
    KIND_FOLDER,
    KIND_VIDEO,
    PROVIDER_IMGIX,
    PROVIDERS,
)

# Settings that feed the snapshot; a change to any of them triggers a reload
CDN_SETTING_NAMES = [
    'MEDIA_CDN_PROVIDER',
    'MEDIA_CDN_DISABLED',
    'IMGIX_URL',
    'IMGIX_FOLDER_URL',
    'IMGIX_VIDEO_URL',
    'CLOUDFLARE_CDN_URL',
    'CLOUDFLARE_FOLDER_CDN_URL',
    'CLOUDFLARE_VIDEO_CDN_URL',
    'CLOUDFLARE_CDN_PATH_PREFIX',
]


class UnparsableBaseURL(ImproperlyConfigured):
    """Raised when a configured CDN base URL is not an absolute http(s) URL"""

    def __init__(self, setting_name: str, value: str):
        self.setting_name = setting_name
        self.value = value
        super().__init__(f'{setting_name} is not a valid absolute URL: {value!r}')


@dataclass(frozen=True)
class ProviderUrls:
    """Base URLs of one provider; folder and video fall back to primary"""

    primary: Optional[str] = None
    folder: Optional[str] = None
    video: Optional[str] = None

    def for_kind(self, kind: str) -> Optional[str]:
        if kind == KIND_FOLDER and self.folder:
            return self.folder
        if kind == KIND_VIDEO and self.video:
            return self.video
        return self.primary or None


@dataclass(frozen=True)
class ProviderConfig:
    """Snapshot of the CDN configuration, read-only for the life of a request"""

    provider: Optional[str] = DEFAULT_PROVIDER
    imgix: ProviderUrls = field(default_factory=ProviderUrls)
    cloudflare: ProviderUrls = field(default_factory=ProviderUrls)
    cloudflare_path_prefix: str = DEFAULT_CLOUDFLARE_PATH_PREFIX
    disabled: bool = False

    @property
    def active_provider(self) -> str:
        """Provider actually used; unset or unknown values mean Cloudflare."""
        provider = (self.provider or '').strip().lower()
        if provider in PROVIDERS:
            return provider
        return DEFAULT_PROVIDER

    def urls_for(self, provider: str) -> ProviderUrls:
        if provider == PROVIDER_IMGIX:
            return self.imgix
        return self.cloudflare

    def base_url_for(self, kind: str) -> Optional[str]:
        return self.urls_for(self.active_provider).for_kind(kind)

    def configured_urls(self):
        """
        List every configured base URL with the setting it came from.

        Returns:
            list: (setting_name, url) tuples, in settings order
        """
        pairs = [
            ('IMGIX_URL', self.imgix.primary),
            ('IMGIX_FOLDER_URL', self.imgix.folder),
            ('IMGIX_VIDEO_URL', self.imgix.video),
            ('CLOUDFLARE_CDN_URL', self.cloudflare.primary),
            ('CLOUDFLARE_FOLDER_CDN_URL', self.cloudflare.folder),
            ('CLOUDFLARE_VIDEO_CDN_URL', self.cloudflare.video),
        ]
        return [(name, url) for name, url in pairs if url]

    def validate(self):
        """Raise UnparsableBaseURL for the first invalid base URL."""
        for name, url in self.configured_urls():
            if not is_absolute_http_url(url):
                raise UnparsableBaseURL(name, url)


def is_absolute_http_url(value) -> bool:
    try:
        parts = urlsplit(value)
    except (AttributeError, TypeError, ValueError):
        return False
    return parts.scheme in ('http', 'https') and bool(parts.hostname)


def validate_provider_config(config: ProviderConfig) -> List[str]:
    """
    Collect configuration problems without raising.

    Args:
        config: ProviderConfig snapshot to inspect

    Returns:
        list: Human-readable descriptions of invalid base URLs
    """
    problems = []
    for name, url in config.configured_urls():
        if not is_absolute_http_url(url):
            problems.append(f'{name} is not a valid absolute URL: {url!r}')
    return problems


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


def _setting(name, default=None):
    value = getattr(settings, name, default)
    if isinstance(value, str):
        value = value.strip()
    return value or default


def _path_prefix():
    # An empty prefix is meaningful: the zone serves the bucket at its root
    value = getattr(settings, 'CLOUDFLARE_CDN_PATH_PREFIX', None)
    if value is None:
        return DEFAULT_CLOUDFLARE_PATH_PREFIX
    return value.strip().strip('/')


def load_provider_config() -> ProviderConfig:
    """Build a fresh ProviderConfig from Django settings."""
    return ProviderConfig(
        provider=_setting('MEDIA_CDN_PROVIDER'),
        imgix=ProviderUrls(
            primary=_setting('IMGIX_URL'),
            folder=_setting('IMGIX_FOLDER_URL'),
            video=_setting('IMGIX_VIDEO_URL'),
        ),
        cloudflare=ProviderUrls(
            primary=_setting('CLOUDFLARE_CDN_URL'),
            folder=_setting('CLOUDFLARE_FOLDER_CDN_URL'),
            video=_setting('CLOUDFLARE_VIDEO_CDN_URL'),
        ),
        cloudflare_path_prefix=_path_prefix(),
        disabled=_as_bool(getattr(settings, 'MEDIA_CDN_DISABLED', False)),
    )


_snapshot = None


def get_provider_config() -> ProviderConfig:
    """Get the published configuration snapshot, loading it on first use"""
    if _snapshot is None:
        return reload_provider_config()
    return _snapshot


def reload_provider_config() -> ProviderConfig:
    """Load settings into a new snapshot and publish it"""
    global _snapshot
    _snapshot = load_provider_config()
    return _snapshot


def get_cdn_provider() -> str:
    """Get the active provider name ('imgix' or 'cloudflare')"""
    return get_provider_config().active_provider


def is_cdn_enabled() -> bool:
    config = get_provider_config()
    return not config.disabled and bool(config.base_url_for(KIND_DEFAULT))
