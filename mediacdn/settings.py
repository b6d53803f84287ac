"""
Django settings for mediacdn project.

Every deploy-specific value is read from the environment so the same
settings module serves local development, tests and production.

For the full list of settings and their values, see
https://docs.djangoproject.com/en/stable/ref/settings/
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-dev-only-key')

DEBUG = env_bool('DJANGO_DEBUG', True)

ALLOWED_HOSTS = [h for h in os.environ.get('DJANGO_ALLOWED_HOSTS', '*').split(',') if h]

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'media_urls',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'mediacdn.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'media_urls.context_processors.media_cdn_settings',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# Local asset root, served at / when the CDN is disabled in development
MEDIA_ROOT = os.environ.get('MEDIA_CDN_LOCAL_ROOT', str(BASE_DIR / 'assets'))

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# CDN provider: 'cloudflare' (default) or 'imgix'
MEDIA_CDN_PROVIDER = os.environ.get('MEDIA_CDN_PROVIDER', 'cloudflare')

# Serve every asset from a local /path instead of the CDN
MEDIA_CDN_DISABLED = env_bool('DISABLE_CDN', False)

# Imgix sources (folder and video fall back to IMGIX_URL)
IMGIX_URL = os.environ.get('IMGIX_URL', '')
IMGIX_FOLDER_URL = os.environ.get('IMGIX_FOLDER_URL', '')
IMGIX_VIDEO_URL = os.environ.get('IMGIX_VIDEO_URL', '')

# Cloudflare zones (folder and video fall back to CLOUDFLARE_CDN_URL)
CLOUDFLARE_CDN_URL = os.environ.get('CLOUDFLARE_CDN_URL', '')
CLOUDFLARE_FOLDER_CDN_URL = os.environ.get('CLOUDFLARE_FOLDER_CDN_URL', '')
CLOUDFLARE_VIDEO_CDN_URL = os.environ.get('CLOUDFLARE_VIDEO_CDN_URL', '')
CLOUDFLARE_CDN_PATH_PREFIX = os.environ.get('CLOUDFLARE_CDN_PATH_PREFIX', 'cdn')
