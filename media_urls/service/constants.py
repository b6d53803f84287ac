"""
Media URL constants.

Centralized definitions of providers, media kinds and the parameter
vocabularies used when translating transforms between CDN dialects.
"""

# Supported CDN providers
PROVIDER_IMGIX = 'imgix'
PROVIDER_CLOUDFLARE = 'cloudflare'

PROVIDERS = [PROVIDER_IMGIX, PROVIDER_CLOUDFLARE]

DEFAULT_PROVIDER = PROVIDER_CLOUDFLARE

# Media kinds (select which base URL applies)
KIND_DEFAULT = 'default'
KIND_FOLDER = 'folder'
KIND_VIDEO = 'video'
KIND_AVATAR = 'avatar'

MEDIA_KINDS = [KIND_DEFAULT, KIND_FOLDER, KIND_VIDEO, KIND_AVATAR]

# Cloudflare serves transformed media under this path on the CDN zone
DEFAULT_CLOUDFLARE_PATH_PREFIX = 'cdn'

# Canonical (Imgix) key -> Cloudflare key
CLOUDFLARE_PARAM_NAMES = {
    'w': 'width',
    'h': 'height',
    'q': 'quality',
    'fm': 'format',
    'bg': 'background',
    'bri': 'brightness',
    'con': 'contrast',
    'gam': 'gamma',
    'sharp': 'sharpen',
    'rot': 'rotate',
    'crop': 'gravity',
}

# Anchors both providers understand
CLOUDFLARE_SIDE_GRAVITY = ['top', 'bottom', 'left', 'right', 'center']

CLOUDFLARE_DEFAULT_GRAVITY = 'auto'

# Placeholder avatar tints (tailwind palette)
FALLBACK_AVATAR_COLORS = [
    '3b82f6',  # blue.500
    '4ade80',  # green.400
    'fde047',  # yellow.300
    'ef4444',  # red.500
    '9333ea',  # purple.300
    'ec4899',  # pink.500
    '6366f1',  # indigo.500
    '5eead4',  # teal.300
]

FALLBACK_AVATAR_PATH = 'static/avatars/{initial}.png'

FALLBACK_AVATAR_BLANK = 'blank'
