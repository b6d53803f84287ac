"""
Transform parameter translation.

Parameters are always written in the canonical (Imgix) vocabulary. Imgix
takes them as-is; Cloudflare Image Resizing needs renamed keys and a few
value rewrites.
"""

import math

from media_urls.service.constants import (
    CLOUDFLARE_DEFAULT_GRAVITY,
    CLOUDFLARE_PARAM_NAMES,
    CLOUDFLARE_SIDE_GRAVITY,
    PROVIDER_IMGIX,
)

# Precedence when several input keys land on the same Cloudflare key
_PRIORITY_DERIVED = 0
_PRIORITY_ALIAS = 1
_PRIORITY_NATIVE = 2


def compact_params(params):
    """Drop None values and normalize keys to strings"""
    if not params:
        return {}
    return {str(key): value for key, value in params.items() if value is not None}


def cloudflare_gravity(crop):
    """
    Map an Imgix crop mode to a Cloudflare gravity.

    Examples:
        'faces' -> 'auto'
        'top' -> 'top'
        'focalpoint' -> 'auto'
    """
    value = str(crop).strip().lower()
    if value in CLOUDFLARE_SIDE_GRAVITY:
        return value
    # faces, entropy, edges and anything unrecognized
    return CLOUDFLARE_DEFAULT_GRAVITY


def _to_number(value):
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # inf and nan parse as floats but cannot become pixel counts
    if not math.isfinite(number):
        return None
    return number


def _scaled_pixels(value, dpr):
    # Whole pixels, rounded half-up; None when the product overflows
    scaled = value * dpr + 0.5
    if not math.isfinite(scaled):
        return None
    return int(scaled)


def apply_dpr(params, logger=None):
    """
    Fold a device-pixel-ratio into width/height and drop the dpr key.

    Runs on already-translated Cloudflare params, so it only looks at
    'width' and 'height'. Non-numeric dimensions are left untouched.

    Args:
        params: Cloudflare parameter dict (not modified)
        logger: Optional callback for log messages

    Returns:
        dict: New parameter dict without 'dpr'
    """
    if 'dpr' not in params:
        return dict(params)

    result = {key: value for key, value in params.items() if key != 'dpr'}
    dpr = _to_number(params['dpr'])
    if dpr is None or dpr <= 0:
        if logger:
            logger(f'Ignoring invalid dpr value: {params["dpr"]!r}')
        return result

    for key in ('width', 'height'):
        if key not in result:
            continue
        number = _to_number(result[key])
        if number is None:
            if logger:
                logger(f'Not scaling non-numeric {key}: {result[key]!r}')
            continue
        scaled = _scaled_pixels(number, dpr)
        if scaled is None:
            if logger:
                logger(f'Not scaling out-of-range {key}: {result[key]!r}')
            continue
        result[key] = scaled

    return result


def _translate_cloudflare_key(key, value):
    """
    Translate one canonical parameter.

    Returns:
        tuple: (cloudflare_key, value, priority), or None to drop the key
    """
    if key == 'auto':
        if 'format' in str(value):
            return 'format', 'auto', _PRIORITY_DERIVED
        return None

    if key == 'crop':
        return 'gravity', cloudflare_gravity(value), _PRIORITY_ALIAS

    if key in CLOUDFLARE_PARAM_NAMES:
        return CLOUDFLARE_PARAM_NAMES[key], value, _PRIORITY_ALIAS

    # Already-native keys (width, quality, gravity, anim, trim, ...) and
    # anything unknown pass through untouched
    return key, value, _PRIORITY_NATIVE


def translate_cloudflare_params(params, logger=None):
    """
    Translate canonical parameters into Cloudflare's dialect.

    Args:
        params: Mapping of canonical parameters
        logger: Optional callback for log messages

    Returns:
        dict: Cloudflare parameters, with dpr already applied

    Example:
        >>> translate_cloudflare_params({'w': 100, 'h': 50, 'dpr': 2, 'crop': 'faces'})
        {'width': 200, 'height': 100, 'gravity': 'auto'}
    """
    translated = {}
    priorities = {}

    for key, value in compact_params(params).items():
        entry = _translate_cloudflare_key(key, value)
        if entry is None:
            continue
        target, target_value, priority = entry
        if target in priorities and priorities[target] >= priority:
            continue
        translated[target] = target_value
        priorities[target] = priority

    # dpr must see the renamed width/height, so it runs last
    return apply_dpr(translated, logger=logger)


def translate_params(provider, params, logger=None):
    """
    Translate canonical parameters for the given provider.

    Args:
        provider: 'imgix' or 'cloudflare'
        params: Mapping of canonical parameters
        logger: Optional callback for log messages

    Returns:
        dict: Parameters in the provider's dialect
    """
    if provider == PROVIDER_IMGIX:
        return compact_params(params)
    return translate_cloudflare_params(params, logger=logger)
