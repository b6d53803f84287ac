"""
Django management command for building media URLs.

This is a thin CLI wrapper around the media URL translator.

Usage:
    ./manage.py mediaurl images/photo.jpg --param w=200 --param dpr=2
    ./manage.py mediaurl videos/clip.mp4 --kind video --provider imgix
    ./manage.py mediaurl --avatar "Alice" --param w=64
"""
import dataclasses
import json

from django.core.management.base import BaseCommand, CommandError

from media_urls.service.builder import MediaUrlTranslator
from media_urls.service.config import get_provider_config
from media_urls.service.constants import KIND_AVATAR, KIND_DEFAULT, MEDIA_KINDS, PROVIDERS


def parse_param(value):
    """
    Parse a single 'key=value' CLI parameter.

    Examples:
        'w=200' -> ('w', '200')
        'auto=compress,format' -> ('auto', 'compress,format')
    """
    key, sep, param_value = value.partition('=')
    key = key.strip()
    if not sep or not key:
        raise CommandError(f'Invalid --param {value!r}, expected key=value')
    return key, param_value


class Command(BaseCommand):
    help = 'Build a CDN URL for an asset path or a fallback avatar'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            nargs='?',
            type=str,
            help='Asset path relative to the bucket'
        )
        parser.add_argument(
            '--kind',
            type=str,
            default=KIND_DEFAULT,
            choices=MEDIA_KINDS,
            help='Media kind selecting the base URL (default: default)'
        )
        parser.add_argument(
            '--param',
            action='append',
            default=[],
            metavar='KEY=VALUE',
            help='Transform parameter in Imgix vocabulary (repeatable)'
        )
        parser.add_argument(
            '--provider',
            type=str,
            choices=PROVIDERS,
            help='Override the configured provider'
        )
        parser.add_argument(
            '--avatar',
            type=str,
            metavar='NAME',
            help='Build the fallback avatar URL for NAME instead of a path'
        )
        parser.add_argument(
            '--verbose',
            action='store_true',
            help='Enable verbose output'
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Output result as JSON'
        )

    def handle(self, *args, **options):
        path = options['path']
        avatar_name = options['avatar']
        kind = options['kind']
        verbose = options['verbose']
        output_json = options['json']

        if path is None and avatar_name is None:
            raise CommandError('Provide an asset path or --avatar NAME')

        params = dict(parse_param(value) for value in options['param'])

        config = get_provider_config()
        if options['provider']:
            config = dataclasses.replace(config, provider=options['provider'])

        logger = self.stdout.write if verbose and not output_json else None
        translator = MediaUrlTranslator(config, logger=logger)

        if avatar_name is not None:
            kind = KIND_AVATAR
            url = translator.fallback_avatar_url(avatar_name, params)
        else:
            url = translator.build_url(path, kind, params)

        if output_json:
            result = {
                'url': url,
                'provider': translator.provider,
                'kind': kind,
                'path': path,
                'avatar': avatar_name,
                'params': params,
            }
            self.stdout.write(json.dumps(result, indent=2))
            return

        if verbose:
            self.stdout.write(f'Provider: {translator.provider}')
            self.stdout.write(f'Kind: {kind}')
        self.stdout.write(url)
