"""
Django management command to check CDN configuration.

Verifies that:
1. Every configured base URL is an absolute http(s) URL
2. The active provider has a base URL for each media kind
3. (with --probe) Every configured base URL answers over HTTP

Usage:
    ./manage.py checkcdn
    ./manage.py checkcdn --probe
"""
from django.core.management.base import BaseCommand, CommandError

from media_urls.service.config import load_provider_config, validate_provider_config
from media_urls.service.constants import MEDIA_KINDS, PROVIDERS
from media_urls.service.probe import DEFAULT_TIMEOUT, probe_config


class Command(BaseCommand):
    help = 'Check CDN provider configuration and reachability'
    # Reports configuration errors itself instead of failing the system checks
    requires_system_checks = []

    def add_arguments(self, parser):
        parser.add_argument(
            '--probe',
            action='store_true',
            help='Send a HEAD request to every configured base URL'
        )
        parser.add_argument(
            '--timeout',
            type=float,
            default=DEFAULT_TIMEOUT,
            help=f'Probe timeout in seconds (default: {DEFAULT_TIMEOUT})'
        )

    def handle(self, *args, **options):
        config = load_provider_config()

        self.stdout.write('\n=== CDN Configuration ===\n')
        self.stdout.write(f'MEDIA_CDN_PROVIDER: {config.provider or "(unset)"}')
        self.stdout.write(f'Active provider: {config.active_provider}')
        self.stdout.write(f'MEDIA_CDN_DISABLED: {config.disabled}')
        self.stdout.write(f'CLOUDFLARE_CDN_PATH_PREFIX: {config.cloudflare_path_prefix}')

        configured = config.configured_urls()
        if configured:
            for name, url in configured:
                self.stdout.write(f'{name}: {url}')
        else:
            self.stdout.write(self.style.WARNING('No CDN base URLs configured'))

        if config.provider and config.provider.strip().lower() not in PROVIDERS:
            self.stdout.write(self.style.WARNING(
                f'\n⚠ Unknown provider {config.provider!r}, falling back to {config.active_provider}'
            ))

        self.stdout.write('\n=== Base URL per media kind ===\n')
        if config.disabled:
            self.stdout.write(self.style.WARNING('CDN disabled: media is served from local paths'))
        else:
            for kind in MEDIA_KINDS:
                base_url = config.base_url_for(kind)
                if base_url:
                    self.stdout.write(f'  - {kind}: {base_url}')
                else:
                    self.stdout.write(self.style.WARNING(f'  - {kind}: (none, relative paths)'))

        problems = validate_provider_config(config)
        if problems:
            for problem in problems:
                self.stdout.write(self.style.ERROR(f'\n✗ {problem}'))
        else:
            self.stdout.write(self.style.SUCCESS('\n✓ All configured base URLs are valid.'))

        if options['probe']:
            self.stdout.write('\n=== Reachability ===\n')
            results = probe_config(config, timeout=options['timeout'], logger=self.stdout.write)
            for result in results:
                if result.reachable:
                    self.stdout.write(self.style.SUCCESS(
                        f'  {result.setting_name}: HTTP {result.status_code}'
                    ))
                elif result.error:
                    self.stdout.write(self.style.ERROR(f'  {result.setting_name}: {result.error}'))
                else:
                    self.stdout.write(self.style.ERROR(
                        f'  {result.setting_name}: HTTP {result.status_code}'
                    ))

        self.stdout.write('')

        if problems:
            raise CommandError(f'{len(problems)} invalid CDN base URL(s)')
