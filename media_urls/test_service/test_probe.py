"""
Tests for service/probe.py
"""

from unittest.mock import MagicMock, patch

import requests
from django.test import TestCase

from media_urls.service.config import ProviderConfig, ProviderUrls
from media_urls.service.probe import ProbeResult, probe_base_url, probe_config


class ProbeServiceTest(TestCase):
    """Tests for CDN reachability probing"""

    @patch('media_urls.service.probe.requests.head')
    def test_probe_success(self, mock_head):
        """Test a 200 answer is reachable"""
        mock_head.return_value = MagicMock(status_code=200)

        result = probe_base_url('CLOUDFLARE_CDN_URL', 'https://cdn.example.com')

        self.assertTrue(result.reachable)
        self.assertEqual(result.status_code, 200)
        mock_head.assert_called_once_with(
            'https://cdn.example.com', timeout=5, allow_redirects=True
        )

    @patch('media_urls.service.probe.requests.head')
    def test_probe_not_found_is_reachable(self, mock_head):
        """Test a 404 on the zone root still counts as reachable"""
        mock_head.return_value = MagicMock(status_code=404)
        self.assertTrue(probe_base_url('IMGIX_URL', 'https://x.imgix.net').reachable)

    @patch('media_urls.service.probe.requests.head')
    def test_probe_server_error(self, mock_head):
        """Test a 5xx answer is not reachable"""
        mock_head.return_value = MagicMock(status_code=502)
        self.assertFalse(probe_base_url('IMGIX_URL', 'https://x.imgix.net').reachable)

    @patch('media_urls.service.probe.requests.head')
    def test_probe_connection_error(self, mock_head):
        """Test request exceptions are captured, not raised"""
        mock_head.side_effect = requests.ConnectionError('refused')

        result = probe_base_url('CLOUDFLARE_CDN_URL', 'https://cdn.example.com')

        self.assertFalse(result.reachable)
        self.assertIsNone(result.status_code)
        self.assertIn('ConnectionError', result.error)

    @patch('media_urls.service.probe.requests.head')
    def test_probe_config_probes_every_url(self, mock_head):
        """Test every configured URL is probed and logged"""
        mock_head.return_value = MagicMock(status_code=200)
        config = ProviderConfig(
            imgix=ProviderUrls(primary='https://x.imgix.net'),
            cloudflare=ProviderUrls(primary='https://cdn.example.com', folder='https://f.example.com'),
        )
        logs = []

        results = probe_config(config, timeout=2, logger=logs.append)

        self.assertEqual(
            [r.setting_name for r in results],
            ['IMGIX_URL', 'CLOUDFLARE_CDN_URL', 'CLOUDFLARE_FOLDER_CDN_URL'],
        )
        self.assertEqual(mock_head.call_count, 3)
        self.assertEqual(len(logs), 3)

    def test_probe_result_defaults(self):
        """Test ProbeResult without a status is unreachable"""
        result = ProbeResult(setting_name='IMGIX_URL', url='https://x.imgix.net')
        self.assertFalse(result.reachable)
        self.assertIsNone(result.error)
