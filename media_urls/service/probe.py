"""CDN reachability probe used by the checkcdn command."""

from dataclasses import dataclass
from typing import Optional

import requests

DEFAULT_TIMEOUT = 5


@dataclass
class ProbeResult:
    """Outcome of probing one CDN base URL."""

    setting_name: str
    url: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def reachable(self) -> bool:
        """Return True if the host answered with anything below a 5xx."""
        return self.status_code is not None and self.status_code < 500


def probe_base_url(setting_name, url, timeout=DEFAULT_TIMEOUT) -> ProbeResult:
    """
    Send a HEAD request to a CDN base URL.

    Any HTTP answer counts as reachable except a server error; a 403 or 404
    on the zone root is normal for buckets without an index.

    Args:
        setting_name: Setting the URL came from (for reporting)
        url: Base URL to probe
        timeout: Request timeout in seconds

    Returns:
        ProbeResult
    """
    try:
        response = requests.head(url, timeout=timeout, allow_redirects=True)
    except requests.RequestException as e:
        return ProbeResult(setting_name=setting_name, url=url, error=f'{e.__class__.__name__}: {e}')

    return ProbeResult(setting_name=setting_name, url=url, status_code=response.status_code)


def probe_config(config, timeout=DEFAULT_TIMEOUT, logger=None):
    """
    Probe every configured base URL of a ProviderConfig.

    Returns:
        list: ProbeResult per configured URL
    """
    results = []
    for name, url in config.configured_urls():
        if logger:
            logger(f'Probing {name}: {url}')
        results.append(probe_base_url(name, url, timeout=timeout))
    return results
