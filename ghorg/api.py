from urllib.parse import urlparse

from .session import clear_session
from .util import (GithubConfig, GithubException, CONFIG_PATH, DEFAULT_API_URL,
                   load_config, validate_url, write_yaml)


def _enterprise_api_url(server_url):
    """Map a server URL to the REST API root of that server."""
    if server_url[:7] not in ('http://', 'https:/'):
        server_url = 'https://' + server_url
    validate_url(server_url)

    parsed = urlparse(server_url)
    if parsed.hostname in ('github.com', 'api.github.com'):
        return DEFAULT_API_URL

    base = server_url.rstrip('/')
    if not base.endswith('/api/v3'):
        base += '/api/v3'
    return base


def config(*autoconfig_url, **config_values):
    """Set or read the ghorg configuration.

    To retrieve the current config, call directly, without arguments:

        >>> import ghorg
        >>> ghorg.config()

    To configure for a GitHub Enterprise Server, call with just the server URL:

        >>> ghorg.config('https://github.example.com')

    To set config values, call with one or more key=value pairs:

        >>> ghorg.config(api_url='https://github.example.com/api/v3',
        ...              token='...')

    Args:
        autoconfig_url: A (single) server URL to configure the API URL from
        **config_values: `key=value` pairs to set in the config

    Returns:
        GithubConfig: (an ordered Mapping)
    """
    if autoconfig_url and config_values:
        raise GithubException("Expected either an auto-config URL or key=value pairs, but got both.")
    if autoconfig_url and len(autoconfig_url) > 1:
        raise GithubException("Expected a single autoconfig URL argument, not multiple args.")

    local_config = load_config()

    if autoconfig_url:
        config_values = {'api_url': _enterprise_api_url(autoconfig_url[0])}

    if config_values:
        for key, value in config_values.items():
            if value and key.endswith('_url'):
                validate_url(value)
            local_config[key] = value
        write_yaml(local_config, CONFIG_PATH, keep_backup=True)
        # new URL or token: the next request must build a fresh session
        clear_session()

    return GithubConfig(CONFIG_PATH, local_config)
