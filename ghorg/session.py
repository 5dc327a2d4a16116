"""
Helper functions for connecting to the REST API.
"""
import logging
import os

import requests

from .util import DEFAULT_API_URL, VERSION, GithubException, get_from_config

logger = logging.getLogger(__name__)

API_VERSION = '2022-11-28'
TOKEN_ENV_VAR = 'GITHUB_TOKEN'

_session = None


def _error_message(response):
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict) and data.get('message'):
        return data['message']

    return "An HTTP Error ({code}) occurred: {reason}".format(
        code=response.status_code, reason=response.reason
    )


def _check_response(response, *args, **kwargs):
    if not response.ok:
        message = _error_message(response)
        logger.debug("%s %s failed: %s", response.request.method, response.url, message)
        raise GithubException(message, response=response)


def _get_token():
    return os.environ.get(TOKEN_ENV_VAR) or get_from_config('token')


def _create_session():
    session = requests.Session()
    session.hooks.update(
        response=_check_response
    )
    session.headers.update({
        'Accept': 'application/vnd.github+json',
        'X-GitHub-Api-Version': API_VERSION,
        'User-Agent': 'ghorg-python/%s' % VERSION,
    })

    token = _get_token()
    if token:
        session.headers['Authorization'] = 'Bearer %s' % token

    return session


def get_session():
    """
    Creates a session or returns an existing session.
    """
    global _session
    if _session is None:
        _session = _create_session()
    return _session


def clear_session():
    global _session
    if _session is not None:
        _session.close()
        _session = None


def get_api_url():
    url = get_from_config('api_url') or DEFAULT_API_URL
    return url.rstrip('/')
