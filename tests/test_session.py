import pytest
import requests
import responses

from ghorg import session
from ghorg.roles import list_roles
from ghorg.util import GithubException

ROLES_URL = 'https://api.github.com/orgs/acme/organization-roles'


def test_session_is_shared():
    assert session.get_session() is session.get_session()


def test_session_headers():
    headers = session.get_session().headers
    assert headers['Accept'] == 'application/vnd.github+json'
    assert headers['X-GitHub-Api-Version'] == session.API_VERSION
    assert headers['User-Agent'].startswith('ghorg-python/')
    assert 'Authorization' not in headers


def test_token_from_environment(monkeypatch):
    monkeypatch.setenv(session.TOKEN_ENV_VAR, 'envtoken')
    session.clear_session()
    assert session.get_session().headers['Authorization'] == 'Bearer envtoken'


def test_environment_token_wins_over_config(monkeypatch):
    import ghorg
    ghorg.config(token='configtoken')
    monkeypatch.setenv(session.TOKEN_ENV_VAR, 'envtoken')
    session.clear_session()
    assert session.get_session().headers['Authorization'] == 'Bearer envtoken'


def test_default_api_url():
    assert session.get_api_url() == 'https://api.github.com'


@responses.activate
def test_error_message_from_body():
    responses.add(responses.GET, ROLES_URL, json={'message': 'Not Found'}, status=404)

    with pytest.raises(GithubException, match='Not Found') as excinfo:
        list_roles('acme')

    assert excinfo.value.response.status_code == 404


@responses.activate
def test_error_message_without_body():
    responses.add(responses.GET, ROLES_URL, body='oops', status=500)

    with pytest.raises(GithubException, match=r'An HTTP Error \(500\) occurred'):
        list_roles('acme')


@responses.activate
def test_transport_error_propagates():
    responses.add(responses.GET, ROLES_URL, body=requests.exceptions.ConnectionError('connection refused'))

    with pytest.raises(requests.exceptions.ConnectionError):
        list_roles('acme')
