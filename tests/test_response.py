import requests

from ghorg import Response


def _raw_response(link=None, status=200):
    raw = requests.Response()
    raw.status_code = status
    if link is not None:
        raw.headers['Link'] = link
    return raw


def test_pages_from_link_header():
    link = ('<https://api.github.com/orgs/acme/organization-roles/2/teams?per_page=100&page=3>; rel="next", '
            '<https://api.github.com/orgs/acme/organization-roles/2/teams?per_page=100&page=5>; rel="last", '
            '<https://api.github.com/orgs/acme/organization-roles/2/teams?per_page=100&page=1>; rel="first", '
            '<https://api.github.com/orgs/acme/organization-roles/2/teams?per_page=100&page=1>; rel="prev"')
    response = Response(_raw_response(link))

    assert response.next_page == 3
    assert response.last_page == 5
    assert response.first_page == 1
    assert response.prev_page == 1
    assert response.status_code == 200


def test_no_link_header():
    response = Response(_raw_response(status=204))

    assert response.next_page == 0
    assert response.prev_page == 0
    assert response.first_page == 0
    assert response.last_page == 0
    assert response.status_code == 204


def test_link_without_page_number():
    link = '<https://api.github.com/orgs/acme/teams?after=abc>; rel="next"'
    response = Response(_raw_response(link))

    assert response.next_page == 0
