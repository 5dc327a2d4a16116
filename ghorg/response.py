"""
response.py

Contains the Response class, which carries the pagination metadata
    of an API response.
"""
from urllib.parse import parse_qs, urlparse


def _page_from_url(url):
    """Extract the ``page`` query parameter of ``url``, or 0 if it has none."""
    query = parse_qs(urlparse(url).query)
    try:
        return int(query.get('page', ['0'])[0])
    except ValueError:
        return 0


class Response(object):
    """
    Wraps a ``requests.Response`` and exposes the page numbers found in
    its ``Link`` header.

    A page number of 0 means the corresponding link was absent; in
    particular ``next_page == 0`` marks the last page of a listing.
    """
    def __init__(self, response):
        self.response = response
        self.next_page = 0
        self.prev_page = 0
        self.first_page = 0
        self.last_page = 0
        self._populate_pages()

    def _populate_pages(self):
        # requests already parses the Link header into {rel: {'url': ...}}
        links = self.response.links or {}
        for rel in ('next', 'prev', 'first', 'last'):
            link = links.get(rel)
            if link and link.get('url'):
                setattr(self, rel + '_page', _page_from_url(link['url']))

    @property
    def status_code(self):
        return self.response.status_code

    def __repr__(self):
        return "<{} [{}] next_page={} last_page={}>".format(
            type(self).__name__, self.status_code, self.next_page, self.last_page
        )
