from collections import OrderedDict
import datetime
import json
import os
import pathlib
import re
from urllib.parse import urlparse

# Third-Party
import ruamel.yaml
from appdirs import user_data_dir


APP_NAME = "ghorg"
APP_AUTHOR = "ghorg"
BASE_DIR = user_data_dir(APP_NAME, APP_AUTHOR)
BASE_PATH = pathlib.Path(BASE_DIR)
CONFIG_PATH = BASE_PATH / 'config.yml'

VERSION = "0.1.0"

DEFAULT_API_URL = 'https://api.github.com'

# org names, team slugs and user logins all end up as a single path segment,
# so nothing that would end the segment or start a query or fragment
NAME_FORMAT = r"[^/\s#?%]+"

## CONFIG_TEMPLATE
# Must contain every permitted config key, as well as their default values (which can be 'null'/None).
# Comments are retained and added to local config.
CONFIG_TEMPLATE = """
# ghorg configuration file

# api_url: <url string, default: https://api.github.com>
#
# Base URL of the REST API. For GitHub Enterprise Server use
# https://<hostname>/api/v3 (or run `ghorg.config('<hostname>')`).
api_url: https://api.github.com

# token: <string, default: null>
#
# Token sent as a bearer credential. The GITHUB_TOKEN environment
# variable takes precedence.
token:
"""


class GithubException(Exception):
    def __init__(self, message, **kwargs):
        # This `super` call must have only one argument (the message) or str(error) will be a repr of args
        super(GithubException, self).__init__(message)
        self.message = message
        for k, v in kwargs.items():
            setattr(self, k, v)


def read_yaml(yaml_stream):
    yaml = ruamel.yaml.YAML()
    try:
        return yaml.load(yaml_stream)
    except ruamel.yaml.parser.ParserError as error:
        raise GithubException(str(error), original_error=error)


def write_yaml(data, yaml_path, keep_backup=False):
    """Write `data` to `yaml_path`

    :param data: Any yaml-serializable data
    :param yaml_path: Destination. Can be a string or pathlib path.
    :param keep_backup: If set, a timestamped backup will be kept in the same dir.
    """
    yaml = ruamel.yaml.YAML()
    path = pathlib.Path(yaml_path)
    now = str(datetime.datetime.now())

    # colons are not allowed in NTFS file names
    if os.name == 'nt':
        now = now.replace(':', '_')

    backup_path = path.with_name(path.name + '.backup.' + now)

    try:
        if path.exists():
            path.rename(backup_path)
        if not path.parent.exists():
            path.parent.mkdir(parents=True)
        with path.open('w') as config_file:
            yaml.dump(data, config_file)
    except Exception:     #! intentionally wide catch -- reraised immediately.
        if backup_path.exists():
            if path.exists():
                path.unlink()
            backup_path.rename(path)
        raise

    if backup_path.exists() and not keep_backup:
        backup_path.unlink()


def load_config():
    """Return the local config, or the template defaults if none was written yet."""
    if CONFIG_PATH.exists():
        local_config = read_yaml(CONFIG_PATH)
        # an empty file loads as None
        if local_config is not None:
            return local_config
    return read_yaml(CONFIG_TEMPLATE)


def get_from_config(key):
    return load_config().get(key)


def validate_url(url):
    """A URL must have scheme and host, at minimum."""
    parsed_url = urlparse(url)

    # require scheme and host at minimum, like 'http://foo'
    if not all((parsed_url.scheme, parsed_url.netloc)):
        raise GithubException("Invalid URL -- Requires at least scheme and host: {}".format(url))
    try:
        parsed_url.port
    except ValueError:
        raise GithubException("Invalid URL -- Port must be a number: {}".format(url))


def validate_name(name, kind='organization'):
    """Verify that `name` can be used as a single URL path segment."""
    if not isinstance(name, str) or not re.fullmatch(NAME_FORMAT, name):
        raise GithubException("Invalid {} name: {!r}".format(kind, name))


class GithubConfig(OrderedDict):
    def __init__(self, filepath, *args, **kwargs):
        self.filepath = pathlib.Path(filepath)
        super(GithubConfig, self).__init__(*args, **kwargs)

    def __repr__(self):
        shown = OrderedDict(self)
        if shown.get('token'):
            shown['token'] = '***'
        return "<{} at {!r} {}>".format(type(self).__name__, str(self.filepath), json.dumps(shown, indent=4))
