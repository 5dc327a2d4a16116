from .api import config

from .security_managers import (
    RoleNotFound,
    get_security_manager_role,
    list_security_manager_teams,
    add_security_manager_team,
    remove_security_manager_team
)

from .response import Response

from .util import GithubException, VERSION as __version__

from . import admin
