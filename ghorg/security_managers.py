"""
security_managers.py

Security manager teams of an organization. Membership is expressed as
    an assignment of the organization's ``security_manager`` role, so every
    operation here first resolves that role.
"""
import logging

from .roles import (assign_role_to_team, list_roles, list_teams_assigned_to_role,
                    remove_role_from_team)
from .util import GithubException

logger = logging.getLogger(__name__)

SECURITY_MANAGER_ROLE = 'security_manager'
TEAMS_PER_PAGE = 100


class RoleNotFound(GithubException):
    pass


def get_security_manager_role(org):
    """
    Finds the ``security_manager`` role of an organization.

    Args:
        org(str): organization name

    Returns:
        dict: the role, including its ``id``

    Raises:
        RoleNotFound: if the organization has no such role
    """
    roles, _ = list_roles(org)

    for role in roles:
        if role.get('name') == SECURITY_MANAGER_ROLE:
            return role

    raise RoleNotFound("security manager role not found", org=org)


def list_security_manager_teams(org):
    """
    Lists all security manager teams of an organization, following
    pagination until the last page.

    Returns:
        tuple: ``(teams, response)`` where ``response`` belongs to the last page fetched
    """
    role = get_security_manager_role(org)

    page = None
    teams = []
    while True:
        page_teams, response = list_teams_assigned_to_role(
            org, role['id'], page=page, per_page=TEAMS_PER_PAGE
        )
        teams.extend(page_teams)
        if not response.next_page:
            logger.debug("Found %d security manager teams in %s", len(teams), org)
            return teams, response

        page = response.next_page


def add_security_manager_team(org, team):
    """
    Adds a team to the security managers of an organization.

    Args:
        org(str): organization name
        team(str): team slug

    Returns:
        Response
    """
    role = get_security_manager_role(org)
    return assign_role_to_team(org, team, role['id'])


def remove_security_manager_team(org, team):
    """
    Removes a team from the security managers of an organization.
    """
    role = get_security_manager_role(org)
    return remove_role_from_team(org, team, role['id'])
