"""
roles.py

Organization role endpoints: listing roles and assigning them
    to teams and users.
"""
import logging

from .response import Response
from .session import get_api_url, get_session
from .util import validate_name

logger = logging.getLogger(__name__)


def _roles_url(org, *parts):
    validate_name(org)
    path = '/'.join(str(part) for part in parts)
    url = "{url}/orgs/{org}/organization-roles".format(url=get_api_url(), org=org)
    return url + '/' + path if path else url


def _page_params(page, per_page):
    params = {}
    if page:
        params['page'] = page
    if per_page:
        params['per_page'] = per_page
    return params


def list_roles(org):
    """
    Lists the roles available in an organization.

    Args:
        org(str): organization name

    Returns:
        tuple: ``(roles, response)``, where ``roles`` is a list of role dicts
        (each with at least ``id`` and ``name``)
    """
    session = get_session()
    response = session.get(_roles_url(org))
    logger.debug("Listed roles of %s", org)
    return response.json().get('roles') or [], Response(response)


def get_role(org, role_id):
    """
    Gets a single organization role.

    Returns:
        tuple: ``(role, response)``
    """
    session = get_session()
    response = session.get(_roles_url(org, role_id))
    return response.json(), Response(response)


def list_teams_assigned_to_role(org, role_id, page=None, per_page=None):
    """
    Lists one page of the teams that are assigned to an organization role.

    Args:
        org(str): organization name
        role_id(int): id of the role
        page(int): page number to fetch; omitted from the request when unset
        per_page(int): page size; omitted from the request when unset

    Returns:
        tuple: ``(teams, response)``; ``response.next_page`` is 0 on the last page
    """
    session = get_session()
    response = session.get(_roles_url(org, role_id, 'teams'), params=_page_params(page, per_page))
    logger.debug("Fetched page %s of teams with role %s in %s", page or 1, role_id, org)
    return response.json(), Response(response)


def list_users_assigned_to_role(org, role_id, page=None, per_page=None):
    """
    Lists one page of the users that are assigned to an organization role.

    Same paging behaviour as `list_teams_assigned_to_role`.
    """
    session = get_session()
    response = session.get(_roles_url(org, role_id, 'users'), params=_page_params(page, per_page))
    logger.debug("Fetched page %s of users with role %s in %s", page or 1, role_id, org)
    return response.json(), Response(response)


def assign_role_to_team(org, team, role_id):
    """
    Assigns an organization role to a team.

    Args:
        org(str): organization name
        team(str): team slug
        role_id(int): id of the role

    Returns:
        Response
    """
    validate_name(team, 'team')
    session = get_session()
    response = session.put(_roles_url(org, 'teams', team, role_id))
    logger.debug("Assigned role %s to team %s in %s", role_id, team, org)
    return Response(response)


def remove_role_from_team(org, team, role_id):
    """Removes an organization role from a team."""
    validate_name(team, 'team')
    session = get_session()
    response = session.delete(_roles_url(org, 'teams', team, role_id))
    logger.debug("Removed role %s from team %s in %s", role_id, team, org)
    return Response(response)


def assign_role_to_user(org, user, role_id):
    validate_name(user, 'user')
    session = get_session()
    response = session.put(_roles_url(org, 'users', user, role_id))
    logger.debug("Assigned role %s to user %s in %s", role_id, user, org)
    return Response(response)


def remove_role_from_user(org, user, role_id):
    validate_name(user, 'user')
    session = get_session()
    response = session.delete(_roles_url(org, 'users', user, role_id))
    logger.debug("Removed role %s from user %s in %s", role_id, user, org)
    return Response(response)
