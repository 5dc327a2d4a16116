"""Provides organization-admin functions."""

from .roles import (
    list_roles,
    get_role,
    list_teams_assigned_to_role,
    list_users_assigned_to_role,
    assign_role_to_team,
    remove_role_from_team,
    assign_role_to_user,
    remove_role_from_user
)

from .security_managers import (
    get_security_manager_role,
    list_security_manager_teams,
    add_security_manager_team,
    remove_security_manager_team
)
