"""Roles service."""

from __future__ import annotations

import logging

from src.core.endpoints import ROLES, resolve
from src.modules.roles.schemas import Role, RoleCreate, RoleOption, RoleUpdate
from src.shared.schemas import ListParams, Page
from src.shared.service import ResourceService

logger = logging.getLogger(__name__)


def validate_role(data: RoleCreate) -> list[str]:
    """Return the form errors for a role, empty when it can be submitted."""
    errors: list[str] = []
    if not data.name or not data.name.strip():
        errors.append("Le nom du rôle est obligatoire")
    if not data.code or not data.code.strip():
        errors.append("Le code du rôle est obligatoire")
    return errors


class RolesService(ResourceService):
    resource_name = "role"

    async def list_roles(self, params: ListParams | None = None) -> Page[Role]:
        return await self._fetch_page(ROLES["LIST"], Role, params)

    async def list_active_roles(self) -> list[Role]:
        page = await self.list_roles()
        active = [role for role in page.items if role.is_active]
        logger.debug("%d of %d roles are active", len(active), len(page.items))
        return sorted(active, key=lambda role: role.name.casefold())

    async def role_options(self) -> list[RoleOption]:
        return [RoleOption(value=role.uuid, label=role.name, data=role) for role in await self.list_active_roles()]

    async def get_role(self, uuid: str) -> Role:
        return await self._fetch_entity("GET", resolve(ROLES["DETAIL"], uuid=uuid), Role)

    async def create_role(self, data: RoleCreate) -> Role:
        return await self._fetch_entity("POST", ROLES["CREATE"], Role, json=data.to_payload())

    async def update_role(self, uuid: str, data: RoleUpdate) -> Role:
        return await self._fetch_entity("PUT", resolve(ROLES["UPDATE"], uuid=uuid), Role, json=data.to_payload())

    async def delete_role(self, uuid: str) -> None:
        await self._call("DELETE", resolve(ROLES["DELETE"], uuid=uuid))

    async def toggle_role_status(self, uuid: str, actif: bool) -> Role:
        logger.info("%s role %s", "Activating" if actif else "Deactivating", uuid)
        return await self._fetch_entity("PUT", resolve(ROLES["STATUS"], uuid=uuid), Role, json={"est_actif": actif})
