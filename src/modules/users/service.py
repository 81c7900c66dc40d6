"""Admin user management service."""

from __future__ import annotations

import logging

from src.core.endpoints import ADMIN_USERS, resolve
from src.modules.users.schemas import User, UserCreate, UserListParams, UserUpdate
from src.shared.schemas import Page
from src.shared.service import ResourceService

logger = logging.getLogger(__name__)


class UsersService(ResourceService):
    resource_name = "utilisateur"

    async def _list(self, url: str, params: UserListParams | None) -> Page[User]:
        params = params or UserListParams()
        page = await self._fetch_page(url, User, params, query=params.to_query())
        logger.debug("Fetched %d users from %s (total=%d)", len(page.items), url, page.total)
        return page

    async def list_users(self, params: UserListParams | None = None) -> Page[User]:
        return await self._list(ADMIN_USERS["LIST"], params)

    async def list_blocked_users(self, params: UserListParams | None = None) -> Page[User]:
        return await self._list(ADMIN_USERS["BLOCKED"], params)

    async def list_deleted_users(self, params: UserListParams | None = None) -> Page[User]:
        return await self._list(ADMIN_USERS["DELETED"], params)

    async def get_user(self, uuid: str) -> User:
        return await self._fetch_entity("GET", resolve(ADMIN_USERS["DETAIL"], uuid=uuid), User)

    async def create_user(self, data: UserCreate) -> User:
        return await self._fetch_entity("POST", ADMIN_USERS["CREATE"], User, json=data.to_payload())

    async def update_user(self, uuid: str, data: UserUpdate) -> User:
        return await self._fetch_entity(
            "PUT", resolve(ADMIN_USERS["UPDATE"], uuid=uuid), User, json=data.to_payload()
        )

    async def delete_user(self, uuid: str) -> None:
        await self._call("DELETE", resolve(ADMIN_USERS["DELETE"], uuid=uuid))

    async def block_user(self, uuid: str) -> User:
        return await self._fetch_entity("POST", resolve(ADMIN_USERS["BLOCK"], uuid=uuid), User)

    async def unblock_user(self, uuid: str) -> User:
        return await self._fetch_entity("POST", resolve(ADMIN_USERS["UNBLOCK"], uuid=uuid), User)

    async def restore_user(self, uuid: str) -> User:
        return await self._fetch_entity("DELETE", resolve(ADMIN_USERS["RESTORE"], uuid=uuid), User)
