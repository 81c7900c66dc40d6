import json

import httpx
import pytest

from src.core.exceptions import TransportError
from src.modules.roles.schemas import RoleCreate
from src.modules.roles.service import RolesService, validate_role

ROLES = [
    {"uuid": "r1", "name": "Vendeur", "code": "VENDEUR", "status": "actif"},
    {"uuid": "r2", "nom": "admin", "code": "ADMIN", "est_actif": True},
    {"uuid": "r3", "name": "Ancien", "code": "OLD", "status": "inactif"},
    {"uuid": "r4", "name": "Zed", "code": "ZED", "status": "actif", "is_deleted": True},
]


@pytest.mark.asyncio
async def test_active_roles_are_filtered_and_sorted(make_api):
    service = RolesService(make_api(lambda _: httpx.Response(200, json={"data": ROLES, "total": 4})))

    active = await service.list_active_roles()
    options = await service.role_options()

    assert [role.name for role in active] == ["admin", "Vendeur"]
    assert [(option.value, option.label) for option in options] == [("r2", "admin"), ("r1", "Vendeur")]


@pytest.mark.asyncio
async def test_list_errors_propagate(make_api):
    service = RolesService(make_api(lambda _: httpx.Response(503)))

    with pytest.raises(TransportError):
        await service.list_active_roles()


@pytest.mark.asyncio
async def test_toggle_status(make_api):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": {"uuid": "r1", "name": "Vendeur", "est_actif": False}})

    role = await RolesService(make_api(handler)).toggle_role_status("r1", False)

    assert role.is_active is False
    assert (seen[0].method, seen[0].url.path) == ("PUT", "/roles/r1/status")
    assert json.loads(seen[0].content) == {"est_actif": False}


def test_validate_role():
    assert validate_role(RoleCreate(name="  ")) == [
        "Le nom du rôle est obligatoire",
        "Le code du rôle est obligatoire",
    ]
    assert validate_role(RoleCreate(name="Agent", code="AGENT")) == []
