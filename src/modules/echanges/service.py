"""Exchanges service."""

from typing import Any

from src.core.endpoints import ECHANGES, resolve
from src.modules.echanges.schemas import Echange, EchangeCreate, EchangeUpdate
from src.shared.schemas import ListParams, Page
from src.shared.service import ResourceService


class EchangesService(ResourceService):
    resource_name = "échange"

    async def list_echanges(self, params: ListParams | None = None) -> Page[Echange]:
        return await self._fetch_page(ECHANGES["LIST"], Echange, params)

    async def list_published(self, params: ListParams | None = None) -> Page[Echange]:
        return await self._fetch_page(ECHANGES["PUBLISHED"], Echange, params)

    async def list_by_status(self, statut: str) -> list[Echange]:
        return await self._fetch_items(resolve(ECHANGES["BY_STATUS"], statut=statut), Echange)

    async def get_echange(self, uuid: str) -> Echange:
        return await self._fetch_entity("GET", resolve(ECHANGES["DETAIL"], uuid=uuid), Echange)

    async def create_echange(self, data: EchangeCreate) -> Echange:
        return await self._fetch_entity("POST", ECHANGES["CREATE"], Echange, json=data.to_payload())

    async def update_echange(self, uuid: str, data: EchangeUpdate) -> Echange:
        return await self._fetch_entity(
            "PUT", resolve(ECHANGES["UPDATE"], uuid=uuid), Echange, json=data.to_payload()
        )

    async def delete_echange(self, uuid: str) -> None:
        await self._call("DELETE", resolve(ECHANGES["DELETE"], uuid=uuid))

    async def accept_echange(self, uuid: str, participant_uuid: str) -> Echange:
        return await self._fetch_entity(
            "POST",
            resolve(ECHANGES["ACCEPT"], uuid=uuid),
            Echange,
            json={"participant_uuid": participant_uuid},
        )

    async def refuse_echange(self, uuid: str, motif: str | None = None) -> Echange:
        body: dict[str, Any] = {} if motif is None else {"motif": motif}
        return await self._fetch_entity("POST", resolve(ECHANGES["REFUSE"], uuid=uuid), Echange, json=body)
