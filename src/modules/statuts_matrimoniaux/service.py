"""Marital statuses service."""

from src.core.endpoints import STATUTS_MATRIMONIAUX, resolve
from src.core.exceptions import NotFoundError
from src.modules.statuts_matrimoniaux.schemas import (
    StatutMatrimonial,
    StatutMatrimonialCreate,
    StatutMatrimonialUpdate,
)
from src.shared.schemas import ActionMessage, ListParams, Page
from src.shared.service import ResourceService


class StatutsMatrimoniauxService(ResourceService):
    resource_name = "statut matrimonial"

    async def list_statuts(self, params: ListParams | None = None) -> Page[StatutMatrimonial]:
        return await self._fetch_page(STATUTS_MATRIMONIAUX["LIST"], StatutMatrimonial, params)

    async def list_all_statuts(self) -> list[StatutMatrimonial]:
        return await self._fetch_items(STATUTS_MATRIMONIAUX["ALL"], StatutMatrimonial)

    async def list_active_statuts(self) -> list[StatutMatrimonial]:
        return await self._fetch_items(STATUTS_MATRIMONIAUX["ACTIFS"], StatutMatrimonial)

    async def get_statut(self, uuid: str) -> StatutMatrimonial:
        return await self._fetch_entity("GET", resolve(STATUTS_MATRIMONIAUX["DETAIL"], uuid=uuid), StatutMatrimonial)

    async def get_default_statut(self) -> StatutMatrimonial:
        statuts = await self.list_active_statuts()
        for statut in sorted(statuts, key=lambda item: item.ordre_affichage):
            if statut.defaut and statut.is_active:
                return statut
        raise NotFoundError("Aucun statut matrimonial par défaut")

    async def create_statut(self, data: StatutMatrimonialCreate) -> StatutMatrimonial:
        return await self._fetch_entity(
            "POST", STATUTS_MATRIMONIAUX["CREATE"], StatutMatrimonial, json=data.to_payload()
        )

    async def update_statut(self, uuid: str, data: StatutMatrimonialUpdate) -> StatutMatrimonial:
        return await self._fetch_entity(
            "PUT", resolve(STATUTS_MATRIMONIAUX["UPDATE"], uuid=uuid), StatutMatrimonial, json=data.to_payload()
        )

    async def delete_statut(self, uuid: str) -> ActionMessage:
        raw = await self._call("DELETE", resolve(STATUTS_MATRIMONIAUX["DELETE"], uuid=uuid))
        return self._parse(ActionMessage, raw if isinstance(raw, dict) else {})
