"""Countries service."""

from src.core.endpoints import PAYS, resolve
from src.modules.pays.schemas import Pays, PaysCreate, PaysUpdate
from src.shared.schemas import ActionMessage, ListParams, Page
from src.shared.service import ResourceService


class PaysService(ResourceService):
    resource_name = "pays"

    async def list_pays(self, params: ListParams | None = None) -> Page[Pays]:
        return await self._fetch_page(PAYS["LIST"], Pays, params)

    async def list_active_pays(self) -> list[Pays]:
        return await self._fetch_items(PAYS["ACTIFS"], Pays)

    async def get_pays(self, uuid: str) -> Pays:
        return await self._fetch_entity("GET", resolve(PAYS["DETAIL"], uuid=uuid), Pays)

    async def get_pays_by_code(self, code: str) -> Pays:
        return await self._fetch_entity("GET", resolve(PAYS["BY_CODE"], code=code.upper()), Pays)

    async def get_pays_by_nom(self, nom: str) -> Pays:
        return await self._fetch_entity("GET", resolve(PAYS["BY_NOM"], nom=nom), Pays)

    async def create_pays(self, data: PaysCreate) -> Pays:
        return await self._fetch_entity("POST", PAYS["CREATE"], Pays, json=data.to_payload())

    async def update_pays(self, uuid: str, data: PaysUpdate) -> Pays:
        return await self._fetch_entity("PUT", resolve(PAYS["UPDATE"], uuid=uuid), Pays, json=data.to_payload())

    async def update_indicatif(self, uuid: str, indicatif: str) -> Pays:
        url = resolve(PAYS["UPDATE_INDICATIF"], uuid=uuid, indicatif=indicatif)
        return await self._fetch_entity("PUT", url, Pays)

    async def toggle_pays_status(self, uuid: str) -> Pays:
        return await self._fetch_entity("PUT", resolve(PAYS["TOGGLE_STATUS"], uuid=uuid), Pays)

    async def delete_pays(self, uuid: str) -> ActionMessage:
        raw = await self._call("DELETE", resolve(PAYS["DELETE"], uuid=uuid))
        return self._parse(ActionMessage, raw if isinstance(raw, dict) else {})
