"""Products service."""

from src.core.endpoints import PRODUITS, resolve
from src.modules.produits.schemas import Produit, ProduitCreate, ProduitUpdate, StockUpdate
from src.shared.schemas import ListParams, Page
from src.shared.service import ResourceService


class ProduitsService(ResourceService):
    resource_name = "produit"

    async def list_produits(self, params: ListParams | None = None) -> Page[Produit]:
        return await self._fetch_page(PRODUITS["LIST"], Produit, params)

    async def list_published(self, params: ListParams | None = None) -> Page[Produit]:
        return await self._fetch_page(PRODUITS["PUBLISHED"], Produit, params)

    async def list_vendor_produits(self, params: ListParams | None = None) -> Page[Produit]:
        return await self._fetch_page(PRODUITS["VENDEUR"], Produit, params)

    async def get_produit(self, uuid: str) -> Produit:
        return await self._fetch_entity("GET", resolve(PRODUITS["DETAIL"], uuid=uuid), Produit)

    async def get_produit_by_slug(self, slug: str) -> Produit:
        return await self._fetch_entity("GET", resolve(PRODUITS["BY_SLUG"], slug=slug), Produit)

    async def create_produit(self, data: ProduitCreate) -> Produit:
        return await self._fetch_entity("POST", PRODUITS["CREATE"], Produit, json=data.to_payload())

    async def update_produit(self, uuid: str, data: ProduitUpdate) -> Produit:
        return await self._fetch_entity(
            "PUT", resolve(PRODUITS["UPDATE"], uuid=uuid), Produit, json=data.to_payload()
        )

    async def delete_produit(self, uuid: str) -> None:
        await self._call("DELETE", resolve(PRODUITS["DELETE"], uuid=uuid))

    async def block_produit(self, uuid: str) -> Produit:
        return await self._fetch_entity("POST", resolve(PRODUITS["BLOCK"], uuid=uuid), Produit)

    async def unblock_produit(self, uuid: str) -> Produit:
        return await self._fetch_entity("POST", resolve(PRODUITS["UNBLOCK"], uuid=uuid), Produit)

    async def restore_produit(self, uuid: str) -> Produit:
        return await self._fetch_entity("POST", resolve(PRODUITS["RESTORE"], uuid=uuid), Produit)

    async def update_stock(self, uuid: str, data: StockUpdate) -> Produit:
        return await self._fetch_entity(
            "PUT", resolve(PRODUITS["UPDATE_STOCK"], uuid=uuid), Produit, json=data.to_payload()
        )
