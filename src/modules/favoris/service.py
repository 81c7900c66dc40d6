"""Favorites service."""

from __future__ import annotations

import logging

from src.core.endpoints import FAVORIS, resolve
from src.core.exceptions import ApiError
from src.modules.favoris.schemas import (
    CollectionCreate,
    CollectionFavoris,
    CollectionUpdate,
    Favori,
    FavoriCreate,
    FavoriUpdate,
    ToggleResult,
)
from src.shared.enums import FavoriStatut, Priorite, SortOrder, TypeElement
from src.shared.schemas import ListParams, Page
from src.shared.service import ResourceService

logger = logging.getLogger(__name__)


class FavorisService(ResourceService):
    """CRUD and toggle operations on a user's favorites.

    ``create_favori`` and ``toggle_favori`` look the favorite up before
    writing. The two steps are not atomic: concurrent calls for the same
    ``(utilisateur_uuid, type_element, element_uuid)`` can create duplicates.
    """

    resource_name = "favori"

    async def list_favoris(self, params: ListParams | None = None) -> Page[Favori]:
        return await self._fetch_page(FAVORIS["LIST"], Favori, params)

    async def list_by_user(self, utilisateur_uuid: str, params: ListParams | None = None) -> Page[Favori]:
        params = params or ListParams()
        scoped = params.model_copy(
            update={"filters": {**params.filters, "utilisateur_uuid": utilisateur_uuid, "statut": FavoriStatut.ACTIF}}
        )
        return await self.list_favoris(scoped)

    async def get_favori(self, uuid: str) -> Favori:
        return await self._fetch_entity("GET", resolve(FAVORIS["DETAIL"], uuid=uuid), Favori)

    async def find_existing(
        self,
        utilisateur_uuid: str,
        type_element: TypeElement | str,
        element_uuid: str,
    ) -> Favori | None:
        """Return the active favorite for this element, or ``None``.

        Lookup failures are logged and reported as "no favorite".
        """
        params = ListParams(
            limit=1,
            filters={
                "utilisateur_uuid": utilisateur_uuid,
                "type_element": str(type_element),
                "element_uuid": element_uuid,
                "statut": FavoriStatut.ACTIF,
            },
        )
        try:
            page = await self.list_favoris(params)
        except ApiError as exc:
            logger.warning("Favorite lookup failed for element %s: %s", element_uuid, exc.detail)
            return None
        return page.items[0] if page.items else None

    async def create_favori(self, data: FavoriCreate) -> Favori:
        existing = await self.find_existing(data.utilisateur_uuid, data.type_element, data.element_uuid)
        if existing is not None:
            logger.info("Favorite %s already exists, updating it", existing.uuid)
            return await self.update_favori(
                existing.uuid,
                FavoriUpdate(
                    notes_utilisateur=data.notes_utilisateur,
                    tags_personnels=data.tags_personnels,
                    collection_uuid=data.collection_uuid,
                    priorite=data.priorite,
                    statut=FavoriStatut.ACTIF,
                ),
            )
        return await self._post_favori(data)

    async def _post_favori(self, data: FavoriCreate) -> Favori:
        return await self._fetch_entity("POST", FAVORIS["CREATE"], Favori, json=data.to_payload())

    async def update_favori(self, uuid: str, data: FavoriUpdate) -> Favori:
        return await self._fetch_entity(
            "PUT", resolve(FAVORIS["UPDATE"], uuid=uuid), Favori, json=data.to_payload()
        )

    async def delete_favori(self, uuid: str) -> None:
        await self._call("DELETE", resolve(FAVORIS["DELETE"], uuid=uuid))

    async def toggle_favori(self, data: FavoriCreate) -> ToggleResult:
        existing = await self.find_existing(data.utilisateur_uuid, data.type_element, data.element_uuid)
        if existing is not None:
            await self.delete_favori(existing.uuid)
            logger.info("Favorite %s removed", existing.uuid)
            return ToggleResult(added=False)
        favori = await self._post_favori(data)
        logger.info("Favorite %s added", favori.uuid)
        return ToggleResult(added=True, favori=favori)

    async def increment_views(self, uuid: str) -> Favori:
        return await self._fetch_entity("POST", resolve(FAVORIS["INCREMENT_VIEWS"], uuid=uuid), Favori)

    async def archive_favori(self, uuid: str) -> Favori:
        return await self.update_favori(uuid, FavoriUpdate(statut=FavoriStatut.ARCHIVE))

    async def restore_favori(self, uuid: str) -> Favori:
        return await self.update_favori(uuid, FavoriUpdate(statut=FavoriStatut.ACTIF))

    async def update_priority(self, uuid: str, priorite: Priorite) -> Favori:
        return await self.update_favori(uuid, FavoriUpdate(priorite=priorite))

    async def list_by_type(
        self,
        utilisateur_uuid: str,
        type_element: TypeElement | str,
        params: ListParams | None = None,
    ) -> Page[Favori]:
        params = params or ListParams()
        scoped = params.model_copy(
            update={
                "filters": {
                    **params.filters,
                    "utilisateur_uuid": utilisateur_uuid,
                    "type_element": str(type_element),
                    "statut": FavoriStatut.ACTIF,
                }
            }
        )
        return await self.list_favoris(scoped)

    async def list_by_collection(self, collection_uuid: str, params: ListParams | None = None) -> Page[Favori]:
        params = params or ListParams()
        scoped = params.model_copy(
            update={"filters": {**params.filters, "collection_uuid": collection_uuid, "statut": FavoriStatut.ACTIF}}
        )
        return await self.list_favoris(scoped)

    async def list_recent(self, utilisateur_uuid: str, limit: int = 10) -> list[Favori]:
        """Most recently modified active favorites, newest first."""
        params = ListParams(
            limit=limit,
            sort_by="date_modification",
            sort_order=SortOrder.DESC,
            filters={"utilisateur_uuid": utilisateur_uuid, "statut": FavoriStatut.ACTIF},
        )
        return (await self.list_favoris(params)).items

    # Collections

    async def list_collections(self, utilisateur_uuid: str) -> list[CollectionFavoris]:
        return await self._fetch_items(
            FAVORIS["COLLECTIONS"], CollectionFavoris, query={"utilisateur_uuid": utilisateur_uuid}
        )

    async def get_collection(self, uuid: str) -> CollectionFavoris:
        return await self._fetch_entity("GET", resolve(FAVORIS["COLLECTION_DETAIL"], uuid=uuid), CollectionFavoris)

    async def create_collection(self, data: CollectionCreate) -> CollectionFavoris:
        collection = await self._fetch_entity(
            "POST", FAVORIS["COLLECTIONS_CREATE"], CollectionFavoris, json=data.to_payload()
        )
        logger.info("Collection %s created for user %s", collection.uuid, data.utilisateur_uuid)
        return collection

    async def update_collection(self, uuid: str, data: CollectionUpdate) -> CollectionFavoris:
        return await self._fetch_entity(
            "PUT", resolve(FAVORIS["COLLECTION_UPDATE"], uuid=uuid), CollectionFavoris, json=data.to_payload()
        )

    async def delete_collection(self, uuid: str) -> None:
        await self._call("DELETE", resolve(FAVORIS["COLLECTION_DELETE"], uuid=uuid))

    async def add_to_collection(self, favori_uuid: str, collection_uuid: str) -> Favori:
        return await self.update_favori(favori_uuid, FavoriUpdate(collection_uuid=collection_uuid))
