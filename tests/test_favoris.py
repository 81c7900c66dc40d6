import json

import httpx
import pytest

from src.modules.favoris.schemas import CollectionCreate, CollectionUpdate, FavoriCreate
from src.modules.favoris.service import FavorisService
from src.shared.enums import FavoriStatut, Priorite, TypeElement
from src.shared.schemas import ListParams

FILTER_KEYS = ("utilisateur_uuid", "type_element", "element_uuid", "statut")


class FavorisBackend:
    """In-memory stand-in for the favorites endpoints."""

    def __init__(self) -> None:
        self.favoris: dict[str, dict] = {}
        self.calls: list[tuple[str, str]] = []
        self._next = 1

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.method, request.url.path))
        parts = request.url.path.strip("/").split("/")
        if parts == ["favoris"] and request.method == "GET":
            params = request.url.params
            matches = [
                fav
                for fav in self.favoris.values()
                if all(fav.get(key) == params[key] for key in FILTER_KEYS if key in params)
            ]
            return httpx.Response(200, json={"data": matches, "total": len(matches)})
        if parts == ["favoris"] and request.method == "POST":
            uuid = f"fav-{self._next}"
            self._next += 1
            favori = {"uuid": uuid, "statut": "actif", **json.loads(request.content)}
            self.favoris[uuid] = favori
            return httpx.Response(201, json={"status": "success", "data": favori})
        uuid = parts[1]
        if uuid not in self.favoris:
            return httpx.Response(404, json={"message": "Favori introuvable"})
        if request.method == "PUT":
            self.favoris[uuid].update(json.loads(request.content))
            return httpx.Response(200, json={"data": self.favoris[uuid]})
        if request.method == "DELETE":
            del self.favoris[uuid]
            return httpx.Response(200, json={"message": "Favori supprimé"})
        if request.method == "POST" and parts[2:] == ["vues"]:
            self.favoris[uuid]["nombre_vues"] = self.favoris[uuid].get("nombre_vues", 0) + 1
            return httpx.Response(200, json={"data": self.favoris[uuid]})
        return httpx.Response(200, json={"data": self.favoris[uuid]})


def _favori(**overrides) -> FavoriCreate:
    data = {"utilisateur_uuid": "u1", "type_element": TypeElement.PRODUIT, "element_uuid": "p1"}
    data.update(overrides)
    return FavoriCreate(**data)


@pytest.mark.asyncio
async def test_toggle_adds_then_removes(make_api):
    backend = FavorisBackend()
    service = FavorisService(make_api(backend))

    first = await service.toggle_favori(_favori())
    assert first.added is True
    assert first.favori is not None
    assert first.favori.type_element is TypeElement.PRODUIT
    assert len(backend.favoris) == 1

    second = await service.toggle_favori(_favori())
    assert second.added is False
    assert second.favori is None
    assert backend.favoris == {}


@pytest.mark.asyncio
async def test_create_updates_existing_favorite(make_api):
    backend = FavorisBackend()
    service = FavorisService(make_api(backend))

    created = await service.create_favori(_favori(notes_utilisateur="first"))
    updated = await service.create_favori(_favori(notes_utilisateur="second", priorite=Priorite.ELEVEE))

    assert updated.uuid == created.uuid
    assert updated.notes_utilisateur == "second"
    assert updated.priorite is Priorite.ELEVEE
    assert len(backend.favoris) == 1
    assert ("PUT", f"/favoris/{created.uuid}") in backend.calls


@pytest.mark.asyncio
async def test_other_elements_are_separate_favorites(make_api):
    backend = FavorisBackend()
    service = FavorisService(make_api(backend))

    await service.create_favori(_favori())
    await service.create_favori(_favori(element_uuid="p2"))

    assert len(backend.favoris) == 2


@pytest.mark.asyncio
async def test_find_existing_reports_none_on_lookup_failure(make_api):
    service = FavorisService(make_api(lambda _: httpx.Response(500, json={"message": "down"})))

    assert await service.find_existing("u1", TypeElement.PRODUIT, "p1") is None


@pytest.mark.asyncio
async def test_list_by_user_scopes_query(make_api):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"favoris": [], "total": 0})

    service = FavorisService(make_api(handler))
    page = await service.list_by_user("u1", ListParams(page=1, limit=20))

    assert page.items == []
    assert page.total == 0
    params = seen[0].url.params
    assert params["utilisateur_uuid"] == "u1"
    assert params["statut"] == FavoriStatut.ACTIF
    assert params["limit"] == "20"


@pytest.mark.asyncio
async def test_archive_and_increment_views(make_api):
    backend = FavorisBackend()
    service = FavorisService(make_api(backend))
    created = await service.create_favori(_favori())

    archived = await service.archive_favori(created.uuid)
    viewed = await service.increment_views(created.uuid)

    assert archived.statut is FavoriStatut.ARCHIVE
    assert viewed.nombre_vues == 1


@pytest.mark.asyncio
async def test_filtered_favorite_listings(make_api):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        favori = {"uuid": "f1", "utilisateur_uuid": "u1", "type_element": "don", "element_uuid": "d1"}
        return httpx.Response(200, json={"data": [favori]})

    service = FavorisService(make_api(handler))
    by_type = await service.list_by_type("u1", TypeElement.DON)
    await service.list_by_collection("c1", ListParams(page=2))
    recent = await service.list_recent("u1", limit=5)

    assert by_type.items[0].type_element is TypeElement.DON
    assert [favori.uuid for favori in recent] == ["f1"]
    type_query, collection_query, recent_query = (request.url.params for request in seen)
    assert (type_query["utilisateur_uuid"], type_query["type_element"], type_query["statut"]) == ("u1", "don", "actif")
    assert (collection_query["collection_uuid"], collection_query["page"]) == ("c1", "2")
    assert recent_query["sort_by"] == "date_modification"
    assert recent_query["sort_order"] == "desc"
    assert recent_query["limit"] == "5"


@pytest.mark.asyncio
async def test_collection_crud(make_api):
    seen: list[tuple[str, str]] = []
    bodies: list[dict] = []
    collection = {"uuid": "c1", "utilisateur_uuid": "u1", "nom": "Cadeaux", "nombre_favoris": 2}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        if request.content:
            bodies.append(json.loads(request.content))
        if request.method == "GET" and request.url.path == "/favoris/collections":
            assert request.url.params["utilisateur_uuid"] == "u1"
            return httpx.Response(200, json={"status": "success", "data": [collection]})
        if request.method == "DELETE":
            return httpx.Response(204)
        if request.url.path == "/favoris/f1":
            favori = {"uuid": "f1", "utilisateur_uuid": "u1", "type_element": "produit", "element_uuid": "p1"}
            return httpx.Response(200, json={"data": {**favori, "collection_uuid": "c1"}})
        return httpx.Response(200, json={"data": {**collection, **(bodies[-1] if request.method != "GET" else {})}})

    service = FavorisService(make_api(handler))
    collections = await service.list_collections("u1")
    created = await service.create_collection(
        CollectionCreate(utilisateur_uuid="u1", nom="Cadeaux", priorite=Priorite.ELEVEE)
    )
    fetched = await service.get_collection("c1")
    renamed = await service.update_collection("c1", CollectionUpdate(nom="Noël"))
    favori = await service.add_to_collection("f1", "c1")
    await service.delete_collection("c1")

    assert [item.nom for item in collections] == ["Cadeaux"]
    assert created.priorite is Priorite.ELEVEE
    assert fetched.nombre_favoris == 2
    assert renamed.nom == "Noël"
    assert favori.collection_uuid == "c1"
    assert bodies[-1] == {"collection_uuid": "c1"}
    assert seen == [
        ("GET", "/favoris/collections"),
        ("POST", "/favoris/collections"),
        ("GET", "/favoris/collections/c1"),
        ("PUT", "/favoris/collections/c1"),
        ("PUT", "/favoris/f1"),
        ("DELETE", "/favoris/collections/c1"),
    ]
