import json

import httpx
import pytest

from src.core.exceptions import AuthenticationError, NotFoundError, TransportError
from src.core.http import ApiClient


@pytest.mark.asyncio
async def test_authenticated_request_sends_headers(make_api):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": [{"uuid": "p1"}]})

    api = make_api(handler, token="tok", user_type="vendeur")
    payload = await api.get("/produits", params={"page": "2", "limit": "10"}, requires_auth=True)

    assert payload == {"data": [{"uuid": "p1"}]}
    request = seen[0]
    assert request.url.path == "/produits"
    assert request.url.params["page"] == "2"
    assert request.headers["Authorization"] == "Bearer tok"
    assert request.headers["X-User-Type"] == "vendeur"
    assert request.headers["Accept"] == "application/json"
    assert "no-cache" in request.headers["Cache-Control"]
    assert request.headers["Pragma"] == "no-cache"


@pytest.mark.asyncio
async def test_missing_token_fails_before_sending(make_api):
    def handler(_: httpx.Request) -> httpx.Response:
        raise AssertionError("request should not be sent")

    api = make_api(handler, token="")

    with pytest.raises(AuthenticationError) as excinfo:
        await api.get("/favoris", requires_auth=True)

    assert excinfo.value.status_code is None
    assert "Aucun token" in excinfo.value.detail


@pytest.mark.asyncio
async def test_public_request_without_token(make_api):
    def handler(request: httpx.Request) -> httpx.Response:
        assert "Authorization" not in request.headers
        assert "X-User-Type" not in request.headers
        return httpx.Response(200, json=[{"uuid": "fr"}])

    api = make_api(handler, token="", user_type="admin")

    assert await api.get("/pays/actifs") == [{"uuid": "fr"}]


@pytest.mark.asyncio
async def test_json_body_is_sent(make_api):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "PATCH"
        assert json.loads(request.content) == {"nom": "Togo"}
        return httpx.Response(200, json={"uuid": "tg", "nom": "Togo"})

    api = make_api(handler)

    assert await api.patch("/pays/tg", json={"nom": "Togo"}) == {"uuid": "tg", "nom": "Togo"}


@pytest.mark.asyncio
async def test_no_content_returns_empty_dict(make_api):
    api = make_api(lambda _: httpx.Response(204))

    assert await api.delete("/favoris/f1") == {}


@pytest.mark.asyncio
async def test_invalid_json_on_success_returns_empty_dict(make_api):
    api = make_api(lambda _: httpx.Response(200, text="<html>ok</html>"))

    assert await api.get("/") == {}


@pytest.mark.asyncio
async def test_error_status_is_mapped(make_api):
    api = make_api(lambda _: httpx.Response(404, json={"message": "Favori introuvable"}))

    with pytest.raises(NotFoundError) as excinfo:
        await api.get("/favoris/missing")

    assert excinfo.value.status_code == 404
    assert excinfo.value.detail == "Ressource non trouvée: Favori introuvable"


@pytest.mark.asyncio
async def test_error_with_text_body(make_api):
    api = make_api(lambda _: httpx.Response(500, text="boom"))

    with pytest.raises(TransportError) as excinfo:
        await api.post("/produits/creer", json={})

    assert excinfo.value.detail == "Erreur serveur: boom"
    assert excinfo.value.payload == "boom"


@pytest.mark.asyncio
async def test_network_error_becomes_transport_error(make_api):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    api = make_api(handler)

    with pytest.raises(TransportError) as excinfo:
        await api.get("/roles")

    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_ping(make_api):
    assert await make_api(lambda _: httpx.Response(404)).ping() is True

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timeout", request=request)

    assert await make_api(handler).ping() is False


@pytest.mark.asyncio
async def test_injected_client_is_not_closed():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda _: httpx.Response(200, json={})))
    async with ApiClient(client=client, token="tok"):
        pass

    assert not client.is_closed
    await client.aclose()
