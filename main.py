"""Marketplace API client entrypoint."""

from __future__ import annotations

from typing import Any

from src.core.http import ApiClient
from src.modules.echanges.service import EchangesService
from src.modules.favoris.service import FavorisService
from src.modules.messages.service import MessagesService
from src.modules.pays.service import PaysService
from src.modules.produits.service import ProduitsService
from src.modules.roles.service import RolesService
from src.modules.statuts_matrimoniaux.service import StatutsMatrimoniauxService
from src.modules.users.service import UsersService


class MarketplaceClient:
    """One ``ApiClient`` shared by every resource service."""

    def __init__(self, api: ApiClient) -> None:
        self.api = api
        self.favoris = FavorisService(api)
        self.messages = MessagesService(api)
        self.roles = RolesService(api)
        self.users = UsersService(api)
        self.pays = PaysService(api)
        self.statuts_matrimoniaux = StatutsMatrimoniauxService(api)
        self.produits = ProduitsService(api)
        self.echanges = EchangesService(api)

    async def __aenter__(self) -> "MarketplaceClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.api.aclose()


def create_client(**kwargs: Any) -> MarketplaceClient:
    """Build a client; keyword arguments are passed to ``ApiClient``."""
    return MarketplaceClient(ApiClient(**kwargs))
