"""Messaging service."""

from __future__ import annotations

import logging

from src.core.endpoints import MESSAGERIE, resolve
from src.core.exceptions import AuthenticationError, NotFoundError
from src.modules.messages.schemas import (
    Conversation,
    ConversationThread,
    Message,
    MessageCreate,
    MessageStats,
    MessageUpdate,
    PublicMessageCreate,
    ReplyCreate,
)
from src.shared.normalize import unwrap_data
from src.shared.schemas import ListParams, Page
from src.shared.service import ResourceService

logger = logging.getLogger(__name__)


class MessagesService(ResourceService):
    resource_name = "message"

    async def list_received(self, params: ListParams | None = None) -> Page[Message]:
        return await self._fetch_page(MESSAGERIE["RECEIVED"], Message, params)

    async def list_sent(self, params: ListParams | None = None) -> Page[Message]:
        return await self._fetch_page(MESSAGERIE["SENT"], Message, params)

    async def get_message(self, uuid: str) -> Message:
        return await self._fetch_entity("GET", resolve(MESSAGERIE["DETAIL"], uuid=uuid), Message)

    async def send_message(self, data: MessageCreate) -> Message:
        return await self._fetch_entity("POST", MESSAGERIE["SEND"], Message, json=data.to_payload())

    async def send_public_message(self, data: PublicMessageCreate) -> Message:
        """Send through the public endpoint, falling back to the authenticated one.

        The fallback only applies when the public endpoint answers 401 or 404.
        """
        payload = data.to_payload()
        try:
            return await self._fetch_entity("POST", MESSAGERIE["PUBLIC_SEND"], Message, json=payload)
        except (AuthenticationError, NotFoundError) as exc:
            if exc.status_code is None:
                raise
            logger.warning("Public message endpoint refused (%s), using %s", exc.status_code, MESSAGERIE["SEND"])
        return await self._fetch_entity("POST", MESSAGERIE["SEND"], Message, json=payload)

    async def update_message(self, uuid: str, data: MessageUpdate) -> Message:
        return await self._fetch_entity(
            "PUT", resolve(MESSAGERIE["UPDATE"], uuid=uuid), Message, json=data.to_payload()
        )

    async def delete_message(self, uuid: str) -> None:
        await self._call("DELETE", resolve(MESSAGERIE["DELETE"], uuid=uuid))

    async def mark_as_read(self, uuid: str) -> Message:
        return await self._fetch_entity("PUT", resolve(MESSAGERIE["MARK_READ"], uuid=uuid), Message)

    async def mark_as_unread(self, uuid: str) -> Message:
        return await self._fetch_entity("PUT", resolve(MESSAGERIE["MARK_UNREAD"], uuid=uuid), Message)

    async def archive_message(self, uuid: str) -> Message:
        return await self._fetch_entity("PUT", resolve(MESSAGERIE["ARCHIVE"], uuid=uuid), Message)

    async def reply_to_message(self, parent_uuid: str, data: ReplyCreate) -> Message:
        body = {"parent_uuid": parent_uuid, **data.to_payload()}
        return await self._fetch_entity("POST", MESSAGERIE["REPLY"], Message, json=body)

    async def get_stats(self) -> MessageStats:
        data = await self._fetch_data("GET", MESSAGERIE["STATS"])
        return self._parse(MessageStats, data or {})

    async def list_conversations(self, params: ListParams | None = None) -> Page[Conversation]:
        return await self._fetch_page(MESSAGERIE["CONVERSATIONS"], Conversation, params)

    async def get_conversation(self, uuid: str, params: ListParams | None = None) -> ConversationThread:
        params = params or ListParams()
        raw = await self._call(
            "GET", resolve(MESSAGERIE["CONVERSATION_DETAIL"], uuid=uuid), params=params.to_query()
        )
        data = unwrap_data(raw)
        if not isinstance(data, dict) or not data.get("conversation"):
            raise NotFoundError("Conversation non trouvée", payload=raw)
        thread = self._parse(ConversationThread, data)
        if not thread.total:
            thread.total = len(thread.messages)
        return thread
