"""Chat endpoints."""

from datetime import datetime
from typing import TYPE_CHECKING, Optional, Union

from ..envelope import Envelope
from ..responses.chat import ChatMessagesResponse
from ..responses.system import EmptyResponse

if TYPE_CHECKING:
    from ..client import SubsonicClient


class ChatClient:
    def __init__(self, client: "SubsonicClient"):
        self._client = client

    def get_chat_messages(
        self, since: Optional[Union[datetime, int]] = None
    ) -> Envelope[ChatMessagesResponse]:
        """Get chat messages, only those after ``since`` if given (datetime or epoch ms)."""
        return self._client.execute("getChatMessages", ChatMessagesResponse, since=since)

    def add_chat_message(self, message: str) -> Envelope[EmptyResponse]:
        return self._client.execute("addChatMessage", EmptyResponse, message=message)
