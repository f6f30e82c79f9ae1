"""Response shapes for chat messages."""

from datetime import datetime
from typing import List, Optional

from ..schema import collection, instant, nested, record


@record
class ChatMessage:
    username: str = ""
    time: Optional[datetime] = instant()
    message: str = ""


@record
class ChatMessages:
    chat_message: List[ChatMessage] = collection(ChatMessage)


@record
class ChatMessagesResponse:
    chat_messages: ChatMessages = nested(ChatMessages)
