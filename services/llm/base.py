from abc import ABC, abstractmethod
from typing import Sequence

from schemas.chat import ChatTurn


class ChatClient(ABC):
    @abstractmethod
    async def chat(self, message: str, history: Sequence[ChatTurn]) -> str: ...
