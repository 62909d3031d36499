from abc import ABC, abstractmethod


class CompletionGateway(ABC):
    @abstractmethod
    def complete(self, system_instruction: str, user_content: str) -> str:
        """Return the assistant text for one system + user exchange"""
        pass
