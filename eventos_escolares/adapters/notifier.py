from abc import ABC, abstractmethod
from typing import List, Tuple
from ..utils.logger import logger


class Notifier(ABC):
    """Destino das mensagens mostradas ao usuário (sucesso ou erro)."""

    @abstractmethod
    def success(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...


class LoggerNotifier(Notifier):
    """Envia as notificações para o logger."""

    def success(self, message: str) -> None:
        logger.success(message)

    def error(self, message: str) -> None:
        logger.error(message)


class RecordingNotifier(Notifier):
    """Guarda as notificações em ordem, como pares (nível, mensagem)."""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    @property
    def errors(self) -> List[str]:
        return [message for level, message in self.messages if level == "error"]

    @property
    def successes(self) -> List[str]:
        return [message for level, message in self.messages if level == "success"]


def console_confirm(question: str) -> bool:
    """Pergunta no terminal e só confirma com 's' ou 'y'."""
    answer = input(f"{question} [s/N] ")
    return answer.strip().lower() in ("s", "sim", "y", "yes")


def always_confirm(question: str) -> bool:
    return True
