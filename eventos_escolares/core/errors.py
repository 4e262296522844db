from typing import List


class EventStoreError(Exception):
    """Erro base do calendário de eventos."""


class ValidationError(EventStoreError):
    """Campos obrigatórios ausentes ou inválidos ao criar/atualizar um evento."""

    def __init__(self, message: str, fields: List[str]):
        super().__init__(message)
        self.fields = fields


class NotFoundError(EventStoreError):
    """Nenhum evento com o id informado."""

    def __init__(self, event_id: str):
        super().__init__(f"Evento não encontrado: {event_id}")
        self.event_id = event_id


class MalformedPendingPayload(EventStoreError):
    """Conteúdo do canal compartilhado não representa um evento."""

    def __init__(self, message: str, payload: str):
        super().__init__(message)
        self.payload = payload
