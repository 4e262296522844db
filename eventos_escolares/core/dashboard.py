import json
from typing import Optional
from ..adapters.key_value_store import KeyValueStore
from ..adapters.notifier import Notifier
from ..config.settings import config
from ..core.errors import ValidationError
from ..core.event_store import validate_event_input
from ..core.school_event import EventInput
from ..utils.logger import logger


def submit_pending_event(side_channel: KeyValueStore,
                         data: EventInput,
                         notifier: Notifier,
                         key: Optional[str] = None) -> dict:
    """
    Atalho de criação de evento do painel do administrador.

    O painel não tem acesso à lista de eventos: ele grava o evento no canal
    compartilhado e o calendário o consome na próxima ativação. Só existe
    um evento pendente por vez; um novo envio substitui o anterior.
    """
    key = key or config.events.pending_event_key

    try:
        validate_event_input(data)
    except ValidationError as e:
        notifier.error(str(e))
        raise

    payload = {
        'title': data.title.strip(),
        'description': data.description.strip(),
        'date': data.date.strip(),
        'time': data.time.strip(),
        'location': data.location.strip(),
        'type': data.type
    }

    if side_channel.get(key) is not None:
        logger.warning(f"Substituindo evento pendente ainda não consumido ({key})")

    side_channel.set(key, json.dumps(payload, ensure_ascii=False))
    logger.info(f"Evento pendente gravado para o calendário: {payload['title']}")
    notifier.success("Redirecionando para o calendário de eventos...")
    return payload
