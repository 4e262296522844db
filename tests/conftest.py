import os
import tempfile
import pytest

# Logs dos testes vão para um arquivo temporário, não para o diretório do projeto
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "eventos_escolares_test.log"))

from eventos_escolares.adapters.key_value_store import InMemoryKeyValueStore
from eventos_escolares.adapters.notifier import RecordingNotifier
from eventos_escolares.core.event_store import EventListStore
from eventos_escolares.core.mock_data import mock_events
from eventos_escolares.core.school_event import EventInput
from eventos_escolares.utils.logger import logger


@pytest.fixture()
def side_channel():
    return InMemoryKeyValueStore()


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def store(side_channel, notifier):
    """Calendário com os três eventos de exemplo."""
    return EventListStore(side_channel, notifier=notifier, seed=mock_events())


@pytest.fixture()
def empty_store(side_channel, notifier):
    return EventListStore(side_channel, notifier=notifier)


@pytest.fixture()
def valid_input():
    return EventInput(
        title="  Science Fair  ",
        description=" Projects from all grades ",
        date="2024-12-18",
        time="10:00",
        location=" Gym ",
        type="cultural"
    )


@pytest.fixture()
def log_messages():
    """Captura as mensagens enviadas ao loguru durante o teste."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
