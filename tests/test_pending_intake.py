import json
import pytest
from eventos_escolares.config.settings import EventsConfig
from eventos_escolares.core.event_store import EventListStore

PENDING_KEY = "pendingEvent"


def _payload(**overrides):
    payload = {
        "title": "Math Olympiad",
        "description": " Regional round ",
        "date": "2024-12-10",
        "time": "08:30",
        "location": "Room 12",
        "type": "exam"
    }
    payload.update(overrides)
    return json.dumps(payload)


def test_initialize_ingests_well_formed_payload(store, side_channel, notifier):
    """Um evento pendente válido vira um registro e a chave some do canal."""
    side_channel.set(PENDING_KEY, _payload())

    store.initialize()

    assert len(store) == 4
    assert PENDING_KEY not in side_channel
    event = store.list_sorted_by_date()[0]
    assert event.title == "Math Olympiad"
    assert event.description == "Regional round"
    assert event.type == "exam"
    assert event.attendees == ["students", "teachers"]
    assert notifier.successes == ["Evento criado a partir do painel"]


@pytest.mark.parametrize("raw", [
    "{not json",
    "",
    "[1, 2, 3]",
    json.dumps({"title": "No date"}),
    json.dumps({"title": "Bad type", "date": "2024-12-10", "time": "08:00", "type": "party"}),
    json.dumps({"title": "Bad date", "date": "someday", "time": "08:00"}),
])
def test_initialize_discards_malformed_payload(store, side_channel, notifier, log_messages, raw):
    side_channel.set(PENDING_KEY, raw)

    store.initialize()

    assert len(store) == 3
    assert PENDING_KEY not in side_channel
    assert notifier.messages == []
    assert any(message.startswith("Erro ao processar evento pendente") for message in log_messages)


def test_pending_payload_skips_required_field_check(empty_store, side_channel):
    """O evento vindo do painel não passa pela checagem de campos em branco."""
    side_channel.set(PENDING_KEY, _payload(title="   ", location=""))

    event = empty_store.ingest_pending()

    assert event is not None
    assert event.title == ""
    assert len(empty_store) == 1


def test_initialize_without_pending_payload(store, side_channel):
    store.initialize()

    assert len(store) == 3
    assert side_channel.get(PENDING_KEY) is None


def test_initialize_runs_only_once(store, side_channel):
    side_channel.set(PENDING_KEY, _payload())
    store.initialize()

    side_channel.set(PENDING_KEY, _payload(title="Second"))
    store.initialize()

    assert len(store) == 4
    assert side_channel.get(PENDING_KEY) is not None


def test_initialize_uses_configured_key(side_channel, notifier):
    settings = EventsConfig(pending_event_key="dashboardEvent")
    store = EventListStore(side_channel, notifier=notifier, settings=settings)
    side_channel.set(PENDING_KEY, _payload())
    side_channel.set("dashboardEvent", _payload(title="From custom key"))

    store.initialize()

    assert [event.title for event in store] == ["From custom key"]
    assert "dashboardEvent" not in side_channel
    assert PENDING_KEY in side_channel
