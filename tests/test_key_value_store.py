import json
from eventos_escolares.adapters.key_value_store import InMemoryKeyValueStore, JsonFileKeyValueStore
from eventos_escolares.core.event_store import EventListStore


def test_in_memory_store_get_set_delete():
    kv = InMemoryKeyValueStore({"a": "1"})

    kv.set("b", "2")
    kv.delete("a")
    kv.delete("missing")

    assert kv.get("a") is None
    assert kv.get("b") == "2"


def test_json_file_store_persists_between_instances(tmp_path):
    """Duas instâncias sobre o mesmo arquivo enxergam as mesmas chaves."""
    path = str(tmp_path / "local_storage.json")

    JsonFileKeyValueStore(path).set("pendingEvent", '{"title": "x"}')

    other = JsonFileKeyValueStore(path)
    assert other.get("pendingEvent") == '{"title": "x"}'

    other.delete("pendingEvent")
    assert JsonFileKeyValueStore(path).get("pendingEvent") is None
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {}


def test_json_file_store_returns_objects_as_json_text(tmp_path):
    """Um objeto gravado direto no arquivo volta como texto JSON, não como repr."""
    path = tmp_path / "local_storage.json"
    pending = {"title": "Math Exam", "date": "2024-12-10", "time": "08:00", "type": "exam"}
    path.write_text(json.dumps({"pendingEvent": pending, "count": 3}), encoding="utf-8")

    kv = JsonFileKeyValueStore(str(path))

    assert json.loads(kv.get("pendingEvent")) == pending
    assert kv.get("count") == "3"


def test_json_file_store_object_value_is_ingested(tmp_path, notifier):
    path = tmp_path / "local_storage.json"
    pending = {"title": "Math Exam", "date": "2024-12-10", "time": "08:00", "type": "exam"}
    path.write_text(json.dumps({"pendingEvent": pending}), encoding="utf-8")
    kv = JsonFileKeyValueStore(str(path))
    store = EventListStore(kv, notifier=notifier)

    store.initialize()

    assert [event.title for event in store] == ["Math Exam"]
    assert kv.get("pendingEvent") is None


def test_json_file_store_missing_file_is_empty(tmp_path):
    kv = JsonFileKeyValueStore(str(tmp_path / "absent.json"))

    assert kv.get("pendingEvent") is None
    kv.delete("pendingEvent")
    assert not (tmp_path / "absent.json").exists()


def test_json_file_store_unreadable_file_is_empty(tmp_path, log_messages):
    path = tmp_path / "broken.json"
    path.write_text("{broken", encoding="utf-8")

    kv = JsonFileKeyValueStore(str(path))

    assert kv.get("pendingEvent") is None
    assert any("Erro ao carregar o canal compartilhado" in message for message in log_messages)

    kv.set("pendingEvent", "value")
    assert kv.get("pendingEvent") == "value"
