import json

import pytest

from backend.events_service.errors import StorageCorruptionError, StorageError
from backend.events_service.store import JsonEventStore


@pytest.fixture
def store(data_file):
    return JsonEventStore(str(data_file))


def test_missing_file_reads_empty(store):
    assert store.load_all() == []


def test_blank_file_reads_empty(store, data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("  \n", encoding="utf-8")
    assert store.load_all() == []


def test_corrupt_file(store, data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("[{", encoding="utf-8")
    with pytest.raises(StorageCorruptionError):
        store.load_all()


def test_non_array_document_is_corrupt(store, data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text('{"id": "1"}', encoding="utf-8")
    with pytest.raises(StorageCorruptionError):
        store.load_all()


def test_save_creates_directory_and_pretty_prints(store, data_file):
    events = [{"id": "a", "eventName": "Café night", "tags": []}]
    store.save_all(events)

    text = data_file.read_text(encoding="utf-8")
    assert text == json.dumps(events, indent=2, ensure_ascii=False)
    assert store.load_all() == events


def test_save_overwrites_whole_document(store):
    store.save_all([{"id": "a"}, {"id": "b"}])
    store.save_all([{"id": "b"}])
    assert store.load_all() == [{"id": "b"}]


def test_read_io_error(store, mocker):
    mocker.patch(
        "backend.events_service.store.open",
        side_effect=PermissionError("denied"),
        create=True,
    )
    with pytest.raises(StorageError) as exc:
        store.load_all()
    assert not isinstance(exc.value, StorageCorruptionError)


def test_write_io_error(store, mocker):
    mocker.patch("backend.events_service.store.os.makedirs", side_effect=OSError("disk full"))
    with pytest.raises(StorageError) as exc:
        store.save_all([])
    assert exc.value.message == "Failed to write events data."


def test_invalid_utf8_is_corrupt(store, data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_bytes(b"\xff\xfe[]")
    with pytest.raises(StorageCorruptionError):
        store.load_all()


@pytest.mark.parametrize("content", ["[null]", '[{"id": "a"}, 3]', '["a"]'])
def test_non_object_entries_are_corrupt(store, data_file, content):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(content, encoding="utf-8")
    with pytest.raises(StorageCorruptionError):
        store.load_all()
