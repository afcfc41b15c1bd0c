import json

import pytest

from smarterz.progress import InMemoryProgressStore, JsonFileProgressStore


@pytest.fixture(params=["file", "memory"])
def store(request, tmp_path):
    if request.param == "file":
        return JsonFileProgressStore(str(tmp_path / "cache.json"))
    return InMemoryProgressStore()


def test_mark_done_twice_keeps_one_copy(store):
    store.mark_done("L1")
    store.mark_done("L1")
    assert store.read() == ["L1"]


def test_mark_undone_unknown_id_is_noop(store):
    store.mark_done("L1")
    store.mark_undone("N9")
    assert store.read() == ["L1"]


def test_done_then_undone_restores_prior_set(store):
    store.mark_done("A")
    store.mark_done("B")
    before = set(store.read())

    store.mark_done("C")
    store.mark_undone("C")

    assert set(store.read()) == before


def test_toggle_flips_membership(store):
    assert store.toggle("L1") is True
    assert store.read() == ["L1"]
    assert store.toggle("L1") is False
    assert store.read() == []


def test_ensure_creates_empty_file(tmp_path):
    path = tmp_path / "cache.json"
    JsonFileProgressStore(str(path)).ensure()
    assert json.loads(path.read_text()) == {"completed": []}


def test_ensure_leaves_existing_file(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text(json.dumps({"completed": ["X"]}))
    JsonFileProgressStore(str(path)).ensure()
    assert json.loads(path.read_text()) == {"completed": ["X"]}


def test_file_is_rewritten_in_full(tmp_path):
    path = tmp_path / "cache.json"
    store = JsonFileProgressStore(str(path))
    store.mark_done("L1")
    store.mark_done("N1")
    assert json.loads(path.read_text()) == {"completed": ["L1", "N1"]}


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"completed": "L1"}', '{"other": []}', ""])
def test_corrupt_file_reads_as_empty(tmp_path, content):
    path = tmp_path / "cache.json"
    path.write_text(content)
    store = JsonFileProgressStore(str(path))

    assert store.read() == []
    store.mark_done("L1")
    assert json.loads(path.read_text()) == {"completed": ["L1"]}


def test_missing_file_reads_as_empty(tmp_path):
    assert JsonFileProgressStore(str(tmp_path / "nope.json")).read() == []


def test_duplicates_on_disk_are_loaded_as_is(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text(json.dumps({"completed": ["L1", "L1", "N1"]}))
    store = JsonFileProgressStore(str(path))

    assert store.read() == ["L1", "L1", "N1"]
    store.mark_undone("L1")
    assert store.read() == ["N1"]
