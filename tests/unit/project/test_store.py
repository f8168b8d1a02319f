"""Tests for the JSON file project store."""

import json

import pytest

from dossier.core.modules.project.models import ProjectCreate, ProjectUpdate
from dossier.core.modules.project.store import JsonFileProjectStore
from dossier.errors import NotFoundError, StorageError


def _record(record_id: str, created_at: int, **fields) -> dict:
    return {"id": record_id, "title": record_id, "type": "certificate", "createdAt": created_at, **fields}


def _write_json(path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "data" / "projects.json"


@pytest.fixture
def seed_path(tmp_path):
    return tmp_path / "public" / "assets" / "projects.json"


@pytest.fixture
def store(data_path, seed_path):
    return JsonFileProjectStore(data_path, [seed_path])


def _created_at(items) -> list[int]:
    return [item.created_at for item in items]


class TestList:
    @pytest.mark.asyncio
    async def test_nothing_readable_returns_empty(self, store):
        assert await store.list() == []

    @pytest.mark.asyncio
    async def test_primary_file_sorted_newest_first(self, store, data_path):
        _write_json(data_path, [_record("a", 1), _record("c", 3), _record("b", 2)])
        assert [item.id for item in await store.list()] == ["c", "b", "a"]

    @pytest.mark.asyncio
    async def test_items_wrapper_accepted(self, store, data_path):
        _write_json(data_path, {"items": [_record("a", 1)]})
        assert [item.id for item in await store.list()] == ["a"]

    @pytest.mark.asyncio
    async def test_missing_fields_get_defaults(self, store, data_path):
        _write_json(data_path, [{"id": "a"}])
        (item,) = await store.list()
        assert item.type == "pdf"
        assert item.created_at == 0

    @pytest.mark.asyncio
    async def test_fallback_used_when_primary_missing(self, store, seed_path):
        _write_json(seed_path, [_record("seed", 1)])
        assert [item.id for item in await store.list()] == ["seed"]

    @pytest.mark.asyncio
    async def test_primary_preferred_over_fallback(self, store, data_path, seed_path):
        _write_json(data_path, [_record("primary", 1)])
        _write_json(seed_path, [_record("seed", 1)])
        assert [item.id for item in await store.list()] == ["primary"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["{not json", '{"other": []}', '"text"', '[{"title": "no id"}]'])
    async def test_unparseable_primary_falls_through(self, store, data_path, seed_path, content):
        data_path.parent.mkdir(parents=True)
        data_path.write_text(content, encoding="utf-8")
        _write_json(seed_path, [_record("seed", 1)])
        assert [item.id for item in await store.list()] == ["seed"]

    @pytest.mark.asyncio
    async def test_unparseable_everywhere_returns_empty(self, store, data_path, seed_path):
        _write_json(data_path, {"nope": 1})
        seed_path.parent.mkdir(parents=True)
        seed_path.write_text("garbage", encoding="utf-8")
        assert await store.list() == []


class TestCreate:
    @pytest.mark.asyncio
    async def test_derives_title_and_defaults_type(self, store):
        item, items = await store.create(ProjectCreate(url="https://x/y/file.pdf"))
        assert item.title == "file"
        assert item.type == "pdf"
        assert items == [item]

    @pytest.mark.asyncio
    async def test_persists_indented_sorted_list(self, store, data_path, seed_path):
        _write_json(seed_path, [_record("seed", 1)])
        item, _ = await store.create(ProjectCreate(title="New", type="diploma"))

        raw = data_path.read_text(encoding="utf-8")
        stored = json.loads(raw)
        assert isinstance(stored, list)
        assert [entry["id"] for entry in stored] == [item.id, "seed"]
        assert stored[0]["createdAt"] == item.created_at
        assert raw.startswith("[\n  {")

    @pytest.mark.asyncio
    async def test_ids_unique(self, store):
        first, _ = await store.create(ProjectCreate(title="one"))
        second, items = await store.create(ProjectCreate(title="two"))
        assert first.id != second.id
        assert {item.id for item in items} == {first.id, second.id}

    @pytest.mark.asyncio
    async def test_write_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        store = JsonFileProjectStore(blocker / "projects.json")
        with pytest.raises(StorageError):
            await store.create(ProjectCreate(title="x"))


class TestUpdate:
    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(self, store, data_path):
        _write_json(data_path, [_record("a", 10, description="keep", url="/uploads/a.pdf")])
        item, items = await store.update("a", ProjectUpdate.model_validate({"title": " new "}))
        assert item.id == "a"
        assert item.created_at == 10
        assert item.title == "new"
        assert item.description == "keep"
        assert item.url == "/uploads/a.pdf"
        assert items == [item]

    @pytest.mark.asyncio
    async def test_update_is_persisted(self, store, data_path):
        _write_json(data_path, [_record("a", 10)])
        await store.update("a", ProjectUpdate(type="zeugnis"))
        (item,) = await store.list()
        assert item.type == "zeugnis"

    @pytest.mark.asyncio
    async def test_unknown_id_not_found(self, store, data_path):
        _write_json(data_path, [_record("a", 10)])
        with pytest.raises(NotFoundError):
            await store.update("missing", ProjectUpdate(title="x"))


class TestDelete:
    @pytest.mark.asyncio
    async def test_removes_record(self, store, data_path):
        _write_json(data_path, [_record("a", 1), _record("b", 2)])
        items = await store.delete("a")
        assert [item.id for item in items] == ["b"]
        assert [entry["id"] for entry in json.loads(data_path.read_text(encoding="utf-8"))] == ["b"]

    @pytest.mark.asyncio
    async def test_delete_then_update_or_delete_not_found(self, store):
        item, _ = await store.create(ProjectCreate(title="gone"))
        await store.delete(item.id)
        with pytest.raises(NotFoundError):
            await store.update(item.id, ProjectUpdate(title="x"))
        with pytest.raises(NotFoundError):
            await store.delete(item.id)


@pytest.mark.asyncio
async def test_order_kept_across_mixed_operations(store, data_path):
    _write_json(data_path, [_record("old", 5), _record("older", 1)])
    created, _ = await store.create(ProjectCreate(title="fresh"))
    await store.update("older", ProjectUpdate(title="renamed"))
    await store.create(ProjectCreate(url="https://x/cv.pdf", type="cv"))
    await store.delete(created.id)

    items = await store.list()
    assert _created_at(items) == sorted(_created_at(items), reverse=True)
    assert items[-1].title == "renamed"
