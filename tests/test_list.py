import pytest

from app.models import Todo, TodoList

pytestmark = pytest.mark.anyio


async def test_lists_empty(client):
    res = await client.get("/lists")
    assert res.status_code == 200
    assert res.json() == []


async def test_create_and_get_list(client):
    res = await client.post("/lists", json={"name": "Groceries"})
    assert res.status_code == 201
    list_id = res.json()["id"]

    res = await client.get(f"/lists/{list_id}")
    assert res.status_code == 200
    assert res.json() == {"id": list_id, "name": "Groceries"}


async def test_lists_ordered_by_id_and_names_may_repeat(client):
    await client.post("/lists", json={"id": 3, "name": "Chores"})
    await client.post("/lists", json={"id": 1, "name": "Chores"})
    res = await client.get("/lists")
    assert res.json() == [{"id": 1, "name": "Chores"}, {"id": 3, "name": "Chores"}]


async def test_duplicate_list_id_conflicts(client, groceries):
    res = await client.post("/lists", json={"id": 1, "name": "Other"})
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "conflict"


async def test_rename_list(client, groceries):
    res = await client.patch("/lists/1", json={"name": "Weekly shop"})
    assert res.status_code == 200
    assert res.json()["name"] == "Weekly shop"

    res = await client.patch("/lists/99", json={"name": "Nope"})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "not_found"


async def test_todos_of_list(client, groceries):
    await client.post("/lists", json={"id": 2, "name": "Work"})
    await client.post("/lists/1/todos", json={"id": 2, "text": "Eggs", "checked": True})
    await client.post("/lists/1/todos", json={"id": 1, "text": "Milk"})
    await client.post("/lists/2/todos", json={"id": 3, "text": "Report"})

    res = await client.get("/lists/1/todos")
    assert res.status_code == 200
    assert [(t["id"], t["list_id"]) for t in res.json()] == [(1, 1), (2, 1)]

    res = await client.get("/lists/1/todos", params={"checked": "true"})
    assert [t["id"] for t in res.json()] == [2]


async def test_todos_of_missing_list(client):
    res = await client.get("/lists/999/todos")
    assert res.status_code == 404

    res = await client.post("/lists/999/todos", json={"text": "Orphan"})
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "referential_integrity"


async def test_delete_list_with_todos_rejected(client, groceries):
    await client.post("/lists/1/todos", json={"text": "Milk"})

    res = await client.delete("/lists/1")
    assert res.status_code == 409
    body = res.json()
    assert body["error"]["code"] == "list_not_empty"
    assert body["error"]["details"] == {"list_id": 1, "todos": 1}
    assert (await client.get("/lists/1")).status_code == 200


async def test_delete_list_cascade(client, groceries):
    await client.post("/lists", json={"id": 2, "name": "Work"})
    await client.post("/lists/1/todos", json={"id": 1, "text": "Milk"})
    await client.post("/lists/1/todos", json={"id": 2, "text": "Eggs"})
    await client.post("/lists/2/todos", json={"id": 3, "text": "Report"})

    res = await client.delete("/lists/1", params={"cascade": "true"})
    assert res.status_code == 204
    assert (await client.get("/lists/1")).status_code == 404
    assert [t["id"] for t in (await client.get("/todos")).json()] == [3]


async def test_delete_empty_list(client, groceries):
    assert (await client.delete("/lists/1")).status_code == 204
    assert (await client.delete("/lists/1")).status_code == 404


async def test_blank_name_rejected(client):
    res = await client.post("/lists", json={"name": ""})
    assert res.status_code == 422
    error = res.json()["error"]
    assert error["code"] == "validation_error"
    assert error["details"]["errors"][0]["loc"] == ["body", "name"]
    assert error["details"]["errors"][0]["type"] == "string_too_short"


async def test_root_health(client):
    res = await client.get("/")
    assert res.json() == {"status": "ok"}


async def test_rows_with_empty_strings_are_readable(client, db):
    # the column is only NOT NULL; other writers may store empty strings
    db.add(TodoList(id=1, name=""))
    await db.flush()
    db.add(Todo(id=1, text="", list_id=1))
    await db.commit()

    res = await client.get("/lists")
    assert res.status_code == 200
    assert res.json() == [{"id": 1, "name": ""}]

    res = await client.get("/lists/1/todos")
    assert res.status_code == 200
    assert res.json() == [{"id": 1, "text": "", "checked": False, "list_id": 1}]

    res = await client.get("/todos/1")
    assert res.status_code == 200
    assert res.json()["text"] == ""
