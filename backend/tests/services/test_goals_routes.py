"""Goal routes — CRUD, progress bounds, ordering by deadline."""

from uuid import uuid4


async def _create(client, **fields):
    body = {"goal_type": "test_score", "title": "SAT 1500+", "target_value": "1500", **fields}
    res = await client.post("/api/goals/create", json=body)
    assert res.status_code == 201, res.text
    return res.json()["goal"]


async def test_create_defaults(client, user):
    goal = await _create(client)
    assert goal["progress_percentage"] == 0
    assert goal["completed"] is False


async def test_progress_must_be_within_0_and_100(client, user):
    res = await client.post(
        "/api/goals/create",
        json={"goal_type": "x", "title": "y", "target_value": "z", "progress_percentage": 101},
    )
    assert res.status_code == 400


async def test_update_progress_and_complete(client, user):
    goal = await _create(client)
    res = await client.patch(
        f"/api/goals/{goal['id']}",
        json={"progress_percentage": 100, "current_value": "1510", "completed": True},
    )
    updated = res.json()["goal"]
    assert updated["progress_percentage"] == 100
    assert updated["completed"] is True
    assert updated["title"] == "SAT 1500+"


async def test_list_orders_by_deadline_with_undated_last(client, user):
    await _create(client, title="someday")
    await _create(client, title="summer", deadline="2030-07-01T00:00:00Z")
    await _create(client, title="spring", deadline="2030-04-01T00:00:00Z")

    page = (await client.get("/api/goals")).json()
    assert [g["title"] for g in page["data"]] == ["spring", "summer", "someday"]


async def test_list_filters_by_goal_type(client, user):
    await _create(client, goal_type="test_score")
    await _create(client, goal_type="gpa", title="4.0")
    page = (await client.get("/api/goals", params={"goal_type": "gpa"})).json()
    assert [g["title"] for g in page["data"]] == ["4.0"]


async def test_get_and_delete(client, user):
    goal = await _create(client)
    assert (await client.get(f"/api/goals/{goal['id']}")).status_code == 200
    assert (await client.delete(f"/api/goals/{goal['id']}")).json() == {"success": True}
    assert (await client.get(f"/api/goals/{goal['id']}")).status_code == 404


async def test_missing_goal_is_404(client, user):
    res = await client.patch(f"/api/goals/{uuid4()}", json={"title": "x"})
    assert res.status_code == 404
