"""Essay routes — prompt search, essay CRUD with version history, examples.

Invariants:
    - word_count is computed server-side from the HTML content
    - Only content changes create a new version
    - Example essays are public-only and readable without a session
"""

from uuid import uuid4

import pytest

from slate.models.essay_prompt import EssayPrompt
from slate.models.example_essay import ExampleEssay
from tests.services.helpers import switch_user


@pytest.fixture
async def prompts(test_db):
    rows = [
        EssayPrompt(prompt_text="Describe a challenge you overcame.", prompt_label="Challenge",
                    prompt_type="common_app", year=2029),
        EssayPrompt(prompt_text="Why our college?", prompt_label="Why us",
                    prompt_type="college_specific", year=2030),
        EssayPrompt(prompt_text="Old retired prompt.", prompt_label="Retired",
                    prompt_type="common_app", year=2020, is_active=False),
    ]
    test_db.add_all(rows)
    await test_db.commit()
    return rows


async def _create_essay(client, **fields):
    body = {"title": "Personal statement", "content": "<p>Hello world</p>", **fields}
    res = await client.post("/api/essays/user", json=body)
    assert res.status_code == 201, res.text
    return res.json()["essay"]


async def test_prompt_search_is_paginated_and_ordered_by_year(client, user, prompts):
    res = await client.get("/api/essays/prompts", params={"limit": 2})
    page = res.json()
    assert page["total"] == 3
    assert page["limit"] == 2
    assert page["offset"] == 0
    assert [p["year"] for p in page["data"]] == [2030, 2029]


async def test_prompt_search_filters(client, user, prompts):
    by_type = (await client.get(
        "/api/essays/prompts", params={"prompt_type": "common_app", "is_active": "true"},
    )).json()
    assert [p["prompt_label"] for p in by_type["data"]] == ["Challenge"]

    by_text = (await client.get("/api/essays/prompts", params={"query": "college"})).json()
    assert [p["prompt_label"] for p in by_text["data"]] == ["Why us"]


async def test_prompt_search_rejects_out_of_range_limit(client, user):
    res = await client.get("/api/essays/prompts", params={"limit": 101})
    assert res.status_code == 400


async def test_prompt_by_id(client, user, prompts):
    res = await client.get(f"/api/essays/prompts/{prompts[0].id}")
    assert res.json()["prompt"]["prompt_label"] == "Challenge"
    missing = await client.get(f"/api/essays/prompts/{uuid4()}")
    assert missing.status_code == 404


async def test_prompts_require_auth(client, prompts):
    assert (await client.get("/api/essays/prompts")).status_code == 401


async def test_create_essay_counts_words_and_starts_at_version_one(client, user):
    essay = await _create_essay(client, content="<p>One <em>two</em> three</p>")
    assert essay["word_count"] == 3
    assert essay["version"] == 1
    assert essay["status"] == "draft"
    assert essay["ai_suggestions_enabled"] is True

    versions = (await client.get(f"/api/essays/user/{essay['id']}/versions")).json()
    assert [v["version"] for v in versions["versions"]] == [1]


async def test_client_supplied_word_count_is_ignored(client, user):
    res = await client.post(
        "/api/essays/user",
        json={"title": "T", "content": "<p>just two</p>", "word_count": 999},
    )
    assert res.json()["essay"]["word_count"] == 2


async def test_content_update_bumps_version_and_records_snapshot(client, user):
    essay = await _create_essay(client)
    res = await client.patch(
        f"/api/essays/user/{essay['id']}",
        json={"content": "<p>A longer second draft</p>"},
    )
    updated = res.json()["essay"]
    assert updated["version"] == 2
    assert updated["word_count"] == 4

    versions = (await client.get(f"/api/essays/user/{essay['id']}/versions")).json()
    assert [v["version"] for v in versions["versions"]] == [2, 1]

    first = (await client.get(f"/api/essays/user/{essay['id']}/versions/1")).json()
    assert first["version"]["content"] == "<p>Hello world</p>"


async def test_metadata_update_keeps_version(client, user):
    essay = await _create_essay(client)
    res = await client.patch(
        f"/api/essays/user/{essay['id']}",
        json={"status": "in_review", "notes": "ask counselor"},
    )
    updated = res.json()["essay"]
    assert updated["version"] == 1
    assert updated["status"] == "in_review"


async def test_unchanged_content_keeps_version(client, user):
    essay = await _create_essay(client)
    res = await client.patch(
        f"/api/essays/user/{essay['id']}", json={"content": "<p>Hello world</p>"},
    )
    assert res.json()["essay"]["version"] == 1


async def test_invalid_status_rejected(client, user):
    essay = await _create_essay(client)
    res = await client.patch(f"/api/essays/user/{essay['id']}", json={"status": "published"})
    assert res.status_code == 400


async def test_missing_version_is_404(client, user):
    essay = await _create_essay(client)
    res = await client.get(f"/api/essays/user/{essay['id']}/versions/7")
    assert res.status_code == 404


async def test_list_user_essays_filters_by_status(client, user):
    await _create_essay(client, title="Draft one")
    await _create_essay(client, title="Final one", status="final")

    page = (await client.get("/api/essays/user", params={"status": "final"})).json()
    assert page["total"] == 1
    assert page["data"][0]["title"] == "Final one"


async def test_delete_essay_removes_it_and_its_versions(client, user):
    essay = await _create_essay(client)
    res = await client.delete(f"/api/essays/user/{essay['id']}")
    assert res.json() == {"success": True}
    assert (await client.get(f"/api/essays/user/{essay['id']}")).status_code == 404
    assert (await client.get(f"/api/essays/user/{essay['id']}/versions")).status_code == 404


async def test_other_users_essay_is_invisible(client, user):
    essay = await _create_essay(client)
    await switch_user(client, "grace@example.com")

    assert (await client.get(f"/api/essays/user/{essay['id']}")).status_code == 404
    assert (await client.get(f"/api/essays/user/{essay['id']}/versions")).status_code == 404
    patch = await client.patch(f"/api/essays/user/{essay['id']}", json={"title": "mine now"})
    assert patch.status_code == 404
    assert (await client.get("/api/essays/user")).json()["total"] == 0


async def test_examples_public_only_sorted_by_upvotes(client, prompts, test_db):
    prompt = prompts[0]
    test_db.add_all([
        ExampleEssay(prompt_id=prompt.id, title="Good", content="...", upvotes=5),
        ExampleEssay(prompt_id=prompt.id, title="Best", content="...", upvotes=40),
        ExampleEssay(prompt_id=prompt.id, title="Hidden", content="...", upvotes=99,
                     is_public=False),
    ])
    await test_db.commit()

    res = await client.get(f"/api/essays/examples/{prompt.id}")

    assert res.status_code == 200
    page = res.json()
    assert page["total"] == 2
    assert [e["title"] for e in page["data"]] == ["Best", "Good"]


async def test_examples_accept_signed_in_callers(client, user, prompts):
    res = await client.get(f"/api/essays/examples/{prompts[0].id}", params={"sort": "created_at"})
    assert res.status_code == 200
    assert res.json()["data"] == []


async def test_examples_ignore_a_stale_cookie(client, prompts):
    client.cookies.set("session_token", "0" * 64)
    res = await client.get(f"/api/essays/examples/{prompts[0].id}")
    assert res.status_code == 200
