"""Canvas routes — token bookkeeping and expiry reporting."""


async def test_status_before_connect_is_disconnected(client, user):
    res = await client.get("/api/canvas/status")
    assert res.json() == {"connected": False}


async def test_connect_then_status_reports_days_left(client, user):
    res = await client.post(
        "/api/canvas/connect",
        json={"canvas_api_key": "canvas-token", "canvas_api_expiration": "2030-04-01T09:00:00Z"},
    )
    assert res.status_code == 200
    assert res.json() == {"message": "Canvas connected successfully"}

    status = (await client.get("/api/canvas/status")).json()
    assert status["connected"] is True
    assert status["expires_in_days"] == 31
    assert status["needs_renewal"] is False


async def test_needs_renewal_within_seven_days(client, user, wall_clock):
    await client.post(
        "/api/canvas/connect",
        json={"canvas_api_key": "canvas-token", "canvas_api_expiration": "2030-03-08T21:00:00Z"},
    )
    status = (await client.get("/api/canvas/status")).json()
    # 7.5 days left floors to 7
    assert status["expires_in_days"] == 7
    assert status["needs_renewal"] is True


async def test_expired_token_reports_negative_days(client, user, wall_clock):
    await client.post(
        "/api/canvas/connect",
        json={"canvas_api_key": "canvas-token", "canvas_api_expiration": "2030-03-02T09:00:00Z"},
    )
    wall_clock.advance(days=2, hours=12)
    status = (await client.get("/api/canvas/status")).json()
    assert status["expires_in_days"] == -2
    assert status["needs_renewal"] is True


async def test_token_never_echoed_back(client, user):
    await client.post(
        "/api/canvas/connect",
        json={"canvas_api_key": "canvas-token", "canvas_api_expiration": "2030-04-01T09:00:00Z"},
    )
    me = (await client.get("/api/auth/me")).json()
    status = (await client.get("/api/canvas/status")).json()
    assert "canvas-token" not in str(me)
    assert "canvas-token" not in str(status)


async def test_connect_requires_both_fields(client, user):
    res = await client.post("/api/canvas/connect", json={"canvas_api_key": "x"})
    assert res.status_code == 400


async def test_canvas_requires_auth(client):
    assert (await client.get("/api/canvas/status")).status_code == 401
