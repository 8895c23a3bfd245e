"""Schedule routes — today's bell schedule, public."""

from slate.models.bell_schedule import BellSchedule, BellScheduleDay


async def _seed(test_db, day: str, name: str = "Regular Day"):
    schedule = BellSchedule(
        name=name,
        schedule_data=[{"period": "1", "start": "08:00", "end": "08:50"}],
    )
    test_db.add(schedule)
    await test_db.flush()
    test_db.add(BellScheduleDay(school_initials="LHS", day=day, bell_schedule_id=schedule.id))
    await test_db.commit()


async def test_todays_schedule_is_public(client, test_db):
    await _seed(test_db, "2030-03-01")

    res = await client.get("/api/schedules/LHS/today")

    assert res.status_code == 200
    assert res.json() == {
        "name": "Regular Day",
        "schedule": [{"period": "1", "start": "08:00", "end": "08:50"}],
    }


async def test_follows_the_clock_to_the_next_day(client, test_db, wall_clock):
    await _seed(test_db, "2030-03-01", name="Regular Day")
    await _seed(test_db, "2030-03-02", name="Late Start")
    wall_clock.advance(days=1)

    res = await client.get("/api/schedules/LHS/today")

    assert res.json()["name"] == "Late Start"


async def test_unknown_school_is_404(client, test_db):
    await _seed(test_db, "2030-03-01")
    res = await client.get("/api/schedules/XYZ/today")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"
