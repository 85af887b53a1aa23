"""Standings Routes: season standings, position changes and playoff brackets."""

from uuid import uuid4

from fairway.models import Team, Tournament


async def test_standings_before_any_completed_event(client, seed_league):
    res = await client.get(f"/api/v1/seasons/{seed_league.season_id}/standings")
    assert res.status_code == 200
    data = res.json()
    names = [row["card"]["display_name"] for row in data["standings"]]
    assert names == ["Ann", "Bo", "Cy", "Di", "Ed"]
    for row in data["standings"]:
        assert row["pos_change"] == {"value": 0, "display": "", "trend": "neutral"}
        assert row["past_points"] is None
    assert data["current_tour_card_id"] is None


async def test_playoff_brackets_and_strokes(client, seed_league):
    res = await client.get(f"/api/v1/seasons/{seed_league.season_id}/standings")
    playoff = res.json()["playoff"]
    assert [r["card"]["display_name"] for r in playoff["gold"]] == ["Ann", "Bo"]
    assert [r["starting_strokes"] for r in playoff["gold"]] == [-10.0, 0.0]
    assert [r["card"]["display_name"] for r in playoff["silver"]] == ["Cy", "Di"]
    assert playoff["bumped"] == []
    # season seeded without a playoff tier
    assert playoff["gold_tables"] is None


async def test_position_change_after_completed_event(client, seed_league, test_db):
    tournament = await test_db.get(Tournament, seed_league.tournament_id)
    tournament.status = "completed"
    cy = seed_league.tour_card_ids[2]
    test_db.add(Team(
        tournament_id=tournament.id, tour_card_id=cy,
        golfer_ids=[], points=120,
    ))
    await test_db.commit()

    res = await client.get(f"/api/v1/seasons/{seed_league.season_id}/standings")
    rows = {row["card"]["id"]: row for row in res.json()["standings"]}
    assert rows[str(cy)]["past_points"] == 180
    assert rows[str(cy)]["pos_change"] == {"value": 2, "display": "2", "trend": "up"}
    # no team in the event, so no movement reported
    di = seed_league.tour_card_ids[3]
    assert rows[str(di)]["pos_change"]["value"] == 0

    # inside silver, Cy passed Di
    silver = {r["card"]["id"]: r for r in res.json()["playoff"]["silver"]}
    assert silver[str(cy)]["pos_change_po"] == {"value": 1, "display": "1", "trend": "up"}
    assert silver[str(di)]["pos_change_po"]["value"] == 0


async def test_member_id_marks_current_card(client, seed_league):
    res = await client.get(
        f"/api/v1/seasons/{seed_league.season_id}/standings",
        params={"member_id": str(seed_league.member_ids[1])},
    )
    data = res.json()
    assert data["current_tour_card_id"] == str(seed_league.tour_card_ids[1])
    flagged = [r for r in data["standings"] if r["is_current_member"]]
    assert len(flagged) == 1


async def test_unknown_season_returns_404(client):
    res = await client.get(f"/api/v1/seasons/{uuid4()}/standings")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"
