"""Team Routes: pick pool, team upsert and awards through the HTTP layer.

Invariants:
    - PUT creates (201) then updates in place (200); never a second row
    - Illegal picks → 400 before anything is written
    - Started tournaments → 409 TEAM_LOCKED
    - Unknown tournament or tour card → 404
    - Awards complete the tournament and roll its season's cards up
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import select

from fairway.models import Team, Tier, Tournament

from tests.services.seed_data import LEGAL_TEAM


def _url(league, suffix):
    return f"/api/v1/tournaments/{league.tournament_id}/{suffix}"


def _body(league, golfer_ids, card=0):
    return {"tour_card_id": str(league.tour_card_ids[card]), "golfer_ids": golfer_ids}


# ─── Pick pool ───────────────────────────────────────────────────

async def test_pick_pool_is_grouped(client, seed_league):
    res = await client.get(
        _url(seed_league, "pick-pool"),
        params={"tour_card_id": str(seed_league.tour_card_ids[0])},
    )
    assert res.status_code == 200
    data = res.json()
    assert [g["group_key"] for g in data["groups"]] == [1, 2, 3, 4, 5]
    assert all(len(g["golfers"]) == 3 for g in data["groups"])
    assert data["total_selected"] == 0
    assert data["can_save"] is False
    assert data["is_locked"] is False
    assert data["team_id"] is None


async def test_pick_pool_preselects_existing_team(client, seed_league):
    await client.put(_url(seed_league, "teams"), json=_body(seed_league, LEGAL_TEAM))

    res = await client.get(
        _url(seed_league, "pick-pool"),
        params={"tour_card_id": str(seed_league.tour_card_ids[0])},
    )
    data = res.json()
    assert data["selected"] == LEGAL_TEAM
    assert data["can_save"] is True
    group_one = data["groups"][0]
    assert group_one["is_complete"] is True
    disabled = {g["golfer_api_id"]: g["is_disabled"] for g in group_one["golfers"]}
    assert disabled == {1: False, 2: False, 3: True}


async def test_pick_pool_empty_returns_400(client, seed_league, test_db):
    empty = Tournament(
        season_id=seed_league.season_id, tier_id=seed_league.tier_id,
        name="No Field Yet", start_date=datetime(2026, 5, 1, tzinfo=timezone.utc),
    )
    test_db.add(empty)
    await test_db.commit()

    res = await client.get(
        f"/api/v1/tournaments/{empty.id}/pick-pool",
        params={"tour_card_id": str(seed_league.tour_card_ids[0])},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "EMPTY_PICK_POOL"


async def test_pick_pool_requires_tour_card_id(client, seed_league):
    res = await client.get(_url(seed_league, "pick-pool"))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


# ─── Upsert ──────────────────────────────────────────────────────

async def test_put_creates_then_updates(client, seed_league, test_db):
    first = await client.put(_url(seed_league, "teams"), json=_body(seed_league, LEGAL_TEAM))
    assert first.status_code == 201
    assert first.json()["created"] is True

    swapped = LEGAL_TEAM[:-1] + [15]
    second = await client.put(_url(seed_league, "teams"), json=_body(seed_league, swapped))
    assert second.status_code == 200
    assert second.json() == {"team_id": first.json()["team_id"], "created": False}

    rows = (await test_db.execute(select(Team))).scalars().all()
    assert len(rows) == 1
    assert rows[0].golfer_ids == swapped


async def test_put_rejects_third_golfer_from_group(client, seed_league, test_db):
    illegal = LEGAL_TEAM[:-1] + [3]
    res = await client.put(_url(seed_league, "teams"), json=_body(seed_league, illegal))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "PICK_VALIDATION_ERROR"
    assert (await test_db.execute(select(Team))).scalars().all() == []


async def test_put_rejects_golfer_outside_pool(client, seed_league):
    res = await client.put(
        _url(seed_league, "teams"),
        json=_body(seed_league, LEGAL_TEAM[:-1] + [999]),
    )
    assert res.status_code == 400


async def test_put_rejects_nine_golfers(client, seed_league):
    res = await client.put(
        _url(seed_league, "teams"), json=_body(seed_league, LEGAL_TEAM[:9]),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_put_unknown_tournament_returns_404(client, seed_league):
    res = await client.put(
        f"/api/v1/tournaments/{uuid4()}/teams", json=_body(seed_league, LEGAL_TEAM),
    )
    assert res.status_code == 404


async def test_put_unknown_tour_card_returns_404(client, seed_league):
    body = {"tour_card_id": str(uuid4()), "golfer_ids": LEGAL_TEAM}
    res = await client.put(_url(seed_league, "teams"), json=body)
    assert res.status_code == 404


async def test_put_after_start_returns_409(client, seed_league, test_db):
    tournament = await test_db.get(Tournament, seed_league.tournament_id)
    tournament.status = "active"
    await test_db.commit()

    res = await client.put(_url(seed_league, "teams"), json=_body(seed_league, LEGAL_TEAM))
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "TEAM_LOCKED"


# ─── Awards ──────────────────────────────────────────────────────

async def test_awards_label_and_pay_by_score(client, seed_league, test_db):
    for card in range(3):
        await client.put(
            _url(seed_league, "teams"), json=_body(seed_league, LEGAL_TEAM, card),
        )
    teams = {
        t.tour_card_id: t
        for t in (await test_db.execute(select(Team))).scalars().all()
    }
    rounds = {0: [-5, -3], 1: [-2, -2], 2: [-1, -3]}
    for card, card_rounds in rounds.items():
        teams[seed_league.tour_card_ids[card]].rounds = card_rounds
    await test_db.commit()

    res = await client.post(_url(seed_league, "awards"), json={})
    assert res.status_code == 200
    awards = {a["team_id"]: a for a in res.json()}
    winner = awards[str(teams[seed_league.tour_card_ids[0]].id)]
    tied = awards[str(teams[seed_league.tour_card_ids[1]].id)]
    assert (winner["position"], winner["points"], winner["earnings"]) == ("1", 500, 2500)
    # T2 averages 2nd and 3rd place
    assert (tied["position"], tied["points"], tied["earnings"]) == ("T2", 245, 1225)


async def test_awards_unknown_tournament_returns_404(client):
    res = await client.post(f"/api/v1/tournaments/{uuid4()}/awards", json={})
    assert res.status_code == 404


async def _score_regular_event(client, league, test_db):
    """Ann wins, Bo and Cy tie for second, Di and Ed sit the event out."""
    for card in range(3):
        await client.put(_url(league, "teams"), json=_body(league, LEGAL_TEAM, card))
    teams = {
        t.tour_card_id: t
        for t in (await test_db.execute(select(Team))).scalars().all()
    }
    rounds = {0: [-5, -3], 1: [-2, -2], 2: [-1, -3]}
    for card, card_rounds in rounds.items():
        teams[league.tour_card_ids[card]].rounds = card_rounds
    await test_db.commit()
    return await client.post(_url(league, "awards"), json={})


async def test_awards_roll_up_tour_cards(client, seed_league, test_db):
    res = await _score_regular_event(client, seed_league, test_db)
    assert res.status_code == 200

    standings = await client.get(f"/api/v1/seasons/{seed_league.season_id}/standings")
    rows = {r["card"]["display_name"]: r for r in standings.json()["standings"]}

    ann, bo, ed = rows["Ann"]["card"], rows["Bo"]["card"], rows["Ed"]["card"]
    # totals come from completed teams, replacing the seeded points
    assert (ann["points"], ann["earnings"], ann["wins"]) == (500, 2500, 1)
    assert (bo["points"], bo["position"], bo["top_ten"]) == (245, "T2", 1)
    assert (ed["points"], ed["appearances"], ed["position"]) == (0, 0, "T4")
    assert ann["playoff"] == 1 and bo["playoff"] == 1
    assert ed["playoff"] == 2
    # past points exclude the event just rolled in
    assert rows["Ann"]["past_points"] == 0
    assert rows["Ed"]["past_points"] is None


async def test_awards_complete_the_tournament(client, seed_league, test_db):
    await _score_regular_event(client, seed_league, test_db)

    res = await client.put(
        _url(seed_league, "teams"), json=_body(seed_league, LEGAL_TEAM, card=3),
    )

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "TEAM_LOCKED"


async def test_playoff_awards_use_rolled_up_brackets(client, seed_league, test_db):
    await _score_regular_event(client, seed_league, test_db)

    payouts = [float(1000 - i) for i in range(100)]
    tier = Tier(
        season_id=seed_league.season_id, name="Playoff",
        points=[0] * 100, payouts=payouts,
    )
    test_db.add(tier)
    await test_db.flush()
    playoff = Tournament(
        season_id=seed_league.season_id, tier_id=tier.id, name="Tour Championship",
        start_date=datetime(2026, 9, 1, tzinfo=timezone.utc), status="active",
    )
    test_db.add(playoff)
    await test_db.flush()
    ann, di, ed = (seed_league.tour_card_ids[i] for i in (0, 3, 4))
    rounds = {ann: [-4], di: [-2], ed: [-6]}
    teams = {
        card: Team(
            tournament_id=playoff.id, tour_card_id=card,
            golfer_ids=LEGAL_TEAM, rounds=card_rounds,
        )
        for card, card_rounds in rounds.items()
    }
    test_db.add_all(teams.values())
    await test_db.commit()

    res = await client.post(
        f"/api/v1/tournaments/{playoff.id}/awards",
        json={"final_playoff_event": True},
    )

    assert res.status_code == 200
    awards = {a["team_id"]: a for a in res.json()}
    assert len(awards) == 3
    gold_winner = awards[str(teams[ann].id)]
    silver_winner = awards[str(teams[ed].id)]
    silver_second = awards[str(teams[di].id)]
    assert (gold_winner["position"], gold_winner["earnings"]) == ("1", 1000)
    assert (silver_winner["position"], silver_winner["earnings"]) == ("1", 925)
    assert (silver_second["position"], silver_second["earnings"]) == ("2", 924)
