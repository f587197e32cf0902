# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

from datetime import datetime, timezone

import pytest

from aiohttp.test_utils import make_mocked_request

from civic_chat.aiohttp_app import resolve_user_id
from civic_chat.models.article import Article, ArticleType
from civic_chat.models.poll import Poll, PollOption, PollVote
from civic_chat.models.quiz import NEUTRAL_PARTY
from civic_chat.prompts import DEBATE_PERSONAS

from conftest import build_quiz

USER_HEADERS = {"X-User-Id": "user-1"}


@pytest.fixture
async def seeded_firestore_service(firestore_service):
    await firestore_service.awrite_quiz(
        build_quiz(
            "quick",
            [
                [
                    ("q1-agree", "Stimme zu", "Grüne"),
                    ("q1-neutral", "Neutral", NEUTRAL_PARTY),
                    ("q1-disagree", "Stimme nicht zu", "FDP"),
                ],
                [
                    ("q2-agree", "Stimme zu", "Grüne"),
                    ("q2-neutral", "Neutral", NEUTRAL_PARTY),
                    ("q2-disagree", "Stimme nicht zu", "FDP"),
                ],
            ],
        )
    )
    await firestore_service.awrite_poll(
        Poll(
            id="tempolimit",
            question="Sollte es ein generelles Tempolimit auf Autobahnen geben?",
            created_at=datetime(2026, 1, 10, tzinfo=timezone.utc),
            options=[
                PollOption(id="1", text="Ja"),
                PollOption(id="2", text="Nein"),
            ],
        )
    )
    await firestore_service.awrite_poll(
        Poll(
            id="wahlalter",
            question="Sollte das Wahlalter auf 16 gesenkt werden?",
            created_at=datetime(2026, 1, 20, tzinfo=timezone.utc),
            options=[
                PollOption(id="1", text="Ja"),
                PollOption(id="2", text="Nein"),
            ],
        )
    )
    await firestore_service.awrite_article(
        Article(
            id="haushalt",
            title="Bundestag beschließt Haushalt",
            content="Der Bundestag hat den Haushalt für das kommende Jahr beschlossen.",
            type=ArticleType.NEWS,
            source="Tagesschau",
            created_at=datetime(2026, 1, 5, tzinfo=timezone.utc),
        )
    )
    await firestore_service.awrite_article(
        Article(
            id="buergerhaushalt",
            title="Bürgerhaushalt Stuttgart",
            content="Bürgerinnen und Bürger schlagen Projekte für ihre Stadt vor.",
            type=ArticleType.PROJECT,
            created_at=datetime(2026, 1, 15, tzinfo=timezone.utc),
        )
    )
    return firestore_service


@pytest.fixture
async def seeded_client(client, seeded_firestore_service):
    return client


async def test_health_check(client):
    resp = await client.get("/healthz")
    assert resp.status == 200
    assert await resp.json() == {"status": "ok"}


class TestQuizzes:
    async def test_list_quizzes(self, seeded_client):
        resp = await seeded_client.get("/api/quizzes")

        assert resp.status == 200
        quizzes = await resp.json()
        assert [quiz["id"] for quiz in quizzes] == ["quick"]
        assert "questions" not in quizzes[0]

    async def test_get_quiz_with_questions(self, seeded_client):
        resp = await seeded_client.get("/api/quizzes/quick")

        assert resp.status == 200
        quiz = await resp.json()
        assert [question["id"] for question in quiz["questions"]] == [
            "quick-q1",
            "quick-q2",
        ]
        assert quiz["questions"][0]["options"][0]["partyAffiliation"] == "Grüne"

    async def test_get_unknown_quiz(self, seeded_client):
        resp = await seeded_client.get("/api/quizzes/missing")

        assert resp.status == 404
        assert await resp.json() == {"message": "Quiz nicht gefunden"}

    async def test_submit_quiz(self, seeded_client, seeded_firestore_service):
        resp = await seeded_client.post(
            "/api/quizzes/quick/submit",
            json={"answers": {"quick-q1": "q1-agree", "quick-q2": "q2-disagree"}},
            headers=USER_HEADERS,
        )

        assert resp.status == 200
        result = await resp.json()
        assert result["userId"] == "user-1"
        assert result["quizId"] == "quick"
        assert result["matchedParty"] == "Grüne"
        assert result["partyScores"]["Grüne"] == 50
        assert result["partyScores"]["FDP"] == 0
        assert result["id"] == seeded_firestore_service.quiz_results[0].id

    async def test_submit_unknown_quiz(self, seeded_client):
        resp = await seeded_client.post(
            "/api/quizzes/missing/submit", json={"answers": {}}
        )
        assert resp.status == 404
        assert await resp.json() == {"message": "Quiz nicht gefunden"}

    async def test_submit_with_empty_answer_entry(self, seeded_client):
        resp = await seeded_client.post(
            "/api/quizzes/quick/submit",
            json={"answers": {"quick-q1": "q1-agree", "quick-q2": None}},
            headers=USER_HEADERS,
        )

        assert resp.status == 200
        result = await resp.json()
        assert result["partyScores"]["Grüne"] == 50
        assert result["matchedParty"] == "Grüne"

    async def test_submit_without_answers(self, seeded_client):
        resp = await seeded_client.post("/api/quizzes/quick/submit", json={})

        assert resp.status == 400
        assert (await resp.json())["field"] == "answers"

    async def test_submit_invalid_json(self, seeded_client):
        resp = await seeded_client.post(
            "/api/quizzes/quick/submit",
            data="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status == 400


class TestPolls:
    async def test_list_polls_newest_first(self, seeded_client):
        resp = await seeded_client.get("/api/polls", headers=USER_HEADERS)

        assert resp.status == 200
        polls = await resp.json()
        assert [poll["id"] for poll in polls] == ["wahlalter", "tempolimit"]
        assert all(option["votes"] == 0 for option in polls[0]["options"])
        assert polls[0]["userVotedOptionId"] is None

    async def test_vote_is_counted(self, seeded_client, seeded_firestore_service):
        await seeded_firestore_service.awrite_poll_vote(
            PollVote(poll_id="tempolimit", option_id="1", user_id="user-2")
        )

        resp = await seeded_client.post(
            "/api/polls/tempolimit/vote", json={"optionId": 1}, headers=USER_HEADERS
        )

        assert resp.status == 200
        assert await resp.json() == {"success": True}

        resp = await seeded_client.get("/api/polls", headers=USER_HEADERS)
        poll = next(p for p in await resp.json() if p["id"] == "tempolimit")
        assert [option["votes"] for option in poll["options"]] == [2, 0]
        assert poll["userVotedOptionId"] == "1"

    async def test_second_vote_is_rejected(self, seeded_client):
        first = await seeded_client.post(
            "/api/polls/wahlalter/vote", json={"optionId": "2"}, headers=USER_HEADERS
        )
        second = await seeded_client.post(
            "/api/polls/wahlalter/vote", json={"optionId": "1"}, headers=USER_HEADERS
        )

        assert first.status == 200
        assert second.status == 400
        assert (await second.json())["message"] == "Bereits abgestimmt"

    async def test_vote_for_unknown_option(self, seeded_client):
        resp = await seeded_client.post(
            "/api/polls/wahlalter/vote", json={"optionId": "99"}, headers=USER_HEADERS
        )

        assert resp.status == 400
        assert await resp.json() == {
            "message": "Ungültige Antwortoption",
            "field": "optionId",
        }

    async def test_vote_for_unknown_poll(self, seeded_client):
        resp = await seeded_client.post(
            "/api/polls/missing/vote", json={"optionId": "1"}, headers=USER_HEADERS
        )
        assert resp.status == 404

    async def test_guests_are_identified_by_address(
        self, seeded_client, seeded_firestore_service
    ):
        resp = await seeded_client.post(
            "/api/polls/wahlalter/vote", json={"optionId": "1"}
        )

        assert resp.status == 200
        (vote,) = seeded_firestore_service.poll_votes.values()
        assert vote.user_id.startswith("guest_")


async def test_list_articles_newest_first(seeded_client):
    resp = await seeded_client.get("/api/articles")

    assert resp.status == 200
    articles = await resp.json()
    assert [article["id"] for article in articles] == ["buergerhaushalt", "haushalt"]
    assert articles[0]["type"] == "project"
    assert articles[1]["source"] == "Tagesschau"


async def test_list_personas(client):
    resp = await client.get("/api/personas")

    assert resp.status == 200
    personas = await resp.json()
    assert [persona["id"] for persona in personas] == [
        persona.id for persona in DEBATE_PERSONAS
    ]
    assert "imageUrl" in personas[0]


async def test_unknown_route_is_not_found(client):
    resp = await client.get("/api/does-not-exist")
    assert resp.status == 404


async def test_unexpected_store_error_is_reported_as_json(
    client, firestore_service, monkeypatch
):
    async def failing_aget_articles():
        raise RuntimeError("firestore unavailable")

    monkeypatch.setattr(firestore_service, "aget_articles", failing_aget_articles)

    resp = await client.get("/api/articles")

    assert resp.status == 500
    assert await resp.json() == {"error": "Failed to send message"}


def test_user_id_header_wins():
    request = make_mocked_request(
        "GET", "/api/polls", headers={"X-User-Id": "user-1"}
    )
    assert resolve_user_id(request) == "user-1"


def test_guests_without_address_are_not_merged():
    # mocked requests have no peer address
    first = make_mocked_request("GET", "/api/polls")
    second = make_mocked_request("GET", "/api/polls")

    assert first.remote is None
    assert resolve_user_id(first).startswith("guest_")
    assert resolve_user_id(first) != "guest_None"
    assert resolve_user_id(first) != resolve_user_id(second)
