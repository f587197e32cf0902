# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

import asyncio
from datetime import datetime, timedelta, timezone
import itertools
import json
import os
from typing import Any, AsyncIterator, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, AIMessageChunk
from langchain_core.messages.base import BaseMessage
from langchain_core.outputs import ChatGeneration, ChatGenerationChunk, ChatResult
import pytest

os.environ.setdefault("API_NAME", "civic-chat-api")

from civic_chat.aiohttp_app import create_app  # noqa: E402
from civic_chat.models.article import Article  # noqa: E402
from civic_chat.models.chat import Conversation, Message, Role  # noqa: E402
from civic_chat.models.general import LLM  # noqa: E402
from civic_chat.models.poll import Poll, PollOption, PollVote  # noqa: E402
from civic_chat.models.quiz import (  # noqa: E402
    Quiz,
    QuizOption,
    QuizQuestion,
    QuizResult,
    QuizWithQuestions,
)


class InMemoryFirestoreService:
    """Stand-in for FirestoreService that keeps every collection in dictionaries."""

    def __init__(self):
        self.quizzes: dict[str, QuizWithQuestions] = {}
        self.quiz_results: list[QuizResult] = []
        self.polls: dict[str, Poll] = {}
        self.poll_votes: dict[tuple[str, str], PollVote] = {}
        self.articles: dict[str, Article] = {}
        self.conversations: dict[str, Conversation] = {}
        self.messages: dict[str, list[Message]] = {}
        self._ids = itertools.count(1)
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids)}"

    def _now(self) -> datetime:
        # strictly increasing so that ordering by creation time is deterministic
        self._clock += timedelta(seconds=1)
        return self._clock

    async def aget_quizzes(self) -> list[Quiz]:
        return [
            Quiz(**quiz.model_dump(exclude={"questions"}))
            for quiz in self.quizzes.values()
        ]

    async def aget_quiz_by_id(self, quiz_id: str) -> Optional[QuizWithQuestions]:
        return self.quizzes.get(quiz_id)

    async def awrite_quiz(self, quiz: QuizWithQuestions) -> str:
        self.quizzes[quiz.id] = quiz
        return quiz.id

    async def awrite_quiz_result(self, result: QuizResult) -> QuizResult:
        stored_result = result.model_copy(
            update={"id": self._next_id("result"), "created_at": self._now()}
        )
        self.quiz_results.append(stored_result)
        return stored_result

    async def aget_polls(self) -> list[Poll]:
        return sorted(
            self.polls.values(), key=lambda poll: poll.created_at, reverse=True
        )

    async def aget_poll_by_id(self, poll_id: str) -> Optional[Poll]:
        return self.polls.get(poll_id)

    async def awrite_poll(self, poll: Poll) -> str:
        self.polls[poll.id] = poll.model_copy(
            update={"created_at": poll.created_at or self._now()}
        )
        return poll.id

    async def aget_poll_votes(self, poll_id: str) -> list[PollVote]:
        return [vote for vote in self.poll_votes.values() if vote.poll_id == poll_id]

    async def awrite_poll_vote(self, vote: PollVote) -> bool:
        key = (vote.poll_id, vote.user_id)
        if key in self.poll_votes:
            return False
        self.poll_votes[key] = vote
        return True

    async def aget_articles(self) -> list[Article]:
        return sorted(
            self.articles.values(), key=lambda article: article.created_at, reverse=True
        )

    async def awrite_article(self, article: Article) -> str:
        self.articles[article.id] = article.model_copy(
            update={"created_at": article.created_at or self._now()}
        )
        return article.id

    async def aget_conversations(self, user_id: str) -> list[Conversation]:
        return sorted(
            (c for c in self.conversations.values() if c.user_id == user_id),
            key=lambda conversation: conversation.created_at,
            reverse=True,
        )

    async def aget_conversation_by_id(
        self, conversation_id: str
    ) -> Optional[Conversation]:
        return self.conversations.get(conversation_id)

    async def acreate_conversation(
        self, user_id: str, title: str, system_prompt: Optional[str] = None
    ) -> Conversation:
        conversation = Conversation(
            id=self._next_id("conversation"),
            user_id=user_id,
            title=title,
            system_prompt=system_prompt or None,
            created_at=self._now(),
        )
        self.conversations[conversation.id] = conversation
        self.messages[conversation.id] = []
        return conversation

    async def adelete_conversation(self, conversation_id: str) -> None:
        self.messages.pop(conversation_id, None)
        self.conversations.pop(conversation_id, None)

    async def aget_messages(self, conversation_id: str) -> list[Message]:
        return list(self.messages.get(conversation_id, []))

    async def acreate_message(
        self, conversation_id: str, role: Role, content: str
    ) -> Message:
        message = Message(
            id=self._next_id("message"),
            conversation_id=conversation_id,
            role=role,
            content=content,
            created_at=self._now(),
        )
        self.messages.setdefault(conversation_id, []).append(message)
        return message


class FakeStreamingChatModel(BaseChatModel):
    """Chat model that streams a fixed list of fragments.

    It can fail before the first fragment, fail or hang after a number of
    fragments, and records the messages of every invocation.
    """

    fragments: list[str] = ["Hel", "lo"]
    fail_before_stream: bool = False
    fail_after_fragments: Optional[int] = None
    hang_after_fragments: Optional[int] = None
    received_messages: list[list[BaseMessage]] = []

    @property
    def _llm_type(self) -> str:
        return "fake-streaming-chat-model"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: Optional[list[str]] = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> ChatResult:
        self.received_messages.append(list(messages))
        return ChatResult(
            generations=[
                ChatGeneration(message=AIMessage(content="".join(self.fragments)))
            ]
        )

    async def _astream(
        self,
        messages: list[BaseMessage],
        stop: Optional[list[str]] = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> AsyncIterator[ChatGenerationChunk]:
        self.received_messages.append(list(messages))
        if self.fail_before_stream:
            raise RuntimeError("provider unavailable")
        for index, fragment in enumerate(self.fragments):
            if self.fail_after_fragments == index:
                raise RuntimeError("connection to provider lost")
            if self.hang_after_fragments == index:
                await asyncio.sleep(3600)
            yield ChatGenerationChunk(message=AIMessageChunk(content=fragment))


def build_quiz(
    quiz_id: str, questions: list[list[tuple[str, str, str]]]
) -> QuizWithQuestions:
    """Build a quiz from (option id, label, party) triples per question."""
    return QuizWithQuestions(
        id=quiz_id,
        title="Wahlkompass: Kurz & Knapp",
        description="Finde in wenigen Fragen heraus, welche Partei zu dir passt.",
        category="quick",
        questions=[
            QuizQuestion(
                id=f"{quiz_id}-q{position + 1}",
                quiz_id=quiz_id,
                text=f"Frage {position + 1}",
                position=position,
                options=[
                    QuizOption(id=option_id, text=label, party_affiliation=party)
                    for option_id, label, party in options
                ],
            )
            for position, options in enumerate(questions)
        ],
    )


def parse_sse_events(body: str) -> list[dict]:
    return [
        json.loads(event[len("data: ") :])
        for event in body.split("\n\n")
        if event.startswith("data: ")
    ]


@pytest.fixture
def firestore_service():
    return InMemoryFirestoreService()


@pytest.fixture
def chat_model():
    return FakeStreamingChatModel(fragments=["Hel", "lo"])


@pytest.fixture
def chat_llms(chat_model):
    return [LLM(name="fake-primary", model=chat_model, priority=100)]


@pytest.fixture
def app(firestore_service, chat_llms):
    return create_app(firestore_service=firestore_service, chat_llms=chat_llms)


@pytest.fixture
async def client(aiohttp_client, app):
    return await aiohttp_client(app)
