# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

from datetime import datetime, timezone
from functools import lru_cache
import logging
import os
from typing import Optional
import firebase_admin
from firebase_admin import credentials, firestore, firestore_async
from google.api_core.exceptions import AlreadyExists
from google.cloud.firestore_v1.base_query import FieldFilter
from pathlib import Path
from pydantic import BaseModel

from civic_chat.models.article import Article
from civic_chat.models.chat import Conversation, Message, Role
from civic_chat.models.poll import Poll, PollVote
from civic_chat.models.quiz import Quiz, QuizQuestion, QuizResult, QuizWithQuestions
from civic_chat.utils import load_env

logger = logging.getLogger(__name__)

# Firestore batches are limited to 500 writes
MAX_BATCH_SIZE = 500


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _to_document(model: BaseModel, exclude: set[str]) -> dict:
    document = model.model_dump(mode="json", exclude=exclude)
    # timestamps stay native so that Firestore can order by them
    if "created_at" in document:
        document["created_at"] = model.created_at
    return document


class FirestoreService:
    """Data access for all entities of the app, backed by the async Firestore client."""

    def __init__(self, async_db):
        self.async_db = async_db

    # === Quizzes ===

    async def aget_quizzes(self) -> list[Quiz]:
        quizzes = self.async_db.collection("quizzes").stream()
        return [Quiz(id=quiz.id, **quiz.to_dict()) async for quiz in quizzes]

    async def aget_quiz_by_id(self, quiz_id: str) -> Optional[QuizWithQuestions]:
        quiz_ref = self.async_db.collection("quizzes").document(quiz_id)
        quiz = await quiz_ref.get()
        if not quiz.exists:
            return None
        questions = quiz_ref.collection("questions").order_by("position").stream()
        return QuizWithQuestions(
            id=quiz.id,
            **quiz.to_dict(),
            questions=[
                QuizQuestion(id=question.id, quiz_id=quiz.id, **question.to_dict())
                async for question in questions
            ],
        )

    async def awrite_quiz(self, quiz: QuizWithQuestions) -> str:
        quiz_ref = self.async_db.collection("quizzes").document(quiz.id)
        await quiz_ref.set(_to_document(quiz, exclude={"id", "questions"}))
        for question in quiz.questions:
            question_ref = quiz_ref.collection("questions").document(question.id)
            await question_ref.set(_to_document(question, exclude={"id", "quiz_id"}))
        return quiz_ref.id

    async def awrite_quiz_result(self, result: QuizResult) -> QuizResult:
        result_ref = self.async_db.collection("quiz_results").document()
        stored_result = result.model_copy(
            update={"id": result_ref.id, "created_at": result.created_at or _now()}
        )
        await result_ref.set(_to_document(stored_result, exclude={"id"}))
        return stored_result

    # === Polls ===

    async def aget_polls(self) -> list[Poll]:
        polls = (
            self.async_db.collection("polls")
            .order_by("created_at", direction=firestore.Query.DESCENDING)
            .stream()
        )
        return [Poll(id=poll.id, **poll.to_dict()) async for poll in polls]

    async def aget_poll_by_id(self, poll_id: str) -> Optional[Poll]:
        poll = await self.async_db.collection("polls").document(poll_id).get()
        if poll.exists:
            return Poll(id=poll.id, **poll.to_dict())
        return None

    async def awrite_poll(self, poll: Poll) -> str:
        poll_ref = self.async_db.collection("polls").document(poll.id)
        stored_poll = poll.model_copy(update={"created_at": poll.created_at or _now()})
        await poll_ref.set(_to_document(stored_poll, exclude={"id"}))
        return poll_ref.id

    async def aget_poll_votes(self, poll_id: str) -> list[PollVote]:
        votes = (
            self.async_db.collection("poll_votes")
            .where(filter=FieldFilter("poll_id", "==", poll_id))
            .stream()
        )
        return [PollVote(**vote.to_dict()) async for vote in votes]

    async def awrite_poll_vote(self, vote: PollVote) -> bool:
        """Record a vote. Returns False if the user already voted in this poll."""
        vote_ref = self.async_db.collection("poll_votes").document(
            f"{vote.poll_id}_{vote.user_id}"
        )
        try:
            await vote_ref.create(_to_document(vote, exclude=set()))
        except AlreadyExists:
            return False
        return True

    # === Articles ===

    async def aget_articles(self) -> list[Article]:
        articles = (
            self.async_db.collection("articles")
            .order_by("created_at", direction=firestore.Query.DESCENDING)
            .stream()
        )
        return [Article(id=article.id, **article.to_dict()) async for article in articles]

    async def awrite_article(self, article: Article) -> str:
        article_ref = self.async_db.collection("articles").document(article.id)
        stored_article = article.model_copy(
            update={"created_at": article.created_at or _now()}
        )
        await article_ref.set(_to_document(stored_article, exclude={"id"}))
        return article_ref.id

    # === Conversations ===

    async def aget_conversations(self, user_id: str) -> list[Conversation]:
        conversations = (
            self.async_db.collection("conversations")
            .where(filter=FieldFilter("user_id", "==", user_id))
            .order_by("created_at", direction=firestore.Query.DESCENDING)
            .stream()
        )
        return [
            Conversation(id=conversation.id, **conversation.to_dict())
            async for conversation in conversations
        ]

    async def aget_conversation_by_id(
        self, conversation_id: str
    ) -> Optional[Conversation]:
        conversation = (
            await self.async_db.collection("conversations")
            .document(conversation_id)
            .get()
        )
        if conversation.exists:
            return Conversation(id=conversation.id, **conversation.to_dict())
        return None

    async def acreate_conversation(
        self, user_id: str, title: str, system_prompt: Optional[str] = None
    ) -> Conversation:
        conversation_ref = self.async_db.collection("conversations").document()
        conversation = Conversation(
            id=conversation_ref.id,
            user_id=user_id,
            title=title,
            system_prompt=system_prompt or None,
            created_at=_now(),
        )
        await conversation_ref.set(_to_document(conversation, exclude={"id"}))
        return conversation

    async def adelete_conversation(self, conversation_id: str) -> None:
        conversation_ref = self.async_db.collection("conversations").document(
            conversation_id
        )
        message_refs = [
            message.reference
            async for message in conversation_ref.collection("messages").stream()
        ]
        for start in range(0, len(message_refs), MAX_BATCH_SIZE):
            batch = self.async_db.batch()
            for message_ref in message_refs[start : start + MAX_BATCH_SIZE]:
                batch.delete(message_ref)
            await batch.commit()
        await conversation_ref.delete()
        logger.debug(
            f"Deleted conversation {conversation_id} with {len(message_refs)} messages"
        )

    async def aget_messages(self, conversation_id: str) -> list[Message]:
        messages = (
            self.async_db.collection("conversations")
            .document(conversation_id)
            .collection("messages")
            .order_by("created_at")
            .stream()
        )
        return [
            Message(id=message.id, conversation_id=conversation_id, **message.to_dict())
            async for message in messages
        ]

    async def acreate_message(
        self, conversation_id: str, role: Role, content: str
    ) -> Message:
        message_ref = (
            self.async_db.collection("conversations")
            .document(conversation_id)
            .collection("messages")
            .document()
        )
        message = Message(
            id=message_ref.id,
            conversation_id=conversation_id,
            role=role,
            content=content,
            created_at=_now(),
        )
        await message_ref.set(_to_document(message, exclude={"id", "conversation_id"}))
        return message


@lru_cache(maxsize=1)
def get_firestore_service() -> FirestoreService:
    load_env()

    credentials_path = os.getenv(
        "FIREBASE_CREDENTIALS_PATH",
        "civic-chat-firebase-adminsdk.json"
        if os.getenv("ENV") == "prod"
        else "civic-chat-dev-firebase-adminsdk.json",
    )

    # If the credentials file does not exist, use the application default credentials
    if Path(credentials_path).exists():
        logger.info(f"Initializing Firebase with credentials from {credentials_path}")
        cred = credentials.Certificate(credentials_path)
        firebase_admin.initialize_app(cred)
    else:
        logger.info("Initializing Firebase with application default credentials")
        firebase_admin.initialize_app()

    return FirestoreService(firestore_async.client())
