# SPDX-FileCopyrightText: 2025 2025 wahl.chat
#
# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

"""Write the quizzes, polls and articles of seed_data.py to Firestore.

Run from the repository root with `python -m data.scripts.seed_database`.
Documents get deterministic IDs, so repeated runs overwrite instead of duplicating.
"""

import asyncio
import logging

from civic_chat.firebase_service import get_firestore_service
from data.scripts.script_utils import build_article, build_poll, build_quiz
from data.scripts.seed_data import ARTICLES, POLLS, QUIZZES

logger = logging.getLogger(__name__)


async def seed_database():
    firestore_service = get_firestore_service()

    for quiz_config in QUIZZES:
        quiz = build_quiz(quiz_config)
        await firestore_service.awrite_quiz(quiz)
        logger.info(f"Seeded quiz {quiz.id} with {len(quiz.questions)} questions")

    for poll_config in POLLS:
        poll_id = await firestore_service.awrite_poll(build_poll(poll_config))
        logger.info(f"Seeded poll {poll_id}")

    for article_config in ARTICLES:
        article_id = await firestore_service.awrite_article(
            build_article(article_config)
        )
        logger.info(f"Seeded article {article_id}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed_database())
