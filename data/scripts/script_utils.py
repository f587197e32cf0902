# SPDX-FileCopyrightText: 2025 2025 wahl.chat
#
# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

import re

from civic_chat.models.article import Article, ArticleType
from civic_chat.models.poll import Poll, PollOption
from civic_chat.models.quiz import (
    NEUTRAL_PARTY,
    QuizOption,
    QuizQuestion,
    QuizWithQuestions,
)


def convert_party_short_hand_to_party_name(party_short_hand: str) -> str:
    mapping = {
        "CDU/CSU": "CDU",
        "CDU": "CDU",
        "SPD": "SPD",
        "DIE LINKE.": "Linke",
        "DIE LINKE": "Linke",
        "LINKE": "Linke",
        "B90/GRÜNE": "Grüne",
        "GRÜNE": "Grüne",
        "FDP": "FDP",
        "AfD": "AfD",
        "AFD": "AfD",
        "Volt": "Volt",
        "BSW": "BSW",
        "FW": "Freie Wähler",
        "FREIE WÄHLER": "Freie Wähler",
        "neutral": NEUTRAL_PARTY,
        "NEUTRAL": NEUTRAL_PARTY,
    }
    return mapping.get(party_short_hand, party_short_hand)


def slugify(text: str) -> str:
    slug = text.lower()
    # replace umlauts with their ASCII representation
    slug = slug.replace("ä", "ae").replace("ö", "oe").replace("ü", "ue")
    slug = slug.replace("ß", "ss")
    return re.sub(r"[^a-z0-9]+", "-", slug).strip("-")


def build_quiz(quiz_config: dict) -> QuizWithQuestions:
    """Build a quiz with deterministic IDs so that seeding can be repeated without duplicates."""
    quiz_id = quiz_config["category"]
    return QuizWithQuestions(
        id=quiz_id,
        title=quiz_config["title"],
        description=quiz_config["description"],
        category=quiz_config["category"],
        image_url=quiz_config.get("image_url"),
        questions=[
            QuizQuestion(
                id=f"{quiz_id}-q{position + 1}",
                quiz_id=quiz_id,
                text=question["text"],
                position=position,
                options=[
                    QuizOption(
                        id=f"{quiz_id}-q{position + 1}-o{option_position + 1}",
                        text=label,
                        party_affiliation=convert_party_short_hand_to_party_name(
                            party
                        ),
                    )
                    for option_position, (label, party) in enumerate(
                        question["options"]
                    )
                ],
            )
            for position, question in enumerate(quiz_config["questions"])
        ],
    )


def build_poll(poll_config: dict) -> Poll:
    poll_id = slugify(poll_config["question"])[:60].rstrip("-")
    return Poll(
        id=poll_id,
        question=poll_config["question"],
        description=poll_config.get("description"),
        options=[
            PollOption(id=str(position + 1), text=text)
            for position, text in enumerate(poll_config["options"])
        ],
    )


def build_article(article_config: dict) -> Article:
    return Article(
        id=slugify(article_config["title"])[:60].rstrip("-"),
        title=article_config["title"],
        summary=article_config.get("summary"),
        content=article_config["content"],
        type=ArticleType(article_config.get("type", "news")),
        image_url=article_config.get("image_url"),
        source=article_config.get("source"),
        source_url=article_config.get("source_url"),
    )
