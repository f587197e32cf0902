# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

"""Wahlkompass scoring: turns the answers to a quiz into a party alignment profile."""

import logging
import math
from typing import Callable, Mapping, Optional, Sequence, Union

from civic_chat.exceptions import NotFoundError
from civic_chat.models.quiz import (
    NEUTRAL_PARTY,
    QuizOption,
    QuizResult,
    QuizWithQuestions,
)

logger = logging.getLogger(__name__)


KNOWN_PARTIES: list[str] = [
    "CDU",
    "SPD",
    "Grüne",
    "FDP",
    "AfD",
    "Linke",
    "BSW",
    "Freie Wähler",
    "ÖDP",
    "Die PARTEI",
    "Volt",
    "Tierschutzpartei",
    "Klimaliste BW",
]

AGREE_LABEL = "Stimme zu"
NEUTRAL_LABEL = "Neutral"
MAX_POINTS_PER_QUESTION = 2

AnswerSet = Mapping[str, Union[str, int]]
WeightingStrategy = Callable[[QuizOption], int]


def label_weighting(option: QuizOption) -> int:
    """Default weighting: 2 points for "Stimme zu", 1 point for "Neutral", 0 otherwise."""
    label = option.text.strip().casefold()
    if label == AGREE_LABEL.casefold():
        return 2
    if label == NEUTRAL_LABEL.casefold():
        return 1
    return 0


def points_weighting(option: QuizOption) -> int:
    """Weighting by the points stored with the option, bounded by the per-question maximum."""
    return max(0, min(option.points or 0, MAX_POINTS_PER_QUESTION))


def _collect_parties(
    quiz: QuizWithQuestions, parties: Sequence[str]
) -> dict[str, int]:
    accumulators = {party: 0 for party in parties if party != NEUTRAL_PARTY}
    for question in quiz.questions:
        for option in question.options:
            if option.party_affiliation and option.party_affiliation != NEUTRAL_PARTY:
                accumulators.setdefault(option.party_affiliation, 0)
    return accumulators


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_answers(
    quiz: QuizWithQuestions,
    answers: AnswerSet,
    weighting: WeightingStrategy = label_weighting,
    parties: Sequence[str] = KNOWN_PARTIES,
) -> tuple[dict[str, int], str]:
    """Score the answers to a quiz.

    Returns the percentage (0-100) per party and the matched party. Every party
    in `parties` and every party appearing in the quiz's options gets a score.
    Percentages are independent affinities and need not add up to 100.

    Answers are looked up by question ID. An answer whose option does not belong
    to the referenced question is ignored.
    """
    accumulators = _collect_parties(quiz, parties)

    for question in quiz.questions:
        selected_option_id = answers.get(str(question.id))
        if selected_option_id is None:
            continue
        option: Optional[QuizOption] = next(
            (o for o in question.options if o.id == str(selected_option_id)), None
        )
        if option is None:
            logger.debug(
                f"Ignoring answer {selected_option_id} for question {question.id}: option is not part of the question"
            )
            continue
        if option.party_affiliation and option.party_affiliation != NEUTRAL_PARTY:
            accumulators[option.party_affiliation] += weighting(option)

    total_possible = len(quiz.questions) * MAX_POINTS_PER_QUESTION
    party_scores: dict[str, int] = {}
    for party, score in accumulators.items():
        if total_possible == 0:
            party_scores[party] = 0
            continue
        percentage = _round_half_up(score / total_possible * 100)
        party_scores[party] = max(0, min(percentage, 100))

    max_score = 0
    matched_party = NEUTRAL_PARTY
    for party, score in party_scores.items():
        if score > max_score:
            max_score = score
            matched_party = party

    return party_scores, matched_party


async def submit_quiz(
    firestore_service,
    quiz_id: str,
    user_id: str,
    answers: AnswerSet,
    weighting: WeightingStrategy = label_weighting,
) -> QuizResult:
    quiz = await firestore_service.aget_quiz_by_id(quiz_id)
    if quiz is None:
        raise NotFoundError("Quiz nicht gefunden")

    party_scores, matched_party = score_answers(quiz, answers, weighting=weighting)
    logger.debug(
        f"Scored quiz {quiz_id} for user {user_id}: matched {matched_party} with {party_scores}"
    )

    result = QuizResult(
        user_id=user_id,
        quiz_id=quiz_id,
        matched_party=matched_party,
        party_scores=party_scores,
    )
    return await firestore_service.awrite_quiz_result(result)
