# SPDX-FileCopyrightText: 2025 2025 wahl.chat
#
# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

from datetime import datetime
from typing import List, Optional
from pydantic import Field

from civic_chat.models.general import CamelModel


NEUTRAL_PARTY = "Neutral"


class QuizOption(CamelModel):
    id: str = Field(..., description="The ID of the option")
    text: str = Field(..., description="The label of the option, e.g. 'Stimme zu'")
    party_affiliation: str = Field(
        ...,
        description="The party the option is associated with or 'Neutral'",
    )
    points: Optional[int] = Field(
        default=1, description="The point weight stored with the option"
    )


class QuizQuestion(CamelModel):
    id: str = Field(..., description="The ID of the question")
    quiz_id: str = Field(..., description="The ID of the quiz the question belongs to")
    text: str = Field(..., description="The question text")
    position: int = Field(default=0, description="The position inside the quiz")
    options: List[QuizOption] = Field(
        default_factory=list, description="The answer options of the question"
    )


class Quiz(CamelModel):
    id: str = Field(..., description="The ID of the quiz")
    title: str = Field(..., description="The title of the quiz")
    description: str = Field(..., description="The description of the quiz")
    category: str = Field(
        ..., description="The category, e.g. 'general', 'quick' or 'landtag2026'"
    )
    image_url: Optional[str] = Field(None, description="The cover image of the quiz")


class QuizWithQuestions(Quiz):
    questions: List[QuizQuestion] = Field(
        default_factory=list, description="The ordered questions of the quiz"
    )


class QuizResult(CamelModel):
    id: Optional[str] = Field(None, description="The ID of the stored result")
    user_id: str = Field(..., description="The ID of the user who submitted the quiz")
    quiz_id: str = Field(..., description="The ID of the submitted quiz")
    matched_party: str = Field(
        ..., description="The party with the highest score or 'Neutral'"
    )
    party_scores: dict[str, int] = Field(
        ..., description="The percentage score (0-100) per party"
    )
    created_at: Optional[datetime] = Field(
        None, description="The creation date of the result"
    )
