# SPDX-FileCopyrightText: 2025 2025 wahl.chat
#
# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

from datetime import datetime
from typing import List, Optional
from pydantic import Field

from civic_chat.models.general import CamelModel


class PollOption(CamelModel):
    id: str = Field(..., description="The ID of the poll option")
    text: str = Field(..., description="The text of the poll option")


class Poll(CamelModel):
    id: str = Field(..., description="The ID of the poll")
    question: str = Field(..., description="The poll question")
    description: Optional[str] = Field(None, description="Additional context")
    created_at: Optional[datetime] = Field(
        None, description="The creation date of the poll"
    )
    options: List[PollOption] = Field(
        default_factory=list, description="The answer options of the poll"
    )


class PollVote(CamelModel):
    poll_id: str = Field(..., description="The ID of the poll")
    option_id: str = Field(..., description="The ID of the chosen option")
    user_id: str = Field(..., description="The ID of the voting user")


class PollOptionWithVotes(PollOption):
    votes: int = Field(default=0, description="The number of votes for the option")


class PollWithDetails(CamelModel):
    id: str = Field(..., description="The ID of the poll")
    question: str = Field(..., description="The poll question")
    description: Optional[str] = Field(None, description="Additional context")
    created_at: Optional[datetime] = Field(
        None, description="The creation date of the poll"
    )
    options: List[PollOptionWithVotes] = Field(
        default_factory=list, description="The options with their vote counts"
    )
    user_voted_option_id: Optional[str] = Field(
        None, description="The option the requesting user voted for, if any"
    )
