# SPDX-FileCopyrightText: 2025 2025 wahl.chat
#
# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

from pydantic import Field
from typing import List, Optional, Union

from civic_chat.models.general import CamelModel
from .chat import Conversation, Message


class QuizSubmissionRequestDto(CamelModel):
    answers: dict[str, Optional[Union[str, int]]] = Field(
        ..., description="Mapping of question IDs to the selected option IDs"
    )


class PollVoteRequestDto(CamelModel):
    option_id: Union[str, int] = Field(..., description="The ID of the chosen option")


class PollVoteResponseDto(CamelModel):
    success: bool = Field(..., description="Whether the vote was recorded")


class CreateConversationRequestDto(CamelModel):
    title: Optional[str] = Field(None, description="The conversation title")
    system_prompt: Optional[str] = Field(
        None, description="A persona instruction for the assistant"
    )
    persona_id: Optional[str] = Field(
        None, description="The key of a predefined debate persona"
    )


class ConversationWithMessagesDto(CamelModel):
    conversation: Conversation = Field(..., description="The conversation")
    messages: List[Message] = Field(
        ..., description="The messages of the conversation in creation order"
    )


class SendMessageRequestDto(CamelModel):
    content: str = Field(
        ..., min_length=1, max_length=4000, description="The user message"
    )


class ErrorDto(CamelModel):
    message: str = Field(..., description="A human readable error message")
    field: Optional[str] = Field(None, description="The invalid field, if any")


class StreamChunkDto(CamelModel):
    content: str = Field(..., description="A text fragment of the assistant answer")


class StreamDoneDto(CamelModel):
    done: bool = Field(default=True, description="Marks the end of the answer")


class StreamErrorDto(CamelModel):
    error: str = Field(..., description="Why the answer was aborted")
