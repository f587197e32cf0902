# SPDX-FileCopyrightText: 2025 2025 wahl.chat
#
# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

from enum import Enum
from typing import Optional
from pydantic import Field
from datetime import datetime

from civic_chat.models.general import CamelModel


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class Message(CamelModel):
    id: Optional[str] = Field(None, description="The ID of the message")
    conversation_id: str = Field(
        ..., description="The ID of the conversation the message belongs to"
    )
    role: Role = Field(..., description="The role of the message author")
    content: str = Field(..., description="The message content")
    created_at: Optional[datetime] = Field(
        None, description="The creation date of the message"
    )


class Conversation(CamelModel):
    id: Optional[str] = Field(None, description="The ID of the conversation")
    user_id: str = Field(..., description="The ID of the user owning the conversation")
    title: str = Field(..., description="The conversation title")
    system_prompt: Optional[str] = Field(
        None, description="The persona instruction sent ahead of every request"
    )
    created_at: Optional[datetime] = Field(
        None, description="The creation date of the conversation"
    )


class Persona(CamelModel):
    id: str = Field(..., description="The key of the persona")
    name: str = Field(..., description="The display name of the persona")
    party: str = Field(..., description="The party or office the persona represents")
    image_url: Optional[str] = Field(None, description="The avatar of the persona")
    instruction: str = Field(
        ..., description="The system instruction that makes the model act as the persona"
    )
