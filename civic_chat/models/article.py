# SPDX-FileCopyrightText: 2025 2025 wahl.chat
#
# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import Field

from civic_chat.models.general import CamelModel


class ArticleType(str, Enum):
    NEWS = "news"
    PROJECT = "project"


class Article(CamelModel):
    """
    A news article or a project description shown under "Aktuelle Themen".
    """

    id: str = Field(..., description="The ID of the article")
    title: str = Field(..., description="The title of the article")
    summary: Optional[str] = Field(None, description="A short summary")
    content: str = Field(..., description="The article body")
    type: ArticleType = Field(..., description="Whether this is news or a project")
    image_url: Optional[str] = Field(None, description="The teaser image")
    source: Optional[str] = Field(None, description="The publisher, e.g. Tagesschau")
    source_url: Optional[str] = Field(None, description="The link to the full article")
    created_at: Optional[datetime] = Field(
        None, description="The creation date of the article"
    )
