# SPDX-FileCopyrightText: 2025 2025 wahl.chat
#
# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from langchain_core.language_models.chat_models import BaseChatModel


class CamelModel(BaseModel):
    """Base model that is stored in snake_case and served to the frontend in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self, **kwargs) -> dict:
        return self.model_dump(mode="json", by_alias=True, **kwargs)


class LLM(BaseModel):
    name: str = Field(..., description="The name of the language model.")
    model: BaseChatModel = Field(..., description="The language model.")
    priority: int = Field(
        ...,
        description="The priority for using this LLM above other options. The higher the number, the higher the priority.",
    )
    is_at_rate_limit: bool = Field(
        description="Boolean True, if the model failed on its last invocation, otherwise False.",
        default=False,
    )
    back_up_only: bool = Field(
        description="Boolean True, if the model is only used as a backup if all other models failed, otherwise False.",
        default=False,
    )
