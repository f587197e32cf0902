# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

import os
from pathlib import Path
from typing import Optional, TypeVar, Union
import logging

from aiohttp import web
from dotenv import load_dotenv
from pydantic import BaseModel, SecretStr, ValidationError

from civic_chat.exceptions import BadRequestError
from civic_chat.models.chat import Message, Role
from civic_chat.models.poll import Poll, PollOptionWithVotes, PollVote, PollWithDetails

DtoT = TypeVar("DtoT", bound=BaseModel)

BASE_DIR = Path(__file__).resolve().parent.parent
EXPECTED_API_NAME = "civic-chat-api"

logger = logging.getLogger(__name__)


def load_env():
    """Load environment variables from the .env file if API_NAME is not already set to the expected value (used as an indicator of correctly provided environment variables)."""
    api_name = os.getenv("API_NAME")

    if api_name == EXPECTED_API_NAME:
        return

    if api_name is not None:
        raise ValueError(
            f"API_NAME environment variable is set to '{api_name}' but expected '{EXPECTED_API_NAME}'. "
            "Please check your environment configuration."
        )

    env_path = BASE_DIR / ".env"
    if env_path.exists():
        logger.info(f"Loading environment variables from {env_path}...")
        load_dotenv(env_path, override=True)
        logger.info(f"Loaded environment variables from {env_path}.")

    api_name = os.getenv("API_NAME")
    if not api_name:
        raise ValueError(
            "API_NAME environment variable not set. Please set it in your environment or .env file."
        )
    if api_name != EXPECTED_API_NAME:
        raise ValueError(
            f"API_NAME environment variable is set to '{api_name}' but expected '{EXPECTED_API_NAME}'. "
            "Please check your environment configuration or .env file."
        )


def safe_load_api_key(api_key: str) -> Optional[SecretStr]:
    key = os.getenv(api_key)
    if not key:
        return None
    return SecretStr(key)


def get_cors_allowed_origins(env: Optional[str]) -> Union[str, list[str]]:
    if env == "dev":
        return "*"
    else:
        return [
            "https://civic.chat",
            "https://www.civic.chat",
            "http://localhost:5000",
            "http://localhost:5173",
        ]


def build_chat_history_string(chat_history: list[Message]) -> str:
    chat_history_string = ""
    for i, message in enumerate(chat_history):
        sender = "Nutzer" if message.role == Role.USER else "Assistent"
        chat_history_string += f'{i + 1}. {sender}: "{message.content}"\n'
    return chat_history_string


def aggregate_poll_votes(
    poll: Poll, votes: list[PollVote], user_id: Optional[str] = None
) -> PollWithDetails:
    # votes for options that are no longer part of the poll are not counted
    counts = {option.id: 0 for option in poll.options}
    user_voted_option_id = None
    for vote in votes:
        if vote.poll_id != poll.id or vote.option_id not in counts:
            continue
        counts[vote.option_id] += 1
        if user_id is not None and vote.user_id == user_id:
            user_voted_option_id = vote.option_id

    return PollWithDetails(
        id=poll.id,
        question=poll.question,
        description=poll.description,
        created_at=poll.created_at,
        options=[
            PollOptionWithVotes(id=option.id, text=option.text, votes=counts[option.id])
            for option in poll.options
        ],
        user_voted_option_id=user_voted_option_id,
    )


async def parse_request_body(request: web.Request, dto_class: type[DtoT]) -> DtoT:
    if not request.can_read_body:
        body = {}
    else:
        try:
            body = await request.json()
        except ValueError as e:
            raise BadRequestError("Request body must be valid JSON") from e

    try:
        return dto_class.model_validate(body)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"]) or None
        raise BadRequestError(first_error["msg"], field=field) from e
