# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

import logging
import os
from typing import AsyncIterator
from langchain_openai import ChatOpenAI
import openai
from langchain_core.messages.base import BaseMessage
from civic_chat.exceptions import UpstreamUnavailableError
from civic_chat.models.general import LLM
from civic_chat.utils import safe_load_api_key

logger = logging.getLogger(__name__)


GROQ_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"


def get_stream_timeout_seconds() -> float:
    return float(os.getenv("LLM_STREAM_TIMEOUT_SECONDS", "60"))


def build_chat_llms() -> list[LLM]:
    """Instantiate every chat model whose API key is configured."""
    llms: list[LLM] = []

    groq_api_key = safe_load_api_key("GROQ_API_KEY")
    if groq_api_key is not None:
        groq_llama = ChatOpenAI(
            model=os.getenv("GROQ_MODEL", DEFAULT_GROQ_MODEL),
            api_key=groq_api_key,
            base_url=GROQ_BASE_URL,
            timeout=get_stream_timeout_seconds(),
            max_retries=0,
        )
        llms.append(LLM(name="groq-llama-3.3-70b", model=groq_llama, priority=100))

    openai_api_key = safe_load_api_key("OPENAI_API_KEY")
    if openai_api_key is not None:
        openai_gpt_4o_mini = ChatOpenAI(
            model=os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
            api_key=openai_api_key,
            timeout=get_stream_timeout_seconds(),
            max_retries=0,
        )
        llms.append(
            LLM(
                name="openai-gpt-4o-mini",
                model=openai_gpt_4o_mini,
                priority=50,
                back_up_only=True,
            )
        )

    if not llms:
        logger.warning(
            "No language model configured. Set GROQ_API_KEY or OPENAI_API_KEY to enable the chat."
        )
    return llms


async def stream_answer_from_llms(
    llms: list[LLM], messages: list[BaseMessage]
) -> AsyncIterator[str]:
    """Stream the text fragments of the first model that starts answering.

    A model that fails before producing output is skipped in favour of the next
    one; backup models are tried last. Errors after the first fragment are raised
    to the caller.
    """
    if not llms:
        raise UpstreamUnavailableError("No language model is configured")

    llms = sorted(llms, key=lambda x: x.priority, reverse=True)
    back_up_llms = [llm for llm in llms if llm.back_up_only]
    llms = [llm for llm in llms if not llm.back_up_only]

    for llm in llms + back_up_llms:
        has_started = False
        try:
            logger.debug(f"Invoking LLM {llm.name}...")
            async for chunk in llm.model.astream(messages):
                content = (
                    chunk.content
                    if isinstance(chunk.content, str)
                    else str(chunk.content)
                )
                if not content:
                    continue
                has_started = True
                llm.is_at_rate_limit = False
                yield content
            llm.is_at_rate_limit = False
            return
        except Exception as e:
            if has_started:
                raise
            if isinstance(e, openai.RateLimitError):
                logger.warning(f"LLM {llm.name} is at its rate limit: {e}")
            else:
                logger.warning(f"Error invoking LLM {llm.name}: {e}")
            llm.is_at_rate_limit = True
            continue

    raise UpstreamUnavailableError("All language models failed to respond")
