# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

from typing import Any, Callable

from aiohttp import web

from civic_chat.models.general import LLM

firestore_service_key = web.AppKey("firestore_service", Any)
chat_llms_key = web.AppKey("chat_llms", list[LLM])
quiz_weighting_key = web.AppKey("quiz_weighting", Callable[..., int])
conversation_locks_key = web.AppKey("conversation_locks", Any)
