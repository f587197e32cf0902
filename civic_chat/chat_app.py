# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

import asyncio
from contextlib import asynccontextmanager
import json
import logging
from typing import AsyncIterator, Optional

from aiohttp import web
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langchain_core.messages.base import BaseMessage
from pydantic import BaseModel

from civic_chat.app_keys import (
    chat_llms_key,
    conversation_locks_key,
    firestore_service_key,
)
from civic_chat.exceptions import (
    ConversationBusyError,
    NotFoundError,
    UpstreamUnavailableError,
)
from civic_chat.llms import get_stream_timeout_seconds, stream_answer_from_llms
from civic_chat.models.chat import Conversation, Message, Role
from civic_chat.models.dtos import (
    ConversationWithMessagesDto,
    CreateConversationRequestDto,
    SendMessageRequestDto,
    StreamChunkDto,
    StreamDoneDto,
    StreamErrorDto,
)
from civic_chat.prompts import (
    DEFAULT_CONVERSATION_TITLE,
    debate_title_template,
    get_persona_by_id,
)
from civic_chat.utils import build_chat_history_string, parse_request_body

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

route_prefix = "/api"

SEND_MESSAGE_ERROR = "Failed to send message"


class ConversationLocks:
    """Allows at most one streaming answer per conversation within this process."""

    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}

    def is_locked(self, conversation_id: str) -> bool:
        lock = self._locks.get(conversation_id)
        return lock is not None and lock.locked()

    @asynccontextmanager
    async def hold(self, conversation_id: str):
        lock = self._locks.setdefault(conversation_id, asyncio.Lock())
        if lock.locked():
            raise ConversationBusyError(
                f"Conversation {conversation_id} is already receiving an answer"
            )
        try:
            async with lock:
                yield
        finally:
            if not lock.locked() and self._locks.get(conversation_id) is lock:
                del self._locks[conversation_id]


def build_provider_messages(
    conversation: Conversation, messages: list[Message]
) -> list[BaseMessage]:
    provider_messages: list[BaseMessage] = []
    if conversation.system_prompt:
        provider_messages.append(SystemMessage(content=conversation.system_prompt))
    for message in messages:
        if message.role == Role.USER:
            provider_messages.append(HumanMessage(content=message.content))
        else:
            provider_messages.append(AIMessage(content=message.content))
    return provider_messages


def format_sse_event(dto: BaseModel) -> bytes:
    return f"data: {json.dumps(dto.model_dump(mode='json', by_alias=True), ensure_ascii=False)}\n\n".encode(
        "utf-8"
    )


async def write_error_event(response: web.StreamResponse, message: str) -> None:
    try:
        await response.write(format_sse_event(StreamErrorDto(error=message)))
    except ConnectionResetError:
        logger.info("Client already disconnected, error event not delivered")


async def relay_chat_response(
    request: web.Request,
    firestore_service,
    conversation: Conversation,
    fragments: AsyncIterator[str],
    timeout: float,
) -> web.StreamResponse:
    """Forward every fragment as its own server-sent event and persist the answer once complete.

    Failures before the first fragment raise UpstreamUnavailableError, so the
    caller can still answer with an error status. Later failures are reported
    as an error event on the open stream and nothing is persisted.
    """
    try:
        first_fragment: Optional[str] = await asyncio.wait_for(
            anext(fragments, None), timeout=timeout
        )
    except asyncio.TimeoutError as e:
        await fragments.aclose()
        raise UpstreamUnavailableError(
            "The language model did not respond in time"
        ) from e

    response = web.StreamResponse(
        status=200,
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
    response.content_type = "text/event-stream"
    response.charset = "utf-8"
    await response.prepare(request)

    full_response = ""
    fragment = first_fragment
    try:
        while fragment is not None:
            full_response += fragment
            await response.write(format_sse_event(StreamChunkDto(content=fragment)))
            fragment = await asyncio.wait_for(anext(fragments, None), timeout=timeout)

        await firestore_service.acreate_message(
            conversation.id, Role.ASSISTANT, full_response
        )
        await response.write(format_sse_event(StreamDoneDto()))
        logger.info(
            f"Streamed answer with {len(full_response)} characters for conversation {conversation.id}"
        )
    except ConnectionResetError:
        logger.info(
            f"Client disconnected from conversation {conversation.id} after {len(full_response)} characters"
        )
    except asyncio.TimeoutError:
        logger.error(
            f"Language model stopped responding for conversation {conversation.id} after {len(full_response)} characters"
        )
        await write_error_event(response, "The language model stopped responding")
    except Exception as e:
        logger.error(
            f"Error streaming answer for conversation {conversation.id}: {e}",
            exc_info=True,
        )
        await write_error_event(response, SEND_MESSAGE_ERROR)
    finally:
        await fragments.aclose()

    try:
        await response.write_eof()
    except ConnectionResetError:
        pass
    return response


@routes.get(f"{route_prefix}/conversations")
async def list_conversations(request: web.Request):
    firestore_service = request.app[firestore_service_key]
    conversations = await firestore_service.aget_conversations(request["user_id"])
    return web.json_response(
        [conversation.to_json_dict() for conversation in conversations]
    )


@routes.post(f"{route_prefix}/conversations")
async def create_conversation(request: web.Request):
    body = await parse_request_body(request, CreateConversationRequestDto)
    firestore_service = request.app[firestore_service_key]

    title = body.title
    system_prompt = body.system_prompt
    if body.persona_id is not None:
        persona = get_persona_by_id(body.persona_id)
        if persona is None:
            raise NotFoundError(f"Persona {body.persona_id} not found")
        system_prompt = system_prompt or persona.instruction
        title = title or debate_title_template.format(persona_name=persona.name)

    conversation = await firestore_service.acreate_conversation(
        request["user_id"], title or DEFAULT_CONVERSATION_TITLE, system_prompt
    )
    logger.info(f"Created conversation {conversation.id} for {request['user_id']}")
    return web.json_response(conversation.to_json_dict(), status=201)


@routes.get(f"{route_prefix}/conversations/{{conversation_id}}")
async def get_conversation(request: web.Request):
    conversation_id = request.match_info["conversation_id"]
    firestore_service = request.app[firestore_service_key]

    conversation = await firestore_service.aget_conversation_by_id(conversation_id)
    if conversation is None:
        raise NotFoundError("Conversation not found")
    messages = await firestore_service.aget_messages(conversation_id)

    return web.json_response(
        ConversationWithMessagesDto(
            conversation=conversation, messages=messages
        ).to_json_dict()
    )


@routes.delete(f"{route_prefix}/conversations/{{conversation_id}}")
async def delete_conversation(request: web.Request):
    conversation_id = request.match_info["conversation_id"]
    firestore_service = request.app[firestore_service_key]

    conversation = await firestore_service.aget_conversation_by_id(conversation_id)
    if conversation is None:
        raise NotFoundError("Conversation not found")
    if request.app[conversation_locks_key].is_locked(conversation_id):
        raise ConversationBusyError(
            f"Conversation {conversation_id} is still receiving an answer"
        )

    await firestore_service.adelete_conversation(conversation_id)
    logger.info(f"Deleted conversation {conversation_id}")
    return web.Response(status=204)


@routes.post(f"{route_prefix}/conversations/{{conversation_id}}/messages")
async def send_message(request: web.Request):
    conversation_id = request.match_info["conversation_id"]
    body = await parse_request_body(request, SendMessageRequestDto)
    firestore_service = request.app[firestore_service_key]

    conversation = await firestore_service.aget_conversation_by_id(conversation_id)
    if conversation is None:
        raise NotFoundError("Conversation not found")

    async with request.app[conversation_locks_key].hold(conversation_id):
        # the user message is stored before the model is asked
        await firestore_service.acreate_message(conversation_id, Role.USER, body.content)
        history = await firestore_service.aget_messages(conversation_id)
        logger.debug(
            f"Conversation {conversation_id} history:\n{build_chat_history_string(history)}"
        )

        provider_messages = build_provider_messages(conversation, history)
        fragments = stream_answer_from_llms(request.app[chat_llms_key], provider_messages)
        return await relay_chat_response(
            request,
            firestore_service,
            conversation,
            fragments,
            timeout=get_stream_timeout_seconds(),
        )
