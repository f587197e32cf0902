# SPDX-License-Identifier: PolyForm-Noncommercial-1.0.0

import argparse
import logging
import os
import uuid
from typing import Optional

from aiohttp import web
import aiohttp_cors

from civic_chat.app_keys import (
    chat_llms_key,
    conversation_locks_key,
    firestore_service_key,
    quiz_weighting_key,
)
from civic_chat.chat_app import (
    SEND_MESSAGE_ERROR,
    ConversationLocks,
    routes as chat_routes,
)
from civic_chat.exceptions import (
    BadRequestError,
    ConversationBusyError,
    NotFoundError,
    UpstreamUnavailableError,
)
from civic_chat.firebase_service import get_firestore_service
from civic_chat.llms import build_chat_llms
from civic_chat.models.dtos import (
    ErrorDto,
    PollVoteRequestDto,
    PollVoteResponseDto,
    QuizSubmissionRequestDto,
)
from civic_chat.models.general import LLM
from civic_chat.models.poll import PollVote
from civic_chat.prompts import DEBATE_PERSONAS
from civic_chat.quiz_scoring import label_weighting, submit_quiz
from civic_chat.utils import (
    aggregate_poll_votes,
    get_cors_allowed_origins,
    load_env,
    parse_request_body,
)

LOGGING_FORMAT = (
    "%(asctime)s - %(name)s - %(filename)s - %(lineno)d - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

route_prefix = "/api"

USER_ID_HEADER = "X-User-Id"


def resolve_user_id(request: web.Request) -> str:
    # No authentication yet: callers are guests identified by header or address
    user_id = request.headers.get(USER_ID_HEADER)
    if user_id:
        return user_id
    if request.remote:
        return f"guest_{request.remote}"
    # without a peer address every request is its own guest
    return f"guest_{uuid.uuid4().hex}"


@web.middleware
async def user_identity_middleware(request, handler):
    request["user_id"] = resolve_user_id(request)
    return await handler(request)


@web.middleware
async def error_middleware(request, handler):
    try:
        return await handler(request)
    except NotFoundError as e:
        return web.json_response(
            ErrorDto(message=e.message).to_json_dict(exclude_none=True), status=404
        )
    except BadRequestError as e:
        return web.json_response(
            ErrorDto(message=e.message, field=e.field).to_json_dict(
                exclude_none=True
            ),
            status=400,
        )
    except ConversationBusyError as e:
        logger.warning(f"Rejected request {request.method} {request.path}: {e}")
        return web.json_response(
            ErrorDto(message=str(e)).to_json_dict(exclude_none=True), status=409
        )
    except UpstreamUnavailableError as e:
        logger.error(f"Language model unavailable for {request.path}: {e}")
        return web.json_response({"error": SEND_MESSAGE_ERROR}, status=500)
    except web.HTTPException:
        raise
    except Exception as e:
        logger.error(
            f"Unhandled error for {request.method} {request.path}: {e}", exc_info=True
        )
        return web.json_response({"error": SEND_MESSAGE_ERROR}, status=500)


@routes.get("/healthz")
async def health_check(request):
    """Kubernetes health check endpoint."""
    return web.json_response({"status": "ok"})


@routes.get(f"{route_prefix}/quizzes")
async def list_quizzes(request):
    quizzes = await request.app[firestore_service_key].aget_quizzes()
    return web.json_response([quiz.to_json_dict() for quiz in quizzes])


@routes.get(f"{route_prefix}/quizzes/{{quiz_id}}")
async def get_quiz(request):
    quiz_id = request.match_info["quiz_id"]
    quiz = await request.app[firestore_service_key].aget_quiz_by_id(quiz_id)
    if quiz is None:
        raise NotFoundError("Quiz nicht gefunden")
    return web.json_response(quiz.to_json_dict())


@routes.post(f"{route_prefix}/quizzes/{{quiz_id}}/submit")
async def submit_quiz_answers(request):
    quiz_id = request.match_info["quiz_id"]
    body = await parse_request_body(request, QuizSubmissionRequestDto)

    result = await submit_quiz(
        request.app[firestore_service_key],
        quiz_id,
        request["user_id"],
        body.answers,
        weighting=request.app[quiz_weighting_key],
    )
    logger.info(
        f"Quiz {quiz_id} submitted by {request['user_id']}, matched party: {result.matched_party}"
    )
    return web.json_response(result.to_json_dict())


@routes.get(f"{route_prefix}/polls")
async def list_polls(request):
    firestore_service = request.app[firestore_service_key]
    polls = await firestore_service.aget_polls()
    polls_with_details = [
        aggregate_poll_votes(
            poll, await firestore_service.aget_poll_votes(poll.id), request["user_id"]
        )
        for poll in polls
    ]
    return web.json_response([poll.to_json_dict() for poll in polls_with_details])


@routes.post(f"{route_prefix}/polls/{{poll_id}}/vote")
async def vote_poll(request):
    poll_id = request.match_info["poll_id"]
    body = await parse_request_body(request, PollVoteRequestDto)
    firestore_service = request.app[firestore_service_key]

    poll = await firestore_service.aget_poll_by_id(poll_id)
    if poll is None:
        raise NotFoundError("Umfrage nicht gefunden")

    option_id = str(body.option_id)
    if option_id not in [option.id for option in poll.options]:
        raise BadRequestError("Ungültige Antwortoption", field="optionId")

    is_recorded = await firestore_service.awrite_poll_vote(
        PollVote(poll_id=poll_id, option_id=option_id, user_id=request["user_id"])
    )
    if not is_recorded:
        raise BadRequestError("Bereits abgestimmt")

    logger.debug(f"Recorded vote of {request['user_id']} in poll {poll_id}")
    return web.json_response(PollVoteResponseDto(success=True).to_json_dict())


@routes.get(f"{route_prefix}/articles")
async def list_articles(request):
    articles = await request.app[firestore_service_key].aget_articles()
    return web.json_response([article.to_json_dict() for article in articles])


@routes.get(f"{route_prefix}/personas")
async def list_personas(request):
    return web.json_response([persona.to_json_dict() for persona in DEBATE_PERSONAS])


def setup_cors(app: web.Application) -> None:
    # Configure default CORS settings.
    default_resource_options = aiohttp_cors.ResourceOptions(
        allow_credentials=True,
        expose_headers="*",
        allow_headers="*",
        allow_methods="*",
    )
    cors_allowed_origins = get_cors_allowed_origins(os.getenv("ENV"))
    cors_config = {}
    if type(cors_allowed_origins) is str:
        cors_config[cors_allowed_origins] = default_resource_options
    else:
        for origin in cors_allowed_origins:
            cors_config[origin] = default_resource_options

    logger.info(f"CORS allowed origins: {list(cors_config)}")

    cors = aiohttp_cors.setup(app)

    # Configure CORS on all routes
    for route in list(app.router.routes()):
        logger.debug(f"Adding CORS to route {route}")
        cors.add(route, cors_config)


def create_app(
    firestore_service=None,
    chat_llms: Optional[list[LLM]] = None,
    quiz_weighting=None,
) -> web.Application:
    if firestore_service is None:
        firestore_service = get_firestore_service()
    if chat_llms is None:
        chat_llms = build_chat_llms()
    if quiz_weighting is None:
        quiz_weighting = label_weighting

    app = web.Application(middlewares=[user_identity_middleware, error_middleware])
    app[firestore_service_key] = firestore_service
    app[chat_llms_key] = chat_llms
    app[quiz_weighting_key] = quiz_weighting
    app[conversation_locks_key] = ConversationLocks()

    # Add routes to the app
    app.router.add_routes(routes)
    app.router.add_routes(chat_routes)

    setup_cors(app)
    return app


# Instantiate the argument parser
parser = argparse.ArgumentParser()

# Add arguments to parser
parser.add_argument("--host", type=str, nargs=1, default=["127.0.0.1"])
parser.add_argument("--port", type=int, nargs=1, default=[8080])
parser.add_argument("--debug", action="store_true", default=False)

# Start the server
if __name__ == "__main__":
    args = parser.parse_args()
    host = args.host[0]
    port = args.port[0]
    debug = args.debug
    logging.basicConfig(level=logging.INFO, format=LOGGING_FORMAT)
    if debug:
        loggers = [logging.getLogger(name) for name in logging.root.manager.loggerDict]
        # Set all loggers in the civic_chat package to debug
        for package_logger in loggers:
            if package_logger.name.startswith("civic_chat"):
                package_logger.setLevel(logging.DEBUG)
    load_env()
    web.run_app(create_app(), host=host, port=port)
