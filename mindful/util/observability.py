"""Observability configuration using Logfire.

Everything users write here (posts, comments, chat with the assistant,
messages to doctors) is mental health data. Spans and logs may carry IDs,
counts and outcomes, but attributes that can hold user text are scrubbed
before export.

Usage:
    import logfire

    logfire.info("Vote committed", post_id=str(post_id), action="flip")

    with logfire.span("create_post.execute", author_id=author_id):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from mindful.config import Settings

SERVICE_NAME = "mindful-backend"

# Attribute names that may hold user-written text, matched as regexes by
# the Logfire scrubber in addition to its default credential patterns
SENSITIVE_ATTRIBUTES = [
    "title",
    "content",
    "message",
    "prompt",
    "completion",
    "email",
    "bio",
]

# Polled by load balancers; not worth a trace each
UNTRACED_URLS = "/health"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process.

    Telemetry is sent to Logfire cloud when OBSERVABILITY__SEND_TO_LOGFIRE is
    true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present.
    Otherwise it only goes to the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SENSITIVE_ATTRIBUTES),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # Websocket scopes have no method; chat frames are never recorded
    mapped = {**attributes, "path": request.url.path}
    method = getattr(request, "method", None)
    if method:
        mapped["method"] = method
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request and websocket session of the app.

    Request headers are not captured, since they carry the auth cookie and
    bearer token.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries and transactions on the database engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound HTTP requests, including those made by the OpenAI SDK."""
    logfire.instrument_httpx()


def instrument_openai() -> None:
    """Trace chat completion and moderation calls with model and token usage."""
    logfire.instrument_openai()
