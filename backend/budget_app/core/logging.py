import logging
import sys
import structlog


def configure_logging(env: str = "dev") -> None:
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    renderer = structlog.processors.JSONRenderer() if env == "prod" else structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # engine modules log at debug; keep them quiet outside dev
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if env == "dev" else logging.INFO,
    )


def bind_project(project_id: int | None) -> None:
    """Attach the project id to every log event emitted in the current context."""
    structlog.contextvars.clear_contextvars()
    if project_id is not None:
        structlog.contextvars.bind_contextvars(project_id=project_id)


logger = structlog.get_logger()
