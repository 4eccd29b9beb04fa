from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from robotutor.api.chat import router as chat_router
from robotutor.api.events import router as events_router
from robotutor.api.health import router as health_router
from robotutor.core.errors import (
    dialogue_exception_handler,
    http_exception_handler,
    request_id_middleware,
    unhandled_exception_handler,
    validation_exception_handler,
)
from robotutor.core.logging import configure_logging
from robotutor.core.settings import settings
from robotutor.dialogue.errors import DialogueError

configure_logging(settings.log_level)

app = FastAPI(title="Robot Tutor API", version="0.1.0")
app.include_router(health_router)
app.include_router(chat_router)
app.include_router(events_router)
app.middleware("http")(request_id_middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(DialogueError, dialogue_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
