"""
FastAPI application entry point for the Movie Catalog API.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.config import get_api_host, get_api_port, get_log_file, get_log_level
from app.api.routers import movies, ratings
from app.exceptions import MovieServiceError
from app.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movie Catalog API",
    description="In-memory REST API for movie records and their ratings",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# movies must come first: its literal routes shadow /movies/{movie_id}/rating
app.include_router(movies.router)
app.include_router(ratings.router)


@app.exception_handler(MovieServiceError)
async def movie_service_error_handler(request: Request, exc: MovieServiceError) -> JSONResponse:
    """Render catalog errors as ``{"error": ..., "details": ...}``."""
    logger.warning("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    content = {"error": exc.message}
    if exc.details is not None:
        content["details"] = jsonable_encoder(exc.details)
    return JSONResponse(status_code=exc.status_code, content=content)


class NoContentBodyMiddleware:
    """
    Pure ASGI wrapper that empties the body of 204 responses.

    The rating summary answers 204 with a JSON message. In-process clients
    see that message, but HTTP/1.1 servers reject any body on a 204, so the
    app handed to a real server is wrapped in this middleware.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        no_content = False

        async def send_without_body(message):
            nonlocal no_content
            if message["type"] == "http.response.start" and message["status"] == 204:
                no_content = True
                headers = [
                    (name, value)
                    for name, value in message.get("headers", [])
                    if name.lower() != b"content-length"
                ]
                message = {**message, "headers": headers}
            elif message["type"] == "http.response.body" and no_content:
                message = {**message, "body": b""}
            await send(message)

        await self.app(scope, receive, send_without_body)


# What HTTP servers should serve, e.g. ``uvicorn app.api.main:server_app``.
server_app = NoContentBodyMiddleware(app)


def run() -> None:
    """Configure logging and serve the API with uvicorn."""
    import uvicorn

    configure_api_logging(level=get_log_level(), log_file=get_log_file())
    port = get_api_port()
    logger.info("Server is running on port %d", port)
    uvicorn.run(server_app, host=get_api_host(), port=port, log_config=None)


if __name__ == "__main__":
    run()
