import logging
from contextlib import asynccontextmanager
import httpx
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from config import HOST, PORT, Settings, load_settings
from core.cors import get_cors_headers
from routers import nip05, public
from services.github import DispatchClient, GitHubDispatchClient

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class AllowOriginMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, allowed_origin: str):
        super().__init__(app)
        self.cors_headers = get_cors_headers(allowed_origin)

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.update(self.cors_headers)
        return response


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return JSONResponse(
            content={"error": "Method not allowed"},
            status_code=405,
            headers=exc.headers,
        )
    return await http_exception_handler(request, exc)


def create_app(settings: Settings | None = None, dispatch_client: DispatchClient | None = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        http_client = None
        if app.state.dispatch_client is None:
            http_client = httpx.AsyncClient(timeout=settings.github_timeout)
            app.state.dispatch_client = GitHubDispatchClient(settings, http_client)
        if not settings.github_token:
            logger.warning("GITHUB_TOKEN is not set; submissions will be rejected")
        try:
            yield
        finally:
            if http_client:
                await http_client.aclose()
                app.state.dispatch_client = None

    app = FastAPI(title="NIP-05 Submission Service", lifespan=lifespan)
    app.state.settings = settings
    app.state.dispatch_client = dispatch_client

    app.add_middleware(AllowOriginMiddleware, allowed_origin=settings.allowed_origin)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    app.include_router(nip05.router)
    app.include_router(public.router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting NIP-05 submission service...")
    logger.info(f"Target repository: {app.state.settings.github_owner}/{app.state.settings.github_repo}")

    uvicorn.run(
        app,
        host=HOST,
        port=PORT,
        log_level="info",
    )
