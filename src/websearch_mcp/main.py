from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.response import ok, not_found, error, unexpect_error
from .config import Settings, get_settings
from .dependencies import get_cors_origins
from .logger import log
from .mcp_server import MCPEndpoint, create_mcp_server

MCP_PATH = "/mcp"
MCP_SESSION_HEADER = "Mcp-Session-Id"
ROOT_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Clear LRU cache for settings at startup
    get_settings.cache_clear()
    log.info("Cleared LRU cache for get_settings() at startup.")

    async with app.state.mcp.session_manager.run():
        log.info(f"MCP session manager started, serving on {MCP_PATH}")
        yield
    log.info("MCP session manager stopped")

def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    mcp = create_mcp_server(settings)

    app = FastAPI(
        lifespan=lifespan,
        redirect_slashes=False,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.mcp = mcp

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[MCP_SESSION_HEADER],
    )

    app.add_route(MCP_PATH, MCPEndpoint(mcp))

    @app.api_route("/", methods=ROOT_METHODS)
    async def root():
        return ok(settings.MCP_SERVER_NAME)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return not_found()
        # "/" answers every method, including ones not listed on the route
        if exc.status_code == 405 and request.url.path == "/":
            return ok(settings.MCP_SERVER_NAME)
        log.error(f"HTTPException: {exc.detail}", extra={"path": request.url.path})
        return error(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))

    # Custom global error handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Handle all uncaught exceptions globally.
        """
        log.error(f"Unhandled exception: {exc}", exc_info=True, extra={"path": request.url.path})
        return unexpect_error()

    return app

app = create_app()
