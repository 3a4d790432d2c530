import logging
from urllib.parse import unquote
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.config import settings
from portfolio.core.limiter import limiter
from portfolio.core.security import is_path_traversal, BLOCKED_USER_AGENTS
from portfolio.core.security_logger import log_suspicious_activity
from portfolio.modules.auth import routes as auth_routes
from portfolio.modules.account import routes as account_routes
from portfolio.modules.users import routes as users_routes
from portfolio.modules.home import routes as home_routes
from portfolio.modules.about import routes as about_routes
from portfolio.modules.projects import routes as projects_routes
from portfolio.modules.skills import routes as skills_routes
from portfolio.modules.documents import routes as documents_routes
from portfolio.modules.storage import routes as storage_routes
from portfolio.modules.gallery import routes as gallery_routes
from portfolio.modules.certificates import routes as certificates_routes
from portfolio.modules.profile_images import routes as profile_images_routes
from portfolio.modules.contact import routes as contact_routes
from portfolio.modules.cv import routes as cv_routes
from portfolio.modules.site import routes as site_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
    return JSONResponse(status_code=500, content={"error": str(exc)})


SECURITY_HEADERS = [
    (b"X-Content-Type-Options", b"nosniff"),
    (b"X-Frame-Options", b"DENY"),
    (b"X-XSS-Protection", b"1; mode=block"),
    (b"Referrer-Policy", b"strict-origin-when-cross-origin"),
    (b"Permissions-Policy", b"geolocation=(), microphone=(), camera=()"),
    (b"Strict-Transport-Security", b"max-age=63072000; includeSubDomains; preload"),
    (b"Content-Security-Policy", b"default-src 'self'; img-src 'self' data: https:; frame-ancestors 'none'"),
]


class SecurityHeadersMiddleware:
    """Adds security headers and rejects scanner user agents and path traversal attempts"""

    def __init__(self, app):
        self.app = app

    def _blocked_reason(self, scope):
        headers = dict(scope.get("headers") or [])
        user_agent = headers.get(b"user-agent", b"").decode("latin-1").lower()
        if any(agent in user_agent for agent in BLOCKED_USER_AGENTS):
            return "blocked_user_agent"
        raw_path = (scope.get("raw_path") or scope.get("path", "").encode()).decode("latin-1")
        query = (scope.get("query_string") or b"").decode("latin-1")
        if is_path_traversal(unquote(raw_path)) or is_path_traversal(unquote(query)):
            return "path_traversal"
        return None

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend(SECURITY_HEADERS)
            await send(message)

        reason = self._blocked_reason(scope)
        if reason:
            client = scope.get("client")
            log_suspicious_activity(reason, None, client[0] if client else None, {"path": scope.get("path")})
            response = JSONResponse(status_code=403, content={"error": "Forbidden"})
            await response(scope, receive, send_with_headers)
            return

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(auth_routes.router, prefix="/api")
app.include_router(account_routes.router, prefix="/api")
app.include_router(users_routes.router, prefix="/api")
app.include_router(home_routes.router, prefix="/api")
app.include_router(about_routes.router, prefix="/api")
app.include_router(projects_routes.router, prefix="/api")
app.include_router(skills_routes.router, prefix="/api")
app.include_router(documents_routes.router, prefix="/api")
app.include_router(storage_routes.router, prefix="/api")
app.include_router(gallery_routes.router, prefix="/api")
app.include_router(certificates_routes.router, prefix="/api")
app.include_router(profile_images_routes.router, prefix="/api")
app.include_router(contact_routes.router, prefix="/api")
app.include_router(cv_routes.router, prefix="/api")
app.include_router(site_routes.router)


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup (environment=%s, bucket=%s)", settings.environment, settings.storage_bucket)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.app_name}", "status": "healthy"}


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness probe: extend here with Supabase checks if needed."""
    return {"status": "ready"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portfolio.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
