import os as _os

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from core.config import settings
from core.database import Base, engine
from core.logging import configure_logging
from models import user, session, project, ai_sector  # noqa: F401
from routers import auth_router, project_router, ai_sector_router, generate_router

configure_logging(settings.LOG_LEVEL)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="GeekPie Portfolio API", version="1.0.0")

# Respect X-Forwarded-Proto/Host when behind a proxy (Docker/nginx/etc.)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost:3000", "http://127.0.0.1:3000"],
    allow_origin_regex=r"^https://[a-z0-9-]+\.vercel\.app$",
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Field-level errors, reported as a client error like the admin UI expects
    return JSONResponse(
        status_code=400,
        content={"success": False, "errors": jsonable_encoder(exc.errors())},
    )


app.include_router(auth_router.router)
app.include_router(project_router.router)
app.include_router(ai_sector_router.router)
app.include_router(generate_router.router)

# Uploaded media is served straight from the upload directory
_os.makedirs(settings.MEDIA_DIR, exist_ok=True)
app.mount(
    settings.MEDIA_URL_PATH,
    StaticFiles(directory=settings.MEDIA_DIR),
    name="media",
)


@app.get("/")
def root():
    return {
        "message": "GeekPie Portfolio API",
        "version": "1.0.0",
        "endpoints": {
            "auth": "/auth",
            "projects": "/projects",
            "aiSectors": "/ai-sectors",
            "generateStatic": "/generate-static",
            "health": "/health",
        },
    }


@app.get("/health")
def health():
    return {"status": "ok", "message": "Server is running"}
