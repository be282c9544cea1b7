import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskflow.core.config import settings
from taskflow.core.database import engine, Base
from taskflow.core.errors import InvalidIdError, status_for_invalid_id
from taskflow.routers import health, tasks, categories, notes, users, stats, spa
from taskflow.services.document_service import store_error_message

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

NO_CACHE = "no-cache, no-store, must-revalidate"

# Init DB
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="TaskFlow API",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def no_cache(request: Request, call_next):
    response = await call_next(request)
    response.headers["Cache-Control"] = NO_CACHE
    return response


# Erreurs: toujours {"error": message}

@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def format_validation_errors(errors) -> str:
    if any(err.get("type") == "json_invalid" for err in errors):
        return "Malformed JSON in request body"
    messages = []
    for err in errors:
        # on retire le préfixe "body"/"query" de la localisation
        loc = [str(part) for part in err.get("loc", ())[1:]]
        field = ".".join(loc)
        messages.append(f"{field}: {err.get('msg')}" if field else err.get("msg"))
    return "Validation failed: " + "; ".join(messages)


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": format_validation_errors(exc.errors())})


@app.exception_handler(InvalidIdError)
def invalid_id_handler(request: Request, exc: InvalidIdError):
    status_code = status_for_invalid_id(exc.operation)
    logger.warning(f"{request.method} {request.url.path}: {exc} -> {status_code}")
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


# erreur de la base non rattrapée par un router (lecture, liste, suppression)
@app.exception_handler(SQLAlchemyError)
def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": store_error_message(exc)},
        headers={"Cache-Control": NO_CACHE},
    )


# Routes
app.include_router(health.router, prefix="/health")
app.include_router(tasks.router, prefix="/api")
app.include_router(categories.router, prefix="/api")
app.include_router(notes.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(stats.router, prefix="/api")
# en dernier: attrape tout le reste
app.include_router(spa.router)
