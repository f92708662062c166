from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from boards import router as boards_router
from boards.errors import BoardsError, InvalidData
from core import db, log, settings

log.configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Boards API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BoardsError)
async def boards_error_handler(_: Request, exc: BoardsError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON bodies share the "Invalid data" contract with schema violations.
    invalid = InvalidData(error="; ".join(str(err.get("msg")) for err in exc.errors()))
    return JSONResponse(status_code=invalid.status_code, content=invalid.to_body())


app.include_router(boards_router.router, tags=["boards"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/health/db")
async def health_db() -> JSONResponse:
    if await db.ping():
        return JSONResponse(status_code=200, content={"status": "ok", "database": "connected"})
    return JSONResponse(status_code=503, content={"status": "degraded", "database": "unavailable"})


@app.get("/")
def root() -> dict:
    return {"message": "boards api"}
