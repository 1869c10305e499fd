# backend/app.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.core.config import API_TITLE, CORS_ORIGINS, SEED_DEMO
from backend.core.seed import load_seed
from backend.core.store import storage
from backend.routers import analytics, budgets, expenses

log = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if SEED_DEMO:
        load_seed(storage)
    yield


app = FastAPI(title=API_TITLE, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# errors always travel as {"message": ...}
_INVALID_MESSAGES = {
    "/api/expenses": "Invalid expense data",
    "/api/budgets": "Invalid budget data",
}


@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        {"message": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    path = request.url.path
    message = next(
        (m for prefix, m in _INVALID_MESSAGES.items() if path.startswith(prefix)),
        "Invalid request data",
    )
    return JSONResponse(
        {"message": message, "errors": jsonable_encoder(exc.errors())},
        status_code=400,
    )


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"message": "Internal server error"}, status_code=500)


# mount routers
app.include_router(expenses.router)
app.include_router(budgets.router)
app.include_router(analytics.router)


@app.get("/")
def root():
    return {"name": API_TITLE, "ok": True}


@app.get("/health", tags=["Health"])
def health():
    return {"ok": True}
