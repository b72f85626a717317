import time
import uuid
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.router import api_router
from core import OnlineLibraryException, get_logger, get_settings, log_request, log_response, setup_logging
from infrastructure.mongo_client import reset_data_access

load_dotenv()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(
        level=settings.log_level,
        log_to_file=settings.log_to_file,
        json_format=settings.log_json,
        log_dir=settings.log_dir,
    )
    logger.info("Online Library API starting")
    yield
    reset_data_access()
    logger.info("Online Library API stopped")


app = FastAPI(title="Online Library API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_settings().frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    request_id = str(uuid.uuid4())[:8]
    start_time = time.time()
    log_request(logger, request.method, request.url.path, request_id)
    response = await call_next(request)
    log_response(logger, request.method, request.url.path, response.status_code, (time.time() - start_time) * 1000, request_id)
    return response


@app.exception_handler(OnlineLibraryException)
async def library_exception_handler(request: Request, exc: OnlineLibraryException):
    log_level = "warning" if exc.status_code < 500 else "error"
    getattr(logger, log_level)("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": type(exc).__name__},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error: %s" % exc},
    )


app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.host, port=settings.port)
