import uvicorn, logging, time, traceback
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from travelhub.config.settings import settings
from travelhub.database.connection import open_store
from travelhub.utils.validators import describe_validation_errors

from travelhub.routes.destination_route import router as destination_route
from travelhub.routes.hotel_route import router as hotel_route
from travelhub.routes.health_route import router as health_route, fallback_router

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler(settings.LOG_FILE)
    ]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # a store placed on app.state beforehand (tests, scripts) is reused as is
    if getattr(app.state, "store", None) is None:
        app.state.store = open_store(settings)
    logger.info(f"TravelHub API started ({settings.ENVIRONMENT})")

    yield

    app.state.store.close()
    app.state.store = None
    logger.info("TravelHub API stopped")


app = FastAPI(
    title="TravelHub API",
    description="Destinations and hotels with bilingual (English / Arabic) content",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f} ms)")
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail}
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = describe_validation_errors(exc.errors())
    logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": message}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}", exc_info=True)

    content = {"success": False, "message": "Internal server error"}
    if not settings.is_production:
        content["error"] = str(exc)
        content["stack"] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return JSONResponse(status_code=500, content=content)


# register the routes
app.include_router(health_route, prefix=settings.API_PREFIX)
app.include_router(destination_route, prefix=f"{settings.API_PREFIX}/destinations")
app.include_router(hotel_route, prefix=f"{settings.API_PREFIX}/hotels")
app.include_router(fallback_router)


if __name__ == "__main__" :
    uvicorn.run(app, host = "0.0.0.0", port = settings.PORT, log_level = "info")
