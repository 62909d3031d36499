import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from prompt_architect import __version__, config
from prompt_architect.api.routes import router
from prompt_architect.errors import (
    GENERIC_ERROR_MESSAGE,
    CompletionGatewayError,
    PromptValidationError,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Prompt Architect",
    version=__version__,
)

# Middleware first
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes after middleware
app.include_router(router)


# ============================
# ERROR MAPPING
# Every error body is {"error": str}; server failures never carry detail.
# ============================

@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request payload.", "details": details},
    )


@app.exception_handler(PromptValidationError)
async def prompt_validation_error(request: Request, exc: PromptValidationError):
    return JSONResponse(
        status_code=422,
        content={"error": exc.message, "details": exc.details},
    )


@app.exception_handler(CompletionGatewayError)
async def gateway_error(request: Request, exc: CompletionGatewayError):
    # Cause already logged by the gateway
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("prompt_architect.main:app", host=config.HOST, port=config.PORT)
