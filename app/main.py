from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import settings
from .routes.receipts import router as receipts_router
from .services.store import ResultStore
from app.utils.logging import logger

app = FastAPI(title=settings.APP_NAME,
              description="Scores purchase receipts and serves the points by id",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json")

# One store for the life of the process; handlers receive it via get_store
app.state.store = ResultStore()

app.include_router(receipts_router)

@app.exception_handler(RequestValidationError)
async def invalid_receipt(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "The receipt is invalid."})

@app.get("/health")
def health():
    return {"ok": True}

logger.info("%s starting (env=%s)", settings.APP_NAME, settings.ENV)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
