# Run from project root: uvicorn crossfire_grafana.main:app --reload --port 4000

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from crossfire_grafana.api.routes import router
from crossfire_grafana.core.config import HOST, LOG_LEVEL, PORT

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


app = FastAPI(title="Crossfire Grafana Firestore Bridge")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as {"error": <detail>} for the dashboard."""
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


app.include_router(router)


def main() -> None:
    logger.info("Server is running on port %d", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
