"""
FastAPI application entry point.
Common Log Format Parser - structured records from web server access logs.
"""

import logging

from fastapi import FastAPI

from common_log_format import __version__
from common_log_format.config import get_settings
from common_log_format.api.routes import router


settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="Parses Common Log Format lines into typed records.",
    version=__version__,
)

# Include API routes
app.include_router(router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "common_log_format.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
