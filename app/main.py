"""
Main Entry Module

This module serves as the application entry point, configuring FastAPI
and running the development server.

Features:
- CORS setup
- Request logging
- Router mounting
- Development server

Security:
- CORS policies
- Origin validation
- Method control

Dependencies:
- FastAPI for API
- CORS middleware
- uvicorn for server
- Logging

Author: Photo Intake Development Team
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.shared import config
from app.features.photosubmit import router as photosubmit_router

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Photo Intake")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Add routers
app.include_router(photosubmit_router)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """
    Log HTTP requests and responses.

    Args:
        request: HTTP request
        call_next: Next handler

    Returns:
        Response: HTTP response
    """
    logger.info(f"Incoming request: {request.method} {request.url}")
    try:
        response = await call_next(request)
        logger.info(f"Response status: {response.status_code}")
        return response
    except Exception as e:
        logger.exception(f"Request failed: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={"detail": str(e)}
        )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
