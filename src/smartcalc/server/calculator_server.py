"""
Calculator HTTP server.

Environment variables:
    SMARTCALC_CONFIG - Settings file (YAML or JSON)
    SMARTCALC_APP_HOST - Host to bind to (default: 0.0.0.0)
    SMARTCALC_APP_PORT - Port to listen on (default: 8095)
    SMARTCALC_LOG_LEVEL - Log level (debug, info, warning, error)

Usage:
    python -m smartcalc.server.calculator_server
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI

from smartcalc.config import CalculatorSettings, enable_logging, load_settings

from .calculator_fastapi_router import create_calculator_router


def create_app(settings: Optional[CalculatorSettings] = None) -> FastAPI:
    """Create and return a FastAPI application serving the calculator."""
    settings = settings or CalculatorSettings()
    app = FastAPI(title="smartcalc")
    app.include_router(create_calculator_router(limits=settings.expression_limits))
    return app


if __name__ == "__main__":
    settings = load_settings()
    enable_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
