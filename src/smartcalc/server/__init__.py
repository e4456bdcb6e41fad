"""
HTTP surface for the calculator.
"""

from .calculator_fastapi_router import create_calculator_router, parse_variables
from .fastapi_model import EvaluationErrorResponse, EvaluationRequest, EvaluationResponse

__all__ = [
    "create_calculator_router",
    "parse_variables",
    "EvaluationRequest",
    "EvaluationResponse",
    "EvaluationErrorResponse",
]
