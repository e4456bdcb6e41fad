"""
FastAPI router for the calculator.

Provides a stateless HTTP endpoint that evaluates one expression against
the variables sent with the request. Values travel as decimal strings so
that integers of any size survive JSON clients.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Dict, Mapping, Union

from smartcalc.expr import (
    DEFAULT_EXPRESSION_LIMITS,
    CalculatorError,
    ExpressionLimits,
    InvalidAssignment,
    InvalidIdentifier,
    evaluate,
    format_integer,
    parse_integer,
)
from smartcalc.server.fastapi_model import (
    EvaluationErrorResponse,
    EvaluationRequest,
    EvaluationResponse,
)

if TYPE_CHECKING:
    from fastapi import APIRouter

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "/smartcalc/v1"

_IDENTIFIER = re.compile(r"[a-zA-Z]+")
_SIGNED_INTEGER = re.compile(r"(-?)([0-9]+)")


def parse_variables(variables: Mapping[str, Union[int, str]]) -> Dict[str, int]:
    """
    Converts request variables to an evaluation environment.

    Raises:
        InvalidIdentifier: If a variable name is not made of ASCII letters
        InvalidAssignment: If a value is not a decimal integer
    """
    environment: Dict[str, int] = {}
    for name, raw_value in variables.items():
        if not _IDENTIFIER.fullmatch(name):
            raise InvalidIdentifier()

        if isinstance(raw_value, int) and not isinstance(raw_value, bool):
            environment[name] = raw_value
            continue

        match = _SIGNED_INTEGER.fullmatch(str(raw_value).strip())
        if match is None:
            raise InvalidAssignment()
        sign, digits = match.groups()
        value = parse_integer(digits)
        environment[name] = -value if sign else value
    return environment


def create_calculator_router(
    *,
    limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS,
    prefix: str = DEFAULT_PREFIX,
) -> APIRouter:
    """Create FastAPI router for expression evaluation."""
    from fastapi import APIRouter, HTTPException

    router = APIRouter(prefix=prefix, tags=["Calculator"])

    @router.post(
        "/evaluate",
        response_model=EvaluationResponse,
        responses={400: {"model": EvaluationErrorResponse}},
    )
    def evaluate_expression(request: EvaluationRequest):
        """
        Evaluate an expression and return its value.

        Rejected expressions answer 400 with the error kind and the same
        single-line message the REPL prints.
        """
        try:
            environment = parse_variables(request.variables)
            value = evaluate(request.expression, environment, limits)
        except CalculatorError as e:
            logger.warning(
                "expression_rejected",
                extra={"error": type(e).__name__, "reason": getattr(e, "reason", None)},
            )
            detail = EvaluationErrorResponse(error=type(e).__name__, message=e.message)
            raise HTTPException(status_code=400, detail=detail.model_dump())

        return EvaluationResponse(value=format_integer(value))

    @router.get("/health")
    async def health_check():
        """Health check endpoint for the calculator service."""
        return {"status": "healthy", "service": "smartcalc"}

    return router
