from typing import Dict, Union

from pydantic import BaseModel, Field


class EvaluationRequest(BaseModel):
    """Expression evaluation request payload."""

    expression: str = Field(..., description="Infix expression, e.g. '2 ^ (x - 1)'")
    variables: Dict[str, Union[int, str]] = Field(
        default_factory=dict,
        description="Variable bindings; values are integers or decimal strings",
    )


class EvaluationResponse(BaseModel):
    """Expression evaluation response."""

    value: str = Field(..., description="Result as a decimal string")


class EvaluationErrorResponse(BaseModel):
    """Error payload for rejected expressions."""

    error: str = Field(..., description="Error kind, e.g. 'DivisionByZero'")
    message: str = Field(..., description="Single-line error message")
