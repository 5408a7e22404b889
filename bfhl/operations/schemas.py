"""Pydantic schemas for operation requests and the response envelope."""

from typing import Annotated, Any, ClassVar, Union
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


# Integers are limited to the 32-bit signed range
Int32 = Annotated[StrictInt, Field(ge=-2**31, le=2**31 - 1)]

MAX_VALUES = 10_000


class OperationBase(BaseModel):
    """Common base for the five request variants.

    Attributes:
        key: The JSON key that selects this variant.
    """

    key: ClassVar[str]

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FibonacciRequest(OperationBase):
    """Generate the first ``n`` Fibonacci numbers."""

    key: ClassVar[str] = "fibonacci"

    n: Int32 = Field(..., alias="fibonacci", description="Number of terms")


class PrimeFilterRequest(OperationBase):
    """Keep only the prime numbers of ``values``."""

    key: ClassVar[str] = "prime"

    values: list[Int32] = Field(..., alias="prime", max_length=MAX_VALUES, description="Integers to filter")


class LcmRequest(OperationBase):
    """Least common multiple of ``values``."""

    key: ClassVar[str] = "lcm"

    values: list[Int32] = Field(..., alias="lcm", max_length=MAX_VALUES, description="Positive integers")


class HcfRequest(OperationBase):
    """Highest common factor of ``values``."""

    key: ClassVar[str] = "hcf"

    values: list[Int32] = Field(..., alias="hcf", max_length=MAX_VALUES, description="Positive integers")


class AskAiRequest(OperationBase):
    """Ask the AI backend for a one-word answer."""

    key: ClassVar[str] = "AI"

    question: StrictStr = Field(..., alias="AI", description="Question text")


OperationRequest = Union[
    FibonacciRequest,
    PrimeFilterRequest,
    LcmRequest,
    HcfRequest,
    AskAiRequest,
]

# Wire key -> variant, in the order keys are reported to callers
OPERATION_MODELS: dict[str, type[OperationBase]] = {
    model.key: model
    for model in (FibonacciRequest, PrimeFilterRequest, LcmRequest, HcfRequest, AskAiRequest)
}


class ProcessResponse(BaseModel):
    """Response envelope used for every outcome of the API.

    Attributes:
        is_success: Whether the request succeeded.
        official_email: Operator identity configured at start.
        data: Result on success, human-readable message on failure.
    """

    is_success: bool = Field(..., description="Whether the request succeeded")
    official_email: str = Field(..., description="Operator identity")
    data: Any = Field(default=None, description="Result or error message")

    @classmethod
    def success(cls, official_email: str, data: Any) -> "ProcessResponse":
        """Create a successful envelope."""
        return cls(is_success=True, official_email=official_email, data=data)

    @classmethod
    def failure(cls, official_email: str, message: str) -> "ProcessResponse":
        """Create a failed envelope carrying ``message``."""
        return cls(is_success=False, official_email=official_email, data=message)


class HealthResponse(BaseModel):
    """Body of ``GET /health``."""

    is_success: bool = True
    official_email: str
