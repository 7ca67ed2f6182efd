from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Uniform wrapper around every GMGN response body."""

    code: int = Field(description="0 for success, nonzero for failure")
    msg: str = Field(default="", description="Error message, e.g. 'amountIn is required'")
    data: Optional[T] = Field(default=None, description="Payload; only meaningful when code == 0")

    model_config = dict(extra="ignore")

    @field_validator("msg", mode="before")
    @classmethod
    def _null_msg_is_empty(cls, value: Any) -> Any:
        # The API sends "msg": null on some successful responses
        return "" if value is None else value

    @property
    def ok(self) -> bool:
        return self.code == 0


RawEnvelope = Envelope[Any]
