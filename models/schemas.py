"""
Shared Pydantic schemas used across the address validators.

Domain models are frozen: every validator call builds them from the current
text and drops them on return.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class AddressFamily(str, Enum):
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    UNKNOWN = "unknown"


class Completeness(str, Enum):
    COMPLETE = "complete"
    PARTIAL = "partial"


class ErrorKind(str, Enum):
    INVALID_CHARS = "invalid_chars"
    INVALID_FORMAT = "invalid_format"
    INVALID_SUBNET = "invalid_subnet"
    RANGE_ORDER = "range_order"
    VERSION_MISMATCH = "version_mismatch"
    INVALID_MAC = "invalid_mac"


class InputKind(str, Enum):
    ADDRESS = "address"
    MAC = "mac"


class ValidationMode(str, Enum):
    FULL = "full"
    PARTIAL = "partial"


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Trimmed candidate address (no comma, dash or slash)")
    family: AddressFamily = Field(default=AddressFamily.UNKNOWN)
    completeness: Completeness = Field(default=Completeness.PARTIAL)

    @property
    def complete(self) -> bool:
        return self.completeness == Completeness.COMPLETE


class SingleItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["single"] = "single"
    text: str
    token: Token


class RangeItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["range"] = "range"
    text: str
    left: Token
    right: Token


class CidrItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["cidr"] = "cidr"
    text: str
    address: Token
    mask: str = Field("", description="Digits typed after '/', not bound-checked yet")


Item = Union[SingleItem, RangeItem, CidrItem]


class Expression(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Trimmed source text")
    items: Tuple[Item, ...] = Field(default_factory=tuple)

    @property
    def empty(self) -> bool:
        return not self.text

    def tokens(self) -> Tuple[Token, ...]:
        """Every leaf token in item order (range sides, CIDR addresses, singles)."""
        out = []
        for item in self.items:
            if isinstance(item, RangeItem):
                out.extend((item.left, item.right))
            elif isinstance(item, CidrItem):
                out.append(item.address)
            else:
                out.append(item.token)
        return tuple(out)

    def ranges(self) -> Tuple[RangeItem, ...]:
        return tuple(i for i in self.items if isinstance(i, RangeItem))


class PartialOutcome(BaseModel):
    """Partial-mode verdict plus the guard that produced it."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    guard: str = Field(..., description="Name of the check that decided the outcome")
    kind: Optional[ErrorKind] = None
    message_key: Optional[str] = Field(None, description="Key into the message table")


class ValidationResult(BaseModel):
    valid: bool
    message: str = Field("", description="Empty if and only if valid")
    kind: Optional[ErrorKind] = Field(None, description="Error category when invalid")


class BatchEntry(BaseModel):
    value: str = Field(..., description="Input string as given")
    kind: InputKind = Field(default=InputKind.ADDRESS)
    mode: ValidationMode = Field(default=ValidationMode.FULL)
    valid: bool
    message: str = ""
    error_kind: Optional[ErrorKind] = None
