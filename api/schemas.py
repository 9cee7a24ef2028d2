from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from models.schemas import ErrorKind, InputKind, ValidationMode


class ValidationRequest(BaseModel):
    value: str = Field(..., description="Raw text as currently typed into the field.")
    mode: ValidationMode = Field(
        ValidationMode.PARTIAL,
        description="'partial' on every keystroke, 'full' on blur/submit.",
    )


class ValidationResponse(BaseModel):
    valid: bool
    message: str = Field("", description="Empty when valid.")
    kind: Optional[ErrorKind] = Field(None, description="Error category when invalid.")
    mode: ValidationMode


class BatchValidationRequest(BaseModel):
    values: List[str] = Field(..., description="Expressions to validate independently.")
    kind: InputKind = Field(InputKind.ADDRESS, description="'address' or 'mac'.")
    mode: ValidationMode = Field(ValidationMode.FULL)
