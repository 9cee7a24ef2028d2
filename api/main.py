from __future__ import annotations

from typing import Dict, List

from fastapi import Depends, FastAPI

from models.schemas import BatchEntry, InputKind
from models.validation_model import InputValidator, get_default_validator
from utils.logger import get_logger

from .schemas import BatchValidationRequest, ValidationRequest, ValidationResponse


app = FastAPI(
    title="Address Input Validation API",
    version="1.0.0",
    description=(
        "Stateless checks for IP address expressions (IPv4/IPv6, CIDR, ranges, "
        "lists) and MAC address lists, in strict (full) and keystroke (partial) modes."
    ),
)

api_logger = get_logger("api.app", "INFO", "api.log")


def get_validator() -> InputValidator:
    return get_default_validator()


def _respond(
    validator: InputValidator, payload: ValidationRequest, kind: InputKind
) -> ValidationResponse:
    result = validator.check(payload.value, kind, payload.mode)
    return ValidationResponse(
        valid=result.valid, message=result.message, kind=result.kind, mode=payload.mode
    )


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------
@app.get("/health", tags=["system"])
def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
@app.post("/validate/address", response_model=ValidationResponse, tags=["validation"])
def validate_address(
    payload: ValidationRequest,
    validator: InputValidator = Depends(get_validator),
) -> ValidationResponse:
    return _respond(validator, payload, InputKind.ADDRESS)


@app.post("/validate/mac", response_model=ValidationResponse, tags=["validation"])
def validate_mac(
    payload: ValidationRequest,
    validator: InputValidator = Depends(get_validator),
) -> ValidationResponse:
    return _respond(validator, payload, InputKind.MAC)


@app.post("/validate/batch", response_model=List[BatchEntry], tags=["validation"])
def validate_batch(
    payload: BatchValidationRequest,
    validator: InputValidator = Depends(get_validator),
) -> List[BatchEntry]:
    api_logger.info(
        "Batch validation request | kind=%s mode=%s count=%d",
        payload.kind.value, payload.mode.value, len(payload.values),
    )
    return validator.validate_batch(payload.values, payload.kind, payload.mode)
