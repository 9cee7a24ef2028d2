"""
Validator settings and the canonical message table.
"""
from __future__ import annotations

from typing import Dict, Literal

from pydantic import BaseModel, Field, field_validator

from models.schemas import ErrorKind

# Extra key for the range-expected variant of ErrorKind.INVALID_FORMAT
RANGE_EXPECTED_KEY = "invalid_range"

DEFAULT_MESSAGES: Dict[str, str] = {
    ErrorKind.INVALID_CHARS.value: "Contains disallowed characters",
    ErrorKind.INVALID_FORMAT.value: "Invalid address format",
    ErrorKind.INVALID_SUBNET.value: "Invalid subnet",
    ErrorKind.RANGE_ORDER.value: "Range start exceeds end",
    ErrorKind.VERSION_MISMATCH.value: "Address family mismatch in range",
    ErrorKind.INVALID_MAC.value: "Invalid MAC address",
    RANGE_EXPECTED_KEY: "Range expected: start-end",
}


class LoggingSettings(BaseModel):
    level: str = Field("INFO", description="Logger level name")
    file: str = Field("validator.log", description="Log file name inside the log directory")
    directory: str = Field("logs", description="Directory holding rotated log files")
    retention_days: int = Field(30, ge=1, description="Rotated files to keep")


class ValidatorSettings(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    literal_checker: Literal["regex", "ipaddress"] = Field(
        "regex", description="Literal checker layered over the grammar tables"
    )
    messages: Dict[str, str] = Field(
        default_factory=dict, description="Overrides for the canonical message table"
    )

    @field_validator("messages")
    @classmethod
    def _known_message_keys(cls, value: Dict[str, str]) -> Dict[str, str]:
        unknown = sorted(set(value) - set(DEFAULT_MESSAGES))
        if unknown:
            raise ValueError(f"Unknown message keys: {unknown}")
        blank = sorted(k for k, v in value.items() if not v.strip())
        if blank:
            raise ValueError(f"Messages must not be blank: {blank}")
        return value

    def message_table(self) -> Dict[str, str]:
        table = dict(DEFAULT_MESSAGES)
        table.update(self.messages)
        return table
