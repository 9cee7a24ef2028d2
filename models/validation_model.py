#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Validation Service

Responsibilities:
- Expose the four entry points consumed by the input-binding layer
  (address/MAC, full/partial)
- Turn partial-mode outcomes into {valid, message} using the message table
- Validate batches with logging and metrics
- NO normalization: values are reported exactly as given
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List, Optional

from models.schemas import (
    BatchEntry,
    ErrorKind,
    InputKind,
    PartialOutcome,
    ValidationMode,
    ValidationResult,
)
from models.settings import ValidatorSettings
from utils.config_loader import load_settings
from utils.logger import get_logger, log_metric, log_stage
from validation.full import is_expression_fully_valid
from validation.literals import get_literal_checker
from validation.mac import is_mac_list_fully_valid, mac_partial_outcome
from validation.partial import is_expression_partially_valid

# What a submit-time failure is called, per input kind
_FULL_MODE_KINDS = {
    InputKind.ADDRESS: ErrorKind.INVALID_FORMAT,
    InputKind.MAC: ErrorKind.INVALID_MAC,
}


class InputValidator:
    def __init__(self, settings: Optional[ValidatorSettings] = None, log_level: Optional[str] = None):
        self.settings = settings or ValidatorSettings()
        log_cfg = self.settings.logging
        self.logger = get_logger(
            "validator",
            log_level or log_cfg.level,
            log_cfg.file,
            retention_days=log_cfg.retention_days,
            log_dir=log_cfg.directory,
        )
        self.checker = get_literal_checker(self.settings.literal_checker)
        self.messages = self.settings.message_table()

    @classmethod
    def from_config(cls, path: Optional[str] = None) -> "InputValidator":
        return cls(load_settings(path))

    # ---------------- Public API ----------------
    def is_address_fully_valid(self, text: str) -> bool:
        return is_expression_fully_valid(text, self.checker)

    def is_address_partially_valid(self, text: str) -> ValidationResult:
        return self._to_result(text, is_expression_partially_valid(text, self.checker))

    def is_hardware_address_fully_valid(self, text: str) -> bool:
        return is_mac_list_fully_valid(text)

    def is_hardware_address_partially_valid(self, text: str) -> ValidationResult:
        return self._to_result(text, mac_partial_outcome(text))

    def check(
        self,
        text: str,
        kind: InputKind = InputKind.ADDRESS,
        mode: ValidationMode = ValidationMode.PARTIAL,
    ) -> ValidationResult:
        kind, mode = InputKind(kind), ValidationMode(mode)
        if mode == ValidationMode.PARTIAL:
            if kind == InputKind.MAC:
                return self.is_hardware_address_partially_valid(text)
            return self.is_address_partially_valid(text)

        if kind == InputKind.MAC:
            ok = self.is_hardware_address_fully_valid(text)
        else:
            ok = self.is_address_fully_valid(text)
        if ok:
            return ValidationResult(valid=True)
        error_kind = _FULL_MODE_KINDS[kind]
        self.logger.debug("Full validation rejected | kind=%s | text=%s", kind.value, text)
        return ValidationResult(valid=False, message=self.messages[error_kind.value], kind=error_kind)

    def validate_batch(
        self,
        values: Iterable[str],
        kind: InputKind = InputKind.ADDRESS,
        mode: ValidationMode = ValidationMode.FULL,
    ) -> List[BatchEntry]:
        kind, mode = InputKind(kind), ValidationMode(mode)
        with log_stage(self.logger, "validate_batch"):
            results: List[BatchEntry] = []
            for value in values:
                result = self.check(value, kind, mode)
                results.append(BatchEntry(
                    value=value,
                    kind=kind,
                    mode=mode,
                    valid=result.valid,
                    message=result.message,
                    error_kind=result.kind,
                ))

            valid = sum(1 for r in results if r.valid)
            invalid = len(results) - valid
            counts = {}
            for r in results:
                if r.error_kind is not None:
                    counts[r.error_kind.value] = counts.get(r.error_kind.value, 0) + 1

            self.logger.info(
                "Validation complete: %d total (%d valid, %d invalid), breakdown=%s",
                len(results), valid, invalid, counts
            )
            log_metric(self.logger, "validation_total", len(results), kind=kind.value, mode=mode.value)
            log_metric(self.logger, "validation_invalid", invalid, kind=kind.value, mode=mode.value)
            return results

    def _to_result(self, text: str, outcome: PartialOutcome) -> ValidationResult:
        if outcome.valid:
            return ValidationResult(valid=True)
        self.logger.debug(
            "Partial validation rejected | text=%s | guard=%s | kind=%s",
            text, outcome.guard, outcome.kind.value
        )
        message = self.messages.get(outcome.message_key or outcome.kind.value, self.messages[outcome.kind.value])
        return ValidationResult(valid=False, message=message, kind=outcome.kind)


# ----------------------------------------------------------------------
# Module-level entry points
# ----------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_default_validator() -> InputValidator:
    """Shared instance configured from ADDRINPUT_CONFIG (or defaults)."""
    return InputValidator.from_config()


def is_address_fully_valid(text: str) -> bool:
    return get_default_validator().is_address_fully_valid(text)


def is_address_partially_valid(text: str) -> ValidationResult:
    return get_default_validator().is_address_partially_valid(text)


def is_hardware_address_fully_valid(text: str) -> bool:
    return get_default_validator().is_hardware_address_fully_valid(text)


def is_hardware_address_partially_valid(text: str) -> ValidationResult:
    return get_default_validator().is_hardware_address_partially_valid(text)
