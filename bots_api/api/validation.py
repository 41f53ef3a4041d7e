# bots_api/api/validation.py
"""
Declarative request validation.

A route declares rule chains (``param("id").is_int(...)``,
``body("price").is_numeric(...).custom(...)``) grouped into ordered stages.
Every rule of every chain in a stage is evaluated and each failure adds one
error entry; the first stage that produces errors rejects the request with
``BotValidationError`` before the handler runs.
"""
import json
import math
import re
from typing import Any, Callable, Dict, List, Optional, Sequence

from fastapi import Request

from bots_api.core.exceptions import BotValidationError

MISSING = object()

_INT_RE = re.compile(r"[-+]?[0-9]+")
_NUMERIC_RE = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_BOOLEANS = ("true", "false", "1", "0")

INVALID_BODY = "Cuerpo de la petición no válido"


def as_string(value: Any) -> str:
    """String form of a raw JSON value, the way string rules see it."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def as_finite_float(value: Any) -> Optional[float]:
    """``value`` as a finite float, or None when it is not one."""
    if value is MISSING or value is None or isinstance(value, (dict, list)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _is_numeric(value: Any) -> bool:
    if not _NUMERIC_RE.fullmatch(as_string(value)):
        return False
    # Integers past the float range read as Infinity in JSON
    return as_finite_float(value) is not None


def is_positive(value: Any) -> bool:
    """Numeric ``value > 0``; anything that is not a finite number fails."""
    if isinstance(value, bool):
        return value
    if not isinstance(value, (int, float, str)):
        return False
    number = as_finite_float(value)
    return number is not None and number > 0


class Rule:
    def __init__(self, check: Callable[[Any], bool], message: str):
        self.check = check
        self.message = message


class ValidationChain:
    """Rules for a single field at a single location (``body`` or ``params``)."""

    def __init__(self, field: str, location: str):
        self.field = field
        self.location = location
        self.rules: List[Rule] = []

    def _add(self, check: Callable[[Any], bool], message: str) -> "ValidationChain":
        self.rules.append(Rule(check, message))
        return self

    def is_int(self, message: str) -> "ValidationChain":
        return self._add(lambda v: bool(_INT_RE.fullmatch(as_string(v))), message)

    def is_numeric(self, message: str) -> "ValidationChain":
        return self._add(_is_numeric, message)

    def not_empty(self, message: str) -> "ValidationChain":
        return self._add(lambda v: as_string(v) != "", message)

    def is_boolean(self, message: str) -> "ValidationChain":
        return self._add(lambda v: as_string(v) in _BOOLEANS, message)

    def custom(self, predicate: Callable[[Any], bool], message: str) -> "ValidationChain":
        return self._add(predicate, message)

    def run(self, source: Dict[str, Any]) -> List[Dict[str, Any]]:
        value = source.get(self.field, MISSING)
        errors = []
        for rule in self.rules:
            if rule.check(value):
                continue
            error: Dict[str, Any] = {"type": "field"}
            if value is not MISSING:
                error["value"] = value
            error.update(msg=rule.message, path=self.field, location=self.location)
            errors.append(error)
        return errors


def body(field: str) -> ValidationChain:
    return ValidationChain(field, "body")


def param(field: str) -> ValidationChain:
    return ValidationChain(field, "params")


def run_stage(chains: Sequence[ValidationChain], params: Dict[str, Any], payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    errors: List[Dict[str, Any]] = []
    for chain in chains:
        errors.extend(chain.run(params if chain.location == "params" else payload))
    return errors


class ValidatedRequest:
    """Path parameters and JSON body of a request that passed validation."""

    def __init__(self, params: Dict[str, Any], payload: Dict[str, Any]):
        self.params = params
        self.body = payload

    @property
    def bot_id(self) -> int:
        return int(self.params["id"])


async def read_json_body(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise BotValidationError([
            {"type": "field", "msg": INVALID_BODY, "path": "", "location": "body"}
        ])
    # Arrays and scalars carry no named fields
    return payload if isinstance(payload, dict) else {}


class RequestValidator:
    """
    FastAPI dependency running validation stages in order.

    Usage::

        validate_id = RequestValidator([param("id").is_int("ID no válido")])

        @router.get("/{id}")
        async def get_bot(req: ValidatedRequest = Depends(validate_id)): ...
    """

    def __init__(self, *stages: Sequence[ValidationChain]):
        self.stages = stages

    async def __call__(self, request: Request) -> ValidatedRequest:
        params = dict(request.path_params)
        payload: Optional[Dict[str, Any]] = None
        for stage in self.stages:
            if payload is None and any(chain.location == "body" for chain in stage):
                payload = await read_json_body(request)
            errors = run_stage(stage, params, payload or {})
            if errors:
                raise BotValidationError(errors)
        # Routes without body rules never look at the body
        return ValidatedRequest(params, payload or {})
