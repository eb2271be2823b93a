"""
Request validation decorators.

Rules are small callables that take the raw value and return the cleaned one,
raising ``FieldError`` when the value is unacceptable. ``validate_body`` and
``validate_query`` run every rule, collect field-level errors, and only call
the view when all fields pass; the cleaned values are left in ``g.validated``.

    @bp.post("/things")
    @validate_body(name=string(), size=integer(min_value=1))
    def create_thing():
        data = g.validated
"""
import math
import re
from datetime import date
from functools import wraps

from dateutil.parser import isoparse
from flask import g, request

from .errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class FieldError(ValueError):
    pass


def _is_missing(value):
    return value is None or (isinstance(value, str) and value.strip() == "")


def _rule(check, required=True, default=None):
    check.required = required
    check.default = default
    return check


def string(min_length=1, max_length=255, strip=True, required=True):
    def check(value):
        if not isinstance(value, str):
            raise FieldError("must be a string")
        if strip:
            value = value.strip()
        if len(value) < min_length:
            raise FieldError(f"must be at least {min_length} characters")
        if len(value) > max_length:
            raise FieldError(f"must be at most {max_length} characters")
        return value
    return _rule(check, required)


def email(required=True):
    def check(value):
        if not isinstance(value, str) or not EMAIL_PATTERN.match(value.strip()):
            raise FieldError("must be a valid email address")
        return normalize_email(value)
    return _rule(check, required)


def one_of(enum_cls, choices=None, required=True):
    allowed = list(choices or enum_cls)

    def check(value):
        try:
            member = enum_cls(value)
        except (ValueError, TypeError):
            member = None
        if member not in allowed:
            raise FieldError("must be one of " + ", ".join(m.value for m in allowed))
        return member
    return _rule(check, required)


def integer(min_value=None, max_value=None, required=True, default=None):
    def check(value):
        if isinstance(value, bool):
            raise FieldError("must be an integer")
        if isinstance(value, str) and re.fullmatch(r"\s*-?\d+\s*", value):
            value = int(value)
        if not isinstance(value, int):
            raise FieldError("must be an integer")
        if min_value is not None and value < min_value:
            raise FieldError(f"must be at least {min_value}")
        if max_value is not None and value > max_value:
            raise FieldError(f"must be at most {max_value}")
        return value
    return _rule(check, required, default)


def number(min_value=None, max_value=None, required=True):
    def check(value):
        if isinstance(value, bool):
            raise FieldError("must be a number")
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                raise FieldError("must be a number") from None
        if not isinstance(value, (int, float)):
            raise FieldError("must be a number")
        try:
            value = float(value)
        except OverflowError:
            raise FieldError("must be a finite number") from None
        if not math.isfinite(value):
            raise FieldError("must be a finite number")
        if min_value is not None and value < min_value:
            raise FieldError(f"must be at least {min_value}")
        if max_value is not None and value > max_value:
            raise FieldError(f"must be at most {max_value}")
        return value
    return _rule(check, required)


def iso_date(past_only=False, required=True):
    def check(value):
        if not isinstance(value, str):
            raise FieldError("must be an ISO-8601 date")
        try:
            parsed = isoparse(value.strip()).date()
        except ValueError:
            raise FieldError("must be an ISO-8601 date") from None
        if past_only and parsed >= date.today():
            raise FieldError("must be in the past")
        return parsed
    return _rule(check, required)


def normalize_email(value: str) -> str:
    return value.strip().lower()


def clean(data, rules):
    """Apply ``rules`` to ``data``; returns cleaned values or raises ValidationError."""
    cleaned, errors = {}, []
    for field, check in rules.items():
        value = data.get(field)
        if _is_missing(value):
            if check.required:
                errors.append({"field": field, "message": f"{field} is required"})
            else:
                cleaned[field] = check.default
            continue
        try:
            cleaned[field] = check(value)
        except FieldError as e:
            errors.append({"field": field, "message": f"{field} {e}"})
    if errors:
        raise ValidationError("Validation failed", errors=errors)
    return cleaned


def validate_body(**rules):
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            data = request.get_json(silent=True)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ValidationError("Request body must be a JSON object")
            g.validated = clean(data, rules)
            return f(*args, **kwargs)
        return wrapper
    return decorator


def validate_query(**rules):
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            g.validated = clean(request.args, rules)
            return f(*args, **kwargs)
        return wrapper
    return decorator
