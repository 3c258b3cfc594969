"""Rendering and persistence settings, read from ``DEBUG_*`` variables."""

import os
import re
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "DEBUG_"

_TRUTHY = re.compile(r"^(yes|on|true|enabled)$", re.IGNORECASE)
_FALSY = re.compile(r"^(no|off|false|disabled)$", re.IGNORECASE)


def coerce_env_value(raw: str) -> Any:
    """Turn an environment string into a bool, None, number or the string itself.

    Blank values count as ``0``.
    """
    if not raw.strip():
        return 0
    if _TRUTHY.match(raw):
        return True
    if _FALSY.match(raw):
        return False
    if raw == "null":
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw


class DebugSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    env_var: str = Field(default="DEBUG", description="Environment variable holding the specification")
    colors: Optional[bool] = Field(default=None, description="Force colors on or off; None means auto-detect")
    depth: Optional[int] = Field(default=None, ge=0, description="Nesting limit for %o and %O")
    hide_date: bool = Field(default=False, description="Omit the timestamp from uncolored output")

    @field_validator("hide_date", mode="before")
    @classmethod
    def _null_means_default(cls, value: Any) -> Any:
        return False if value is None else value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DebugSettings":
        """Build settings from ``DEBUG_*`` variables.

        ``DEBUG_HIDE_DATE=yes`` becomes ``hide_date=True``; keys the model
        does not know are ignored.  A value that fails validation is logged
        at WARNING level and its field keeps the default.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
        """
        environ = os.environ if environ is None else environ
        raw_values = {
            key[len(ENV_PREFIX):].lower(): value for key, value in environ.items() if key.startswith(ENV_PREFIX)
        }
        raw_values.pop("env_var", None)
        values = {key: coerce_env_value(value) for key, value in raw_values.items()}
        try:
            return cls(**values)
        except ValidationError as exc:
            invalid = {err["loc"][0] for err in exc.errors() if err["loc"]}

        for key in sorted(invalid):
            logger.warning("Ignoring %s%s=%r: not a valid value, using the default", ENV_PREFIX, key.upper(), raw_values[key])
        return cls(**{k: v for k, v in values.items() if k not in invalid})
