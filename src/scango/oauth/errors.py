# OAuth error values.
# Created: 2026-10-19

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    MISSING_PARAMETER = "missing_parameter"
    INVALID_PARAMETER = "invalid_parameter"
    MISSING_CONFIGURATION = "missing_configuration"
    SIGNATURE_MISMATCH = "signature_mismatch"
    STATE_MISMATCH = "state_mismatch"
    UPSTREAM_HTTP = "upstream_http"
    UPSTREAM_PARSE = "upstream_parse"


_STATUS: dict[ErrorKind, int] = {
    ErrorKind.MISSING_PARAMETER: 400,
    ErrorKind.INVALID_PARAMETER: 400,
    ErrorKind.MISSING_CONFIGURATION: 500,
    ErrorKind.SIGNATURE_MISMATCH: 401,
    ErrorKind.STATE_MISMATCH: 401,
    ErrorKind.UPSTREAM_HTTP: 500,
    ErrorKind.UPSTREAM_PARSE: 500,
}


@dataclass(frozen=True)
class OAuthError:
    """A terminal failure of one install or callback request."""

    kind: ErrorKind
    detail: str

    @property
    def status_code(self) -> int:
        return _STATUS[self.kind]

    @classmethod
    def missing_configuration(cls, keys: list[str]) -> OAuthError:
        return cls(ErrorKind.MISSING_CONFIGURATION, f"Missing configuration: {', '.join(keys)}")
