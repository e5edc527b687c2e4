"""Client configuration: TLS file locations and request timeout."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any, Mapping

DEFAULT_REQUEST_TIMEOUT = timedelta(seconds=2)

_ONE_SECOND = timedelta(seconds=1)


def _to_path(value: Any) -> Path | None:
    if value is None:
        return None
    if isinstance(value, (str, Path)):
        return Path(value)
    raise ValueError(f"expected a path, got {value!r}")


def _duration_to_dict(duration: timedelta) -> dict[str, int]:
    secs = duration // _ONE_SECOND
    rest = duration - timedelta(seconds=secs)
    return {"secs": secs, "nanos": rest.microseconds * 1000}


def _duration_from_dict(data: Any) -> timedelta:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a duration mapping, got {data!r}")
    try:
        secs = data["secs"]
        nanos = data["nanos"]
    except KeyError as missing:
        raise ValueError(f"duration is missing field {missing}") from None
    if not isinstance(secs, int) or not isinstance(nanos, int) or secs < 0 or nanos < 0:
        raise ValueError(f"invalid duration {data!r}")
    return timedelta(seconds=secs, microseconds=nanos / 1000)


@dataclass(frozen=True)
class Config:
    """Configuration shared by the raw and transactional clients."""

    ca_path: Path | None = None
    cert_path: Path | None = None
    key_path: Path | None = None
    timeout: timedelta = field(default=DEFAULT_REQUEST_TIMEOUT)

    def with_security(self, ca_path, cert_path, key_path) -> Config:
        """Return a copy that connects over TLS using the given files."""
        return dataclasses.replace(
            self,
            ca_path=Path(ca_path),
            cert_path=Path(cert_path),
            key_path=Path(key_path),
        )

    def with_timeout(self, timeout: timedelta) -> Config:
        """Return a copy with a different request timeout."""
        return dataclasses.replace(self, timeout=timeout)

    def to_dict(self) -> dict[str, Any]:
        """Serialise with kebab-case keys; the timeout as seconds and nanoseconds."""
        return {
            "ca-path": None if self.ca_path is None else str(self.ca_path),
            "cert-path": None if self.cert_path is None else str(self.cert_path),
            "key-path": None if self.key_path is None else str(self.key_path),
            "timeout": _duration_to_dict(self.timeout),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build a config from a mapping; missing keys take their defaults."""
        default = cls()
        timeout = (
            _duration_from_dict(data["timeout"]) if "timeout" in data else default.timeout
        )
        return cls(
            ca_path=_to_path(data.get("ca-path")),
            cert_path=_to_path(data.get("cert-path")),
            key_path=_to_path(data.get("key-path")),
            timeout=timeout,
        )