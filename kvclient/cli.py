"""Command-line options shared by the client programs."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from kvclient.config import Config

DEFAULT_PD = "localhost:2379"


@dataclass
class CommandArgs:
    """PD endpoints and optional TLS file locations."""

    pd: list[str] = field(default_factory=lambda: [DEFAULT_PD])
    ca: Path | None = None
    cert: Path | None = None
    key: Path | None = None

    def config(self) -> Config:
        """Return a Config, secured when all three TLS files are given."""
        if self.ca is not None and self.cert is not None and self.key is not None:
            return Config().with_security(self.ca, self.cert, self.key)
        return Config()


def _build_parser(app_name: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=app_name)
    parser.add_argument(
        "--pd",
        "--pd-endpoint",
        "--pd-endpoints",
        dest="pd",
        metavar="PD_URL",
        nargs="+",
        action="extend",
        help="Sets PD endpoints. Uses `,` to separate multiple PDs",
    )
    parser.add_argument(
        "--ca",
        metavar="CA_PATH",
        help="Sets the CA. Must be used with --cert and --key",
    )
    parser.add_argument(
        "--cert",
        metavar="CERT_PATH",
        help="Sets the certificate. Must be used with --ca and --key",
    )
    parser.add_argument(
        "--key",
        "--private-key",
        dest="key",
        metavar="KEY_PATH",
        help="Sets the private key. Must be used with --ca and --cert",
    )
    return parser


# Each option requires the next one, forming a cycle so none can be missing.
_REQUIRES = (("ca", "cert"), ("cert", "key"), ("key", "ca"))


def parse_args(app_name: str, argv: Sequence[str] | None = None) -> CommandArgs:
    """Parse command-line options; exits with a usage error on bad input."""
    parser = _build_parser(app_name)
    namespace = parser.parse_args(argv)

    for option, required in _REQUIRES:
        if getattr(namespace, option) is not None and getattr(namespace, required) is None:
            parser.error(f"--{option} requires --{required}")

    raw_pd = namespace.pd if namespace.pd is not None else [DEFAULT_PD]
    endpoints = [part for value in raw_pd for part in value.split(",")]

    def as_path(value: str | None) -> Path | None:
        return None if value is None else Path(value)

    return CommandArgs(
        pd=endpoints,
        ca=as_path(namespace.ca),
        cert=as_path(namespace.cert),
        key=as_path(namespace.key),
    )