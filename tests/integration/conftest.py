"""Shared fixtures for objutils integration tests.

Provides a small generated-style model (an inventory of hosts with checks
spread across several typed fields) so tests can exercise resolution,
aggregation and diffing together.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field

import pytest

# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class Check(ABC):
    """Capability shared by every check type."""


@dataclass(eq=False)
class HttpCheck(Check):
    url: str
    expect_status: int = 200


@dataclass(eq=False)
class TcpCheck(Check):
    port: int


@dataclass(eq=False)
class Host:
    name: str
    address: str
    primary_check: HttpCheck | None = None
    http_checks: list[HttpCheck] = field(default_factory=list)
    tcp_checks: list[TcpCheck] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)


@dataclass(eq=False)
class Inventory:
    host: Host
    name: str = "inventory"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def make_host(name: str = "web-1", address: str = "10.0.0.1", ports: tuple[int, ...] = (22, 443)) -> Host:
    """Create a Host with one primary check and a few list checks."""
    return Host(
        name=name,
        address=address,
        primary_check=HttpCheck(url=f"https://{name}/healthz"),
        http_checks=[HttpCheck(url=f"https://{name}/ready"), HttpCheck(url=f"https://{name}/live")],
        tcp_checks=[TcpCheck(port=p) for p in ports],
        tags=["prod"],
    )


@pytest.fixture()
def host() -> Host:
    return make_host()


@pytest.fixture()
def inventory(host: Host) -> Inventory:
    return Inventory(host=host)
