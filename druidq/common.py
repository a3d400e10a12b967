"""Status endpoints that every server process answers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from druidq.component import Component

if TYPE_CHECKING:
    from druidq.client import Client

STATUS_ENDPOINT = "status"
HEALTH_ENDPOINT = "status/health"
PROPERTIES_ENDPOINT = "status/properties"
SELF_DISCOVERED_ENDPOINT = "status/selfDiscovered/status"


@dataclass
class ModuleInfo(Component):
    """An extension module loaded by the server."""

    name: str = ""
    artifact: str = ""
    version: str = ""


@dataclass
class MemoryInfo(Component):
    """Memory figures of the server process, in bytes."""

    max_memory: int = 0
    total_memory: int = 0
    free_memory: int = 0
    used_memory: int = 0
    direct_memory: int = 0


def _module(raw: Any) -> ModuleInfo:
    if raw is None:
        return ModuleInfo()
    return ModuleInfo.from_dict(raw)


@dataclass
class Status(Component):
    """Version, modules and memory of a server process."""

    version: str = ""
    modules: list[ModuleInfo] = field(
        default_factory=list, metadata={"each": _module}
    )
    memory: MemoryInfo = field(
        default_factory=MemoryInfo, metadata={"load": MemoryInfo.from_dict}
    )


@dataclass
class SelfDiscovered(Component):
    """Whether the process has discovered itself in the cluster."""

    self_discovered: bool = False


@dataclass
class CommonService:
    """Queries the status endpoints through a client."""

    client: "Client"

    def _get(self, path: str) -> Any:
        data, _ = self.client.execute_request("GET", path)
        return data

    def status(self) -> Status | None:
        """Return the process status."""
        data = self._get(STATUS_ENDPOINT)
        return None if data is None else Status.from_dict(data)

    def health(self) -> bool | None:
        """Return whether the process reports itself healthy."""
        data = self._get(HEALTH_ENDPOINT)
        if data is not None and not isinstance(data, bool):
            raise ValueError("health endpoint did not answer a boolean")
        return data

    def properties(self) -> dict[str, str] | None:
        """Return the runtime properties of the process."""
        data = self._get(PROPERTIES_ENDPOINT)
        if data is not None and not isinstance(data, dict):
            raise ValueError("properties endpoint did not answer an object")
        return data

    def self_discovered(self) -> SelfDiscovered | None:
        """Return the self-discovery state of the process."""
        data = self._get(SELF_DISCOVERED_ENDPOINT)
        return None if data is None else SelfDiscovered.from_dict(data)