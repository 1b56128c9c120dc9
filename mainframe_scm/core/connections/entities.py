# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Host connection entity."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

NO_PROTOCOL = "none"


@dataclass(frozen=True)
class HostConnection:
    """A named route to a mainframe-side service.

    Connections are shared by every job that references their id and are
    never mutated by a job.

    Attributes:
        connection_id: Generated unique identifier.
        description: Display name.
        host_port: ``host:port`` of the mainframe service.
        code_page: Host code page, e.g. ``1047``.
        timeout: Read timeout in minutes, passed through to the CLI.
        protocol: Optional encryption protocol; ``none`` means plain.
    """

    connection_id: str
    description: str
    host_port: str
    code_page: str
    timeout: Optional[str] = None
    protocol: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.connection_id or not self.connection_id.strip():
            raise ValueError("HostConnection connection_id cannot be empty")

    @property
    def host(self) -> str:
        """Host part of ``host_port``."""
        return self.host_port.partition(":")[0]

    @property
    def port(self) -> str:
        """Port part of ``host_port``; empty when absent."""
        return self.host_port.partition(":")[2]

    def uses_protocol(self) -> bool:
        """Check whether a protocol must be passed to the CLI."""
        return bool(self.protocol and self.protocol.strip()) and \
            self.protocol.strip().lower() != NO_PROTOCOL

    def matches(self, host_port: str, code_page: str) -> bool:
        """Check whether this connection routes to the given endpoint."""
        return self.host_port == host_port and self.code_page == code_page

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for persistence."""
        return {
            "connection_id": self.connection_id,
            "description": self.description,
            "host_port": self.host_port,
            "code_page": self.code_page,
            "timeout": self.timeout,
            "protocol": self.protocol,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "HostConnection":
        """Rebuild a connection from its persisted form.

        Raises:
            KeyError: If a mandatory key is missing.
            ValueError: If the connection id is blank.
        """
        return HostConnection(
            connection_id=str(data["connection_id"]),
            description=str(data.get("description") or ""),
            host_port=str(data["host_port"]),
            code_page=str(data["code_page"]),
            timeout=_optional_str(data.get("timeout")),
            protocol=_optional_str(data.get("protocol")),
        )


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)
