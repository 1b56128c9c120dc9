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

"""Repository port interfaces (Protocols) for the connections domain.

These define the contracts that infrastructure implementations must satisfy.
Using Protocol instead of ABC allows for structural subtyping (duck typing).
"""

from typing import List, Optional, Protocol

from .entities import HostConnection


class ConnectionIdGenerator(Protocol):
    """Generator port for creating connection identifiers."""

    def generate(self) -> str:
        """Generate a new, unique connection identifier."""
        ...


class ConnectionRepository(Protocol):
    """Repository port for the global host connection registry."""

    def find_by_id(self, connection_id: str) -> Optional[HostConnection]:
        """Retrieve a connection by its identifier.

        Args:
            connection_id: Unique connection identifier.

        Returns:
            HostConnection if found, None otherwise.
        """
        ...

    def find_by_host_port_and_code_page(
        self,
        host_port: str,
        code_page: str
    ) -> Optional[HostConnection]:
        """Retrieve the first connection routing to an endpoint.

        Args:
            host_port: ``host:port`` of the mainframe service.
            code_page: Host code page.

        Returns:
            HostConnection if found, None otherwise.
        """
        ...

    def add(self, connection: HostConnection) -> None:
        """Append a connection and persist the registry.

        Args:
            connection: Connection to add.
        """
        ...

    def list_all(self) -> List[HostConnection]:
        """Return every connection in insertion order."""
        ...
