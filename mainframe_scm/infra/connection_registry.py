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

"""Host connection registry backed by a YAML file."""

import logging
import threading
from collections import OrderedDict
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from mainframe_scm.core.connections import ConnectionRepository, HostConnection

logger = logging.getLogger(__name__)


class ConnectionRegistry(ConnectionRepository):
    """Ordered, mutex-guarded map of connection id to host connection.

    One registry is shared by job loading (migration inserts) and
    checkouts (lookups). When ``path`` is given, the registry is read from
    it on construction and rewritten after every ``add``.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._lock = threading.RLock()
        self._connections: "OrderedDict[str, HostConnection]" = OrderedDict()
        if path is not None and path.exists():
            self._load()

    def find_by_id(self, connection_id: str) -> Optional[HostConnection]:
        with self._lock:
            return self._connections.get(connection_id)

    def find_by_host_port_and_code_page(
        self,
        host_port: str,
        code_page: str
    ) -> Optional[HostConnection]:
        with self._lock:
            for connection in self._connections.values():
                if connection.matches(host_port, code_page):
                    return connection
            return None

    def add(self, connection: HostConnection) -> None:
        """Append a connection and persist the registry.

        Raises:
            ValueError: If the connection id is already registered.
            OSError: If the registry file cannot be written.
        """
        with self._lock:
            if connection.connection_id in self._connections:
                raise ValueError(
                    f"Host connection already registered: {connection.connection_id}"
                )
            self._connections[connection.connection_id] = connection
            try:
                self._save()
            except OSError:
                del self._connections[connection.connection_id]
                raise
        logger.info(
            "Added host connection %s (%s, code page %s)",
            connection.connection_id,
            connection.host_port,
            connection.code_page,
        )

    def list_all(self) -> List[HostConnection]:
        with self._lock:
            return list(self._connections.values())

    def _load(self) -> None:
        with self._path.open("r", encoding="utf-8") as stream:
            data = yaml.safe_load(stream) or {}
        for record in data.get("host_connections") or []:
            connection = HostConnection.from_dict(record)
            self._connections[connection.connection_id] = connection
        logger.debug("Loaded %d host connections from %s", len(self._connections), self._path)

    def _save(self) -> None:
        if self._path is None:
            return
        document: Dict[str, list] = {
            "host_connections": [c.to_dict() for c in self._connections.values()]
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as stream:
            yaml.safe_dump(document, stream, default_flow_style=False, sort_keys=False)
