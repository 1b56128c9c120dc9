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

"""MigrateConnection use case implementation."""

import dataclasses
import logging
import threading
from typing import Optional

from mainframe_scm.core.checkout.configurations import JobConfiguration
from mainframe_scm.core.connections import (
    ConnectionIdGenerator,
    ConnectionRepository,
    HostConnection,
)

logger = logging.getLogger(__name__)

_MIGRATION_LOCK = threading.Lock()


class MigrateConnectionUseCase:
    """Move a job's inline ``hostPort``/``codePage`` into the registry.

    Jobs sharing an endpoint end up sharing one connection: the lookup and
    the insert run under a single process-wide lock, so concurrent loads
    never register the same (host:port, code page) twice.

    Attributes:
        registry: Host connection registry port.
        id_generator: Generator for new connection ids.
    """

    def __init__(
        self,
        registry: ConnectionRepository,
        id_generator: ConnectionIdGenerator,
        lock: Optional[threading.Lock] = None,
    ) -> None:
        """Initialize use case with its collaborators.

        Args:
            registry: Host connection registry implementation.
            id_generator: Connection id generator to use.
            lock: Lock serializing migrations; defaults to the module lock.
        """
        self._registry = registry
        self._id_generator = id_generator
        self._lock = lock if lock is not None else _MIGRATION_LOCK

    def execute(self, configuration: JobConfiguration) -> JobConfiguration:
        """Migrate a configuration if it carries legacy connection fields.

        Args:
            configuration: Configuration as loaded from storage.

        Returns:
            The same configuration when there is nothing to migrate,
            otherwise a copy with ``connection_id`` set, legacy fields
            cleared and ``migrated`` True.
        """
        legacy = configuration.legacy
        if legacy is None:
            return configuration
        if not legacy.is_complete():
            logger.warning(
                "Skipping connection migration: legacy hostPort=%s codePage=%s is incomplete",
                legacy.host_port,
                legacy.code_page,
            )
            return configuration

        with self._lock:
            connection = self._registry.find_by_host_port_and_code_page(
                legacy.host_port, legacy.code_page
            )
            if connection is None:
                connection = HostConnection(
                    connection_id=self._id_generator.generate(),
                    description=f"{legacy.host_port} {legacy.code_page}",
                    host_port=legacy.host_port,
                    code_page=legacy.code_page,
                )
                self._registry.add(connection)
            else:
                logger.debug(
                    "Reusing host connection %s for %s",
                    connection.connection_id,
                    legacy.host_port,
                )

        return dataclasses.replace(
            configuration,
            connection_id=connection.connection_id,
            legacy=None,
            migrated=True,
        )
