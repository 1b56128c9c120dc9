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

"""Checkout service wiring settings, stores and use cases together."""

import logging
from typing import Mapping, Optional, TextIO

from .core.checkout.repositories import BuildNode
from .infra.build_node import LocalBuildNode
from .infra.connection_registry import ConnectionRegistry
from .infra.credentials_store import YamlCredentialsStore
from .infra.global_config import GlobalConfiguration
from .infra.id_generator import UUIDv4ConnectionIdGenerator
from .infra.job_store import YamlJobStore
from .infra.settings import Settings, get_settings
from .orchestrator.checkout.commands import CheckoutCommand
from .orchestrator.checkout.dtos import CheckoutResult
from .orchestrator.checkout.use_cases import CheckoutUseCase
from .orchestrator.migration.dtos import JobLoadReport
from .orchestrator.migration.use_cases import LoadJobsUseCase, MigrateConnectionUseCase

logger = logging.getLogger(__name__)


class ScmService:
    """Entry point for loading jobs and running checkouts."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        node: Optional[BuildNode] = None,
    ):
        """Initialize the service from settings.

        Args:
            settings: Optional Settings instance. Reads the environment if not provided.
            node: Optional build node. Uses the local machine if not provided.
        """
        self.settings = settings or get_settings()
        self.node = node or LocalBuildNode()
        self.registry = ConnectionRegistry(self.settings.connections_file)
        self.job_store = YamlJobStore(self.settings.jobs_dir)
        self.global_config = GlobalConfiguration.load(self.settings.global_config_file)
        self.credentials = YamlCredentialsStore(self.settings.credentials_file)
        self._migrate = MigrateConnectionUseCase(
            self.registry, UUIDv4ConnectionIdGenerator()
        )
        self._load_jobs = LoadJobsUseCase(self.job_store, self._migrate)
        self._checkout = CheckoutUseCase(
            self.registry, self.credentials, self.global_config, self.node
        )

    def load_jobs(self) -> JobLoadReport:
        """Load all jobs, migrating and re-saving legacy ones."""
        report = self._load_jobs.execute()
        logger.info(
            "Loaded %d jobs (%d migrated, %d failed to save, %d unreadable)",
            len(report.configurations),
            len(report.migrated),
            len(report.failed),
            len(report.unreadable),
        )
        return report

    def checkout(
        self,
        job_name: str,
        workspace: str,
        build_log: TextIO,
        env: Optional[Mapping[str, str]] = None,
        changelog_path: Optional[str] = None,
    ) -> CheckoutResult:
        """Check out one stored job into a workspace.

        Raises:
            JobConfigurationFormatError: If the job configuration is unreadable.
            ScmDomainError: If validation or the download fails.
        """
        configuration = self._migrate.execute(self.job_store.load(job_name))
        command = CheckoutCommand(
            job_name=job_name,
            configuration=configuration,
            workspace=workspace,
            build_log=build_log,
            env=env,
            changelog_path=changelog_path,
        )
        return self._checkout.execute(command)
