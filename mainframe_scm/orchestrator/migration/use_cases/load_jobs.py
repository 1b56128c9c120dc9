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

"""LoadJobs use case implementation."""

import logging

from mainframe_scm.core.checkout.repositories import JobConfigurationRepository
from mainframe_scm.core.exceptions import JobConfigurationFormatError

from ..dtos import JobLoadReport
from .migrate_connection import MigrateConnectionUseCase

logger = logging.getLogger(__name__)


class LoadJobsUseCase:
    """Load every stored job, migrating legacy ones and re-saving them.

    A job whose connection cannot be registered stays unmigrated, and a job
    whose re-save fails keeps its migrated in-memory form. Both are reported
    in ``failed``; the remaining jobs are still processed.
    """

    def __init__(
        self,
        job_store: JobConfigurationRepository,
        migrate_connection: MigrateConnectionUseCase,
    ) -> None:
        self._job_store = job_store
        self._migrate_connection = migrate_connection

    def execute(self) -> JobLoadReport:
        """Load, migrate and re-save jobs.

        Returns:
            JobLoadReport with the loaded configurations and migration outcome.
        """
        report = JobLoadReport()
        for job_name in self._job_store.list_jobs():
            try:
                configuration = self._job_store.load(job_name)
            except JobConfigurationFormatError as exc:
                logger.error("%s", exc.message)
                report.unreadable.append(job_name)
                continue
            try:
                configuration = self._migrate_connection.execute(configuration)
            except OSError:
                logger.exception("Failed to register connection for job %s", job_name)
                report.failed.append(job_name)
            report.configurations[job_name] = configuration

        for job_name, configuration in report.configurations.items():
            if not configuration.migrated:
                continue
            try:
                self._job_store.save(job_name, configuration)
            except OSError:
                logger.exception("Failed to save migrated job %s", job_name)
                report.failed.append(job_name)
            else:
                logger.info("Job %s has been migrated.", job_name)
                report.migrated.append(job_name)
        return report
