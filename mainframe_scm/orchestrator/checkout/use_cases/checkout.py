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

"""Checkout use case implementation."""

import logging
from pathlib import Path

from mainframe_scm.core.checkout.repositories import (
    BuildNode,
    CredentialsRepository,
    GlobalSettingsRepository,
)
from mainframe_scm.core.checkout.validation import validate_configuration
from mainframe_scm.core.connections import ConnectionRepository
from mainframe_scm.core.exceptions import ConfigurationError

from ..commands import CheckoutCommand
from ..downloaders import DOWNLOADERS
from ..dtos import CheckoutResult

logger = logging.getLogger(__name__)


class CheckoutUseCase:
    """Use case for checking out a job's sources with the downloader CLI.

    Validation runs to completion before anything is launched; a missing
    parameter is reported in the build log and nothing else happens.

    Attributes:
        registry: Host connection registry port.
        credentials_repo: Credentials store port.
        settings: Global settings port holding the CLI locations.
        node: Build node the CLI runs on.
    """

    def __init__(
        self,
        registry: ConnectionRepository,
        credentials_repo: CredentialsRepository,
        settings: GlobalSettingsRepository,
        node: BuildNode,
    ) -> None:
        """Initialize use case with its collaborators.

        Args:
            registry: Host connection registry implementation.
            credentials_repo: Credentials store implementation.
            settings: Global settings implementation.
            node: Build node implementation.
        """
        self._registry = registry
        self._credentials_repo = credentials_repo
        self._settings = settings
        self._node = node

    def execute(self, command: CheckoutCommand) -> CheckoutResult:
        """Validate, download and write the changelog.

        Args:
            command: Checkout command for one job.

        Returns:
            CheckoutResult describing the CLI invocation.

        Raises:
            ConfigurationError: If a required parameter is missing or invalid.
            CliIncompatibleError: If the installed CLI is too old.
            CheckoutAbortedError: If the CLI exits non-zero.
            OSError: If the CLI cannot be launched or the changelog written.
        """
        configuration = command.configuration
        try:
            validated = validate_configuration(
                configuration,
                self._registry,
                self._credentials_repo,
                self._settings,
                self._node.is_unix,
                command.build_log,
            )
        except ConfigurationError as exc:
            command.build_log.write(exc.message + "\n")
            logger.error("Checkout of job %s not started: %s", command.job_name, exc.message)
            raise

        downloader = DOWNLOADERS[configuration.scm_type](self._node)
        plan = downloader.prepare(
            configuration, validated, command.workspace, command.build_log
        )
        downloader.run(plan, command.workspace, command.env, command.build_log)

        if command.changelog_path:
            self._write_empty_changelog(Path(command.changelog_path))

        logger.info(
            "Checked out job %s (%s) into %s",
            command.job_name,
            configuration.scm_type.value,
            plan.target_folder,
        )
        return CheckoutResult(
            job_name=command.job_name,
            scm_type=configuration.scm_type.value,
            connection_id=validated.connection.connection_id,
            target_folder=plan.target_folder,
            exit_code=0,
            arguments=plan.arguments.to_masked_list(),
        )

    @staticmethod
    def _write_empty_changelog(path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")
