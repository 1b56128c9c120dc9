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

"""Shared downloader behavior.

A downloader turns a validated configuration into a CLI invocation:
connection arguments first, then ``-scm``, ``-targetFolder`` and
``-data``, then the flavor's own arguments.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import ClassVar, Mapping, Optional, TextIO

from mainframe_scm.core.checkout import constants
from mainframe_scm.core.checkout.arguments import (
    ArgumentList,
    escape_for_script,
    resolve_path,
)
from mainframe_scm.core.checkout.configurations import JobConfiguration
from mainframe_scm.core.checkout.credentials import (
    CertificateCredentials,
    UsernamePasswordCredentials,
)
from mainframe_scm.core.checkout.repositories import BuildNode
from mainframe_scm.core.checkout.validation import ValidatedCheckout, echo
from mainframe_scm.core.checkout.value_objects import CliVersion, ScmType
from mainframe_scm.core.exceptions import CheckoutAbortedError
from mainframe_scm.infra.cli_version import (
    check_cli_compatibility,
    check_protocol_supported,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DownloadPlan:
    """A fully assembled CLI invocation.

    Attributes:
        script_name: Launcher file name, used in exit messages.
        arguments: Script path followed by its arguments.
        target_folder: Resolved source download location.
        data_dir: CLI data directory.
        remove_data_dir: Delete ``data_dir`` after a successful run.
    """

    script_name: str
    arguments: ArgumentList
    target_folder: str
    data_dir: str
    remove_data_dir: bool = False


class Downloader:
    """Base class for the per-flavor downloaders."""

    scm_type: ClassVar[ScmType]
    unique_data_dir: ClassVar[bool] = False

    def __init__(self, node: BuildNode) -> None:
        self._node = node

    def prepare(
        self,
        configuration: JobConfiguration,
        validated: ValidatedCheckout,
        workspace: str,
        build_log: TextIO,
    ) -> DownloadPlan:
        """Check the CLI version and assemble the invocation."""
        version = check_cli_compatibility(self._node, validated.cli_location)

        separator = self._node.file_separator
        script_name = (
            constants.SCM_DOWNLOADER_CLI_SH if self._node.is_unix
            else constants.SCM_DOWNLOADER_CLI_BAT
        )
        script = validated.cli_location + separator + script_name
        echo(build_log, "CLI script file", script)

        target_folder = workspace
        if configuration.target_folder:
            target_folder = resolve_path(
                configuration.target_folder, workspace, self._node.is_unix
            )
        data_dir = workspace + separator + constants.TOPAZ_CLI_WORKSPACE
        if self.unique_data_dir:
            data_dir += str(uuid.uuid4())
        echo(build_log, "CLI workspace", data_dir)

        arguments = ArgumentList(script)
        self._add_connection_arguments(arguments, validated, version)
        arguments.add_pair(constants.SCM_TYPE_PARM, self.scm_type.value)
        arguments.add_pair(constants.TARGET_FOLDER_PARM, self._escape(target_folder))
        arguments.add_pair(constants.DATA_PARM, self._escape(data_dir))
        self.add_flavor_arguments(arguments, configuration)
        logger.debug("%s arguments: %s", self.scm_type.value, arguments)

        return DownloadPlan(
            script_name=script_name,
            arguments=arguments,
            target_folder=target_folder,
            data_dir=data_dir,
            remove_data_dir=self.unique_data_dir,
        )

    def run(
        self,
        plan: DownloadPlan,
        workspace: str,
        env: Optional[Mapping[str, str]],
        build_log: TextIO,
    ) -> bool:
        """Launch the CLI in the workspace and map its exit code."""
        self._node.make_dirs(workspace)
        exit_code = self._node.launch(plan.arguments.to_list(), env, workspace, build_log)
        if exit_code != 0:
            raise CheckoutAbortedError(plan.script_name, exit_code)

        build_log.write(f"Call {plan.script_name} exited with value = {exit_code}\n")
        if plan.remove_data_dir:
            self._node.remove_tree(plan.data_dir)
        return True

    def add_flavor_arguments(
        self,
        arguments: ArgumentList,
        configuration: JobConfiguration,
    ) -> None:
        """Append the flavor's own arguments."""
        raise NotImplementedError

    def _escape(self, value: Optional[str]) -> Optional[str]:
        return escape_for_script(value, is_shell=self._node.is_unix)

    def _add_escaped_optional(
        self,
        arguments: ArgumentList,
        flag: str,
        value: Optional[str],
    ) -> None:
        if value and value.strip():
            arguments.add_pair(flag, self._escape(value))

    def _add_connection_arguments(
        self,
        arguments: ArgumentList,
        validated: ValidatedCheckout,
        version: CliVersion,
    ) -> None:
        connection = validated.connection
        credentials = validated.credentials

        arguments.add_pair(constants.HOST_PARM, self._escape(connection.host))
        arguments.add_pair(constants.PORT_PARM, self._escape(connection.port))
        if isinstance(credentials, UsernamePasswordCredentials):
            arguments.add_pair(constants.USERID_PARM, self._escape(credentials.username))
            arguments.add_pair(constants.CERT_PARM, "")
        elif isinstance(credentials, CertificateCredentials):
            arguments.add_pair(constants.CERT_PARM, credentials.certificate)
        arguments.add_pair(
            constants.PW_PARM, self._escape(credentials.password), masked=True
        )

        if connection.uses_protocol():
            check_protocol_supported(version)
            arguments.add_pair(constants.PROTOCOL_PARM, connection.protocol.strip())

        arguments.add_pair(constants.CODE_PAGE_PARM, connection.code_page)
        self._add_escaped_optional(arguments, constants.TIMEOUT_PARM, connection.timeout)
