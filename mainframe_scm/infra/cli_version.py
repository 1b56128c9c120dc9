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

"""Downloader CLI version checks.

The CLI install directory holds a ``VERSION`` file whose first line is the
dotted version of the installed CLI.
"""

import logging
from typing import Optional

from mainframe_scm.core.checkout import constants
from mainframe_scm.core.checkout.repositories import BuildNode
from mainframe_scm.core.checkout.value_objects import CliVersion
from mainframe_scm.core.exceptions import CliIncompatibleError

logger = logging.getLogger(__name__)


def read_cli_version(node: BuildNode, cli_location: str) -> Optional[CliVersion]:
    """Read the installed CLI version; None if missing or unparsable."""
    path = cli_location + node.file_separator + constants.CLI_VERSION_FILE
    version = CliVersion.parse(node.read_text(path))
    if version is None:
        logger.warning("No readable CLI version in %s", path)
    return version


def check_cli_compatibility(
    node: BuildNode,
    cli_location: str,
    minimum: str = constants.DOWNLOADER_MINIMUM_CLI_VERSION,
    feature: str = "the source downloader",
) -> CliVersion:
    """Check the installed CLI is at least ``minimum``.

    Raises:
        CliIncompatibleError: If the version is unknown or too old.
    """
    version = read_cli_version(node, cli_location)
    if version is None or not version.at_least(CliVersion(minimum)):
        raise CliIncompatibleError(
            None if version is None else str(version),
            minimum,
            feature=feature,
        )
    return version


def check_protocol_supported(version: CliVersion) -> None:
    """Check an already-read CLI version can take the ``-protocol`` flag.

    Raises:
        CliIncompatibleError: If the version predates protocol support.
    """
    minimum = CliVersion(constants.PROTOCOL_MINIMUM_CLI_VERSION)
    if not version.at_least(minimum):
        raise CliIncompatibleError(
            str(version),
            str(minimum),
            feature="encrypted host connections",
        )
