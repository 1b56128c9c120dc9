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

"""Checkout command DTO."""

from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

from mainframe_scm.core.checkout.configurations import JobConfiguration


@dataclass(frozen=True)
class CheckoutCommand:
    """Command to check out a job's mainframe sources into its workspace.

    Attributes:
        job_name: Job being built.
        configuration: The job's checkout configuration.
        workspace: Workspace directory on the build node.
        build_log: Stream receiving parameter echo lines and CLI output.
        env: Build environment for the CLI process; None inherits.
        changelog_path: File to receive the (empty) changelog, if any.
    """

    job_name: str
    configuration: JobConfiguration
    workspace: str
    build_log: TextIO
    env: Optional[Mapping[str, str]] = None
    changelog_path: Optional[str] = None
