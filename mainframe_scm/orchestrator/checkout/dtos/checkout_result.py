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

"""Checkout result DTO."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class CheckoutResult:
    """Result of a successful checkout.

    Attributes:
        job_name: Job that was checked out.
        scm_type: Flavor passed as ``-scm``.
        connection_id: Host connection used.
        target_folder: Resolved source download location.
        exit_code: CLI exit code, always 0 on success.
        arguments: CLI arguments with the password masked.
    """

    job_name: str
    scm_type: str
    connection_id: str
    target_folder: str
    exit_code: int
    arguments: List[str]
