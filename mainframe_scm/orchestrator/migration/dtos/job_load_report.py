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

"""Job load report DTO."""

from dataclasses import dataclass, field
from typing import Dict, List

from mainframe_scm.core.checkout.configurations import JobConfiguration


@dataclass
class JobLoadReport:
    """Outcome of loading every stored job.

    Attributes:
        configurations: Loaded configurations by job name, migrated ones
            already carrying their connection id.
        migrated: Jobs migrated and re-saved.
        failed: Jobs whose connection registration or re-save failed.
        unreadable: Jobs whose stored configuration could not be read.
    """

    configurations: Dict[str, JobConfiguration] = field(default_factory=dict)
    migrated: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    unreadable: List[str] = field(default_factory=list)
