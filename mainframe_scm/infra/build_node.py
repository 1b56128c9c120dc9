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

"""Build node running on the local machine."""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Mapping, Optional, TextIO

from mainframe_scm.core.checkout.repositories import BuildNode

logger = logging.getLogger(__name__)


class LocalBuildNode(BuildNode):
    """Runs checkouts on the machine hosting this process."""

    @property
    def is_unix(self) -> bool:
        return os.name != "nt"

    @property
    def file_separator(self) -> str:
        return os.sep

    def read_text(self, path: str) -> Optional[str]:
        try:
            return Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def make_dirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)

    def remove_tree(self, path: str) -> None:
        shutil.rmtree(path, ignore_errors=True)

    def launch(
        self,
        args: List[str],
        env: Optional[Mapping[str, str]],
        cwd: str,
        stdout: TextIO,
    ) -> int:
        """Run the process, copying its merged stdout and stderr to ``stdout``."""
        logger.debug("Launching %s in %s", args[0], cwd)
        with subprocess.Popen(
            args,
            env=dict(env) if env is not None else None,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        ) as process:
            for line in process.stdout:
                stdout.write(line)
            exit_code = process.wait()
        logger.info("Return code %d", exit_code)
        return exit_code
