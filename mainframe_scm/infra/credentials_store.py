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

"""Credentials store backed by a YAML file.

Layout::

    credentials:
      mainframe-user:
        username: XDEVREG
        password: secret
        description: Build user
      mainframe-cert:
        certificate: MIIC...
        password: keystore-secret
        subject: CN=XDEVREG
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from mainframe_scm.core.checkout.credentials import (
    CertificateCredentials,
    Credentials,
    UsernamePasswordCredentials,
)
from mainframe_scm.core.checkout.repositories import CredentialsRepository

logger = logging.getLogger(__name__)


class YamlCredentialsStore(CredentialsRepository):
    """Read-only credentials lookup by id."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._records: Dict[str, Dict[str, Any]] = {}
        if path.exists():
            with path.open("r", encoding="utf-8") as stream:
                data = yaml.safe_load(stream) or {}
            self._records = data.get("credentials") or {}
        else:
            logger.warning("Credentials file %s not found", path)

    def find_by_id(self, credentials_id: str) -> Optional[Credentials]:
        record = self._records.get(credentials_id)
        if record is None:
            return None
        return _to_credentials(credentials_id, record)


def _to_credentials(credentials_id: str, record: Dict[str, Any]) -> Optional[Credentials]:
    password = str(record.get("password") or "")
    description = str(record.get("description") or "")
    if record.get("certificate"):
        return CertificateCredentials(
            credentials_id=credentials_id,
            certificate=str(record["certificate"]),
            password=password,
            subject=str(record.get("subject") or ""),
            description=description,
        )
    if record.get("username"):
        return UsernamePasswordCredentials(
            credentials_id=credentials_id,
            username=str(record["username"]),
            password=password,
            description=description,
        )
    logger.warning("Credentials %s have neither a username nor a certificate", credentials_id)
    return None
