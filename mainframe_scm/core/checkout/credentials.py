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

"""Login credentials resolved from the credentials store."""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class UsernamePasswordCredentials:
    """User id and password login."""

    credentials_id: str
    username: str
    password: str = field(repr=False)
    description: str = ""

    @property
    def display_user(self) -> str:
        """User shown in the build log."""
        return self.username


@dataclass(frozen=True)
class CertificateCredentials:
    """Client certificate login.

    Attributes:
        certificate: Encoded certificate passed to the CLI as ``-cert``.
        password: Keystore password passed as ``-pass``.
        subject: Certificate owner shown in the build log.
    """

    credentials_id: str
    certificate: str = field(repr=False)
    password: str = field(repr=False)
    subject: str = ""
    description: str = ""

    @property
    def display_user(self) -> str:
        """User shown in the build log."""
        return self.subject or self.credentials_id


Credentials = Union[UsernamePasswordCredentials, CertificateCredentials]
