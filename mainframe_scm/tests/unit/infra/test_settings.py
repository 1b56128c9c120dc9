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

"""Unit tests for environment settings."""

from pathlib import Path

from mainframe_scm.infra.settings import load_settings


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults_under_home(self, monkeypatch, tmp_path):
        """Every store should default to a file under the home directory."""
        for name in (
            "MAINFRAME_SCM_GLOBAL_CONFIG",
            "MAINFRAME_SCM_CONNECTIONS_FILE",
            "MAINFRAME_SCM_CREDENTIALS_FILE",
            "MAINFRAME_SCM_JOBS_DIR",
        ):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("MAINFRAME_SCM_HOME", str(tmp_path))

        settings = load_settings()

        assert settings.home == tmp_path
        assert settings.global_config_file == tmp_path / "global.yaml"
        assert settings.connections_file == tmp_path / "connections.yaml"
        assert settings.credentials_file == tmp_path / "credentials.yaml"
        assert settings.jobs_dir == tmp_path / "jobs"

    def test_overrides(self, monkeypatch, tmp_path):
        """Individual variables should override the defaults."""
        monkeypatch.setenv("MAINFRAME_SCM_HOME", str(tmp_path))
        monkeypatch.setenv("MAINFRAME_SCM_JOBS_DIR", "/srv/jobs")

        settings = load_settings()

        assert settings.jobs_dir == Path("/srv/jobs")
