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

"""Unit tests for the per-flavor downloaders."""

import io

import pytest

from mainframe_scm.core.checkout.configurations import EndevorConfiguration
from mainframe_scm.core.checkout.credentials import UsernamePasswordCredentials
from mainframe_scm.core.checkout.validation import ValidatedCheckout
from mainframe_scm.core.connections import HostConnection
from mainframe_scm.core.exceptions import CheckoutAbortedError, CliIncompatibleError
from mainframe_scm.orchestrator.checkout.downloaders import (
    EndevorDownloader,
    IspwContainerDownloader,
    IspwDownloader,
    PdsDownloader,
)

from conftest import CLI_LOCATION, WORKSPACE, FakeBuildNode

SCRIPT = CLI_LOCATION + "/SCMDownloaderCLI.sh"
DATA_DIR = WORKSPACE + "/TopazCliWkspc"


@pytest.fixture
def validated(connection, user_credentials) -> ValidatedCheckout:
    """Provide a validated checkout on a POSIX node."""
    return ValidatedCheckout(
        connection=connection,
        credentials=user_credentials,
        cli_location=CLI_LOCATION,
    )


def _download(downloader, configuration, validated, env, build_log):
    plan = downloader.prepare(configuration, validated, WORKSPACE, build_log)
    return downloader.run(plan, WORKSPACE, env, build_log)


def _connection_args(data_dir: str = DATA_DIR, scm: str = "pds"):
    return [
        SCRIPT,
        "-host", "cw09.example.com",
        "-port", "30947",
        "-id", "XDEVREG",
        "-cert", "",
        "-pass", "s3cret",
        "-code", "1047",
        "-timeout", "5",
        "-scm", scm,
        "-targetFolder", WORKSPACE,
        "-data", data_dir,
    ]


class TestPdsDownloader:
    """Tests for PdsDownloader."""

    def test_argument_order(self, unix_node, pds_config, validated, build_log):
        """Arguments should follow the CLI contract."""
        _download(PdsDownloader(unix_node), pds_config, validated, None, build_log)

        args = unix_node.launches[0]["args"]
        data_dir = args[args.index("-data") + 1]
        assert data_dir.startswith(DATA_DIR)
        assert data_dir != DATA_DIR
        assert args == _connection_args(data_dir=data_dir) + [
            "-filter", "XDEVREG.XPED.COBOL,XDEVREG.XPED.COPY",
            "-ext", "cbl",
        ]

    def test_unique_data_dir_removed_on_success(self, unix_node, pds_config, validated, build_log):
        """The per-run data directory should be deleted after success."""
        _download(PdsDownloader(unix_node), pds_config, validated, None, build_log)

        args = unix_node.launches[0]["args"]
        assert unix_node.removed_trees == [args[args.index("-data") + 1]]

    def test_launch_environment(self, unix_node, pds_config, validated, build_log):
        """The CLI should run in the workspace with the build environment."""
        env = {"BUILD_NUMBER": "42"}
        _download(PdsDownloader(unix_node), pds_config, validated, env, build_log)

        launch = unix_node.launches[0]
        assert launch["cwd"] == WORKSPACE
        assert launch["env"] == env
        assert unix_node.created_dirs == [WORKSPACE]

    def test_output_streamed_to_build_log(self, unix_node, pds_config, validated, build_log):
        """CLI output and the exit line should reach the build log."""
        _download(PdsDownloader(unix_node), pds_config, validated, None, build_log)

        log = build_log.getvalue()
        assert "Downloading XDEVREG.XPED.COBOL(PAYROLL)" in log
        assert "Call SCMDownloaderCLI.sh exited with value = 0" in log

    def test_nonzero_exit_aborts(self, pds_config, validated, build_log):
        """A non-zero exit should raise with the code and keep the data dir."""
        node = FakeBuildNode(exit_code=8)

        with pytest.raises(CheckoutAbortedError) as exc_info:
            _download(PdsDownloader(node), pds_config, validated, None, build_log)

        assert exc_info.value.exit_code == 8
        assert exc_info.value.message == "Call SCMDownloaderCLI.sh exited with value = 8"
        assert node.removed_trees == []

    def test_relative_target_folder(self, unix_node, pds_config, validated, build_log):
        """A relative target folder should resolve against the workspace."""
        pds_config.target_folder = "src/cobol"
        plan = PdsDownloader(unix_node).prepare(pds_config, validated, WORKSPACE, build_log)

        args = plan.arguments.to_list()
        assert args[args.index("-targetFolder") + 1] == WORKSPACE + "/src/cobol"
        assert plan.target_folder == WORKSPACE + "/src/cobol"

    def test_absolute_target_folder(self, unix_node, pds_config, validated, build_log):
        """An absolute target folder should be used as is."""
        pds_config.target_folder = "/srv/sources"
        plan = PdsDownloader(unix_node).prepare(pds_config, validated, WORKSPACE, build_log)
        assert plan.target_folder == "/srv/sources"

    def test_password_masked(self, unix_node, pds_config, validated, build_log):
        """The password should be masked in the rendered arguments."""
        plan = PdsDownloader(unix_node).prepare(pds_config, validated, WORKSPACE, build_log)

        assert "s3cret" in plan.arguments.to_list()
        assert "s3cret" not in str(plan.arguments)
        assert "******" in plan.arguments.to_masked_list()
        assert "s3cret" not in build_log.getvalue()

    def test_old_cli_rejected_before_launch(self, pds_config, validated, build_log):
        """An old CLI should be rejected without launching anything."""
        node = FakeBuildNode(cli_version="18.1.0")

        with pytest.raises(CliIncompatibleError):
            _download(PdsDownloader(node), pds_config, validated, None, build_log)

        assert node.launches == []


class TestConnectionArguments:
    """Tests for connection-derived arguments."""

    def test_certificate_credentials(
        self, unix_node, pds_config, connection, certificate_credentials, build_log
    ):
        """Certificate logins should pass -cert and omit -id."""
        validated = ValidatedCheckout(connection, certificate_credentials, CLI_LOCATION)
        args = PdsDownloader(unix_node).prepare(
            pds_config, validated, WORKSPACE, build_log
        ).arguments.to_list()

        assert "-id" not in args
        assert args[args.index("-cert") + 1] == "MIICdzCCAeCgAwIBAgIJAL"
        assert args[args.index("-pass") + 1] == "keystore-pw"
        assert args.index("-cert") < args.index("-pass")

    def test_username_credentials_pass_empty_certificate(
        self, unix_node, pds_config, validated, build_log
    ):
        """Username logins should pass -id followed by an empty -cert."""
        args = PdsDownloader(unix_node).prepare(
            pds_config, validated, WORKSPACE, build_log
        ).arguments.to_list()

        cert_index = args.index("-cert")
        assert args[cert_index - 2:cert_index] == ["-id", "XDEVREG"]
        assert args[cert_index + 1] == ""

    def test_protocol_passed_after_password(self, unix_node, pds_config, user_credentials, build_log):
        """A protocol should follow -pass and precede -code."""
        connection = HostConnection("c1", "tls", "cw09:30948", "1047", protocol="TLSv1.2")
        validated = ValidatedCheckout(connection, user_credentials, CLI_LOCATION)

        args = PdsDownloader(unix_node).prepare(
            pds_config, validated, WORKSPACE, build_log
        ).arguments.to_list()

        assert args[args.index("-protocol") + 1] == "TLSv1.2"
        assert args.index("-pass") < args.index("-protocol") < args.index("-code")

    def test_protocol_none_omitted(self, unix_node, pds_config, user_credentials, build_log):
        """A protocol of none should not be passed."""
        connection = HostConnection("c1", "plain", "cw09:30947", "1047", protocol="None")
        validated = ValidatedCheckout(connection, user_credentials, CLI_LOCATION)

        args = PdsDownloader(unix_node).prepare(
            pds_config, validated, WORKSPACE, build_log
        ).arguments.to_list()

        assert "-protocol" not in args

    def test_protocol_requires_recent_cli(self, pds_config, user_credentials, build_log):
        """A protocol on an old CLI should be rejected."""
        node = FakeBuildNode(cli_version="19.2.0")
        connection = HostConnection("c1", "tls", "cw09:30948", "1047", protocol="TLSv1.2")
        validated = ValidatedCheckout(connection, user_credentials, CLI_LOCATION)

        with pytest.raises(CliIncompatibleError):
            _download(PdsDownloader(node), pds_config, validated, None, build_log)
        assert node.launches == []

    def test_empty_timeout_omitted(self, unix_node, pds_config, user_credentials, build_log):
        """A connection without a timeout should omit -timeout."""
        connection = HostConnection("c1", "plain", "cw09:30947", "1047")
        validated = ValidatedCheckout(connection, user_credentials, CLI_LOCATION)

        args = PdsDownloader(unix_node).prepare(
            pds_config, validated, WORKSPACE, build_log
        ).arguments.to_list()

        assert "-timeout" not in args

    def test_windows_values_quoted(self, windows_node, pds_config, connection, build_log):
        """Windows nodes should run the batch script with quoted values."""
        credentials = UsernamePasswordCredentials("u", "XDEVREG", 'pa"ss')
        validated = ValidatedCheckout(connection, credentials, "C:\\Topaz\\CLI")

        args = PdsDownloader(windows_node).prepare(
            pds_config, validated, "C:\\builds\\payroll", build_log
        ).arguments.to_list()

        assert args[0] == "C:\\Topaz\\CLI\\SCMDownloaderCLI.bat"
        assert args[args.index("-host") + 1] == '"cw09.example.com"'
        assert args[args.index("-pass") + 1] == '"pa""ss"'
        assert args[args.index("-code") + 1] == "1047"
        assert args[args.index("-targetFolder") + 1] == '"C:\\builds\\payroll"'


class TestEndevorDownloader:
    """Tests for EndevorDownloader."""

    def test_arguments(self, unix_node, connection, validated, build_log):
        """Endevor should pass its filter and extension with a shared data dir."""
        config = EndevorConfiguration(
            connection_id=connection.connection_id,
            credentials_id="mainframe-user",
            filter_pattern="ENV1.SYS1.SUB1.COBOL  ENV1.SYS1.SUB1.COPY",
            file_extension="cbl",
        )

        _download(EndevorDownloader(unix_node), config, validated, None, build_log)

        assert unix_node.launches[0]["args"] == _connection_args(scm="endevor") + [
            "-filter", "ENV1.SYS1.SUB1.COBOL,ENV1.SYS1.SUB1.COPY",
            "-ext", "cbl",
        ]
        assert unix_node.removed_trees == []


class TestIspwDownloader:
    """Tests for IspwDownloader."""

    def test_required_arguments(self, unix_node, ispw_config, validated, build_log):
        """Minimal ISPW configurations should pass the required flags only."""
        _download(IspwDownloader(unix_node), ispw_config, validated, None, build_log)

        assert unix_node.launches[0]["args"] == _connection_args(scm="ispw") + [
            "-ispwServerStream", "PLAY",
            "-ispwServerApp", "PLAY",
            "-ispwServerLevel", "DEV1",
            "-ispwLevelOption", "0",
            "-ispwFilterFiles", "false",
            "-ispwFilterFolders", "false",
            "-ispwDownloadAll", "false",
            "-ispwDownloadIncl", "false",
        ]

    def test_optional_arguments(self, unix_node, ispw_config, validated, build_log):
        """Optional filters should switch their flags on and be passed."""
        ispw_config.server_config = "ispw"
        ispw_config.folder_name = "PAY*"
        ispw_config.component_type = "COB"
        ispw_config.download_all = True
        ispw_config.download_includes = True
        ispw_config.categorize_on_component_type = True

        _download(IspwDownloader(unix_node), ispw_config, validated, None, build_log)

        args = unix_node.launches[0]["args"]
        assert args[args.index("-ispwFilterFiles") + 1] == "true"
        assert args[args.index("-ispwFilterFolders") + 1] == "true"
        assert args[args.index("-ispwServerConfig") + 1] == "ispw"
        assert args[args.index("-ispwFolderName") + 1] == "PAY*"
        assert args[args.index("-ispwComponentType") + 1] == "COB"
        assert args[args.index("-ispwDownloadAll") + 1] == "true"
        assert args[args.index("-ispwDownloadIncl") + 1] == "true"
        assert args[-1] == "-cpCategorizeOnComponentType"


class TestIspwContainerDownloader:
    """Tests for IspwContainerDownloader."""

    def test_arguments(self, unix_node, container_config, validated, build_log):
        """Container checkouts should pass name, type and download-all."""
        container_config.server_level = "QA"

        _download(
            IspwContainerDownloader(unix_node), container_config, validated, None, build_log
        )

        assert unix_node.launches[0]["args"] == _connection_args(scm="ispwc") + [
            "-ispwContainerName", "PLAY000123",
            "-ispwContainerType", "0",
            "-ispwServerLevel", "QA",
            "-ispwDownloadAll", "false",
        ]


def test_build_log_is_text_stream(unix_node, pds_config, validated):
    """Any text stream should serve as the build log."""
    log = io.StringIO()
    assert _download(PdsDownloader(unix_node), pds_config, validated, None, log) is True
