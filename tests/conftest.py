import subprocess

import pytest

from package_file_verify.verifiers.runner import CommandOutput

DPKG_VERIFY_OUTPUT = """\
??5??????   /usr/share/doc/openssh-server/README
??5?????? c /etc/ssh/sshd_config
missing     /usr/sbin/sshd-keygen
"""

RPM_VERIFY_OUTPUT = """\
S.5....T.  c /etc/ssh/sshd_config
.......T.    /usr/lib/systemd/system/sshd.service
"""


@pytest.fixture
def dpkg_verify_output():
    return DPKG_VERIFY_OUTPUT


@pytest.fixture
def rpm_verify_output():
    return RPM_VERIFY_OUTPUT


@pytest.fixture
def command_output():
    """Factory for CommandOutput values returned by a mocked run_command."""

    def _make(stdout="", returncode=0, stderr="", args=None):
        return CommandOutput(
            args=args or ["/usr/bin/true"],
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )

    return _make


@pytest.fixture
def completed_process():
    """Factory for subprocess.CompletedProcess values with byte output."""

    def _make(stdout=b"", returncode=0, stderr=b""):
        return subprocess.CompletedProcess(
            args=[], returncode=returncode, stdout=stdout, stderr=stderr
        )

    return _make
