"""Tests for the public package surface."""

from __future__ import annotations

import subprocess
import sys

import pwbuild


def test_public_names():
    assert set(pwbuild.__all__) == {
        "PasswordGenerator",
        "PasswordConfig",
        "DEFAULT_CONFIG",
        "PasswordBuildError",
        "BuilderConsumedError",
        "generate_password",
    }


def test_import_does_not_pull_in_qiskit():
    # qiskit is an optional extra; only pwbuild.quantum_engine needs it.
    code = (
        "import sys, pwbuild; "
        "pwbuild.PasswordGenerator.create().build(); "
        "sys.exit(1 if any(m.split('.')[0] in ('qiskit', 'qiskit_aer') for m in sys.modules) else 0)"
    )
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
