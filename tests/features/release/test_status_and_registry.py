import io
import subprocess

import pytest

from jarpack.core.exceptions import VersionControlError
from jarpack.features.project_config.domain.models import ProjectConfig
from jarpack.features.release.data.git_adapter import GitCliAdapter
from jarpack.features.release.data.registry_client import SimulatedRegistryClient
from jarpack.features.release.service.status import render_status

# --- Status ---

def test_status_prefix_mode_valid(make_tree):
    src = make_tree({"x/A.kt": "package com.example.x\n"})
    out = io.StringIO()

    summary = render_status(None, src, "com.example", out)

    text = out.getvalue()
    assert summary.success
    assert "Validation Status (Prefix Mode)" in text
    assert "Expected Prefix: com.example" in text
    assert "Namespace Status: ✅ Valid" in text

def test_status_project_lists_first_errors(make_tree):
    src = make_tree({f"p/F{i}.java": "package wrong;\n" for i in range(5)})
    config = ProjectConfig(name="demo", version="2.0.0")
    out = io.StringIO()

    summary = render_status(config, src, None, out)

    text = out.getvalue()
    assert not summary.success
    assert "Name: demo" in text
    assert "Current Version: 2.0.0" in text
    assert "Repository: Not configured" in text
    assert "❌ Invalid (5 errors)" in text
    assert text.count("   • ") == 3
    assert "... and 2 more" in text

# --- Simulated registry ---

def test_registry_validates_working_tree(make_tree):
    src = make_tree({"A.kt": "package org.other\n"})
    client = SimulatedRegistryClient(src, "com.example", delay=0)

    result = client.validate_remote("abc123", "1.0.0")

    assert not result.success
    assert "Expected package starting with 'com.example'" in result.errors[0]

def test_registry_finalize_logs_steps(caplog):
    client = SimulatedRegistryClient("src", None, delay=0)

    with caplog.at_level("INFO"):
        client.finalize("1.0.0")

    assert "Publishing to repository..." in caplog.text

# --- Git adapter ---

def test_git_adapter_builds_commands(monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 0, stdout=" M a.kt\n?? b.kt\n", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    git = GitCliAdapter(binary="git")

    assert git.pending_changes() == ["M a.kt", "?? b.kt"]
    git.commit_all("Prepare release 1.0.0")
    git.create_tag("v1.0.0")
    git.push_tags()

    assert calls[1:] == [
        ["git", "add", "."],
        ["git", "commit", "-m", "Prepare release 1.0.0"],
        ["git", "tag", "v1.0.0"],
        ["git", "push", "--tags"],
    ]

def test_git_failure_raises(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(128, cmd, stderr="fatal: not a git repository")

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(VersionControlError) as exc:
        GitCliAdapter(binary="git").push()
    assert "not a git repository" in str(exc.value)

def test_missing_git_binary_raises(tmp_path):
    with pytest.raises(VersionControlError):
        GitCliAdapter(binary=str(tmp_path / "no-git")).current_commit()
