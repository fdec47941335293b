import pytest


@pytest.fixture(autouse=True)
def output_root(tmp_path, monkeypatch):
    """Every test writes under its own temporary output root."""
    root = tmp_path / "out"
    monkeypatch.setenv("PREEXPLORER_DIR", str(root))
    monkeypatch.chdir(tmp_path)
    return root


@pytest.fixture
def spawned(monkeypatch):
    """Record gnuplot launches instead of running gnuplot."""
    import subprocess

    calls = []

    class FakePopen:
        def __init__(self, cmd, *args, **kwargs):
            calls.append(cmd)

    monkeypatch.setattr(subprocess, "Popen", FakePopen)
    return calls
