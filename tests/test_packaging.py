from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

ROOT = Path(__file__).resolve().parent.parent


def test_namespace_packages_are_discovered():
    cfg = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    find = cfg["tool"]["setuptools"]["packages"]["find"]
    # packages/, apps/ and script/ have no __init__.py
    assert find["namespaces"] is True
    for top in ("packages", "apps", "script"):
        assert not (ROOT / top / "__init__.py").exists()
        assert any(pat.startswith(top) for pat in find["include"])


def test_console_script_target_exists():
    cfg = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    module, func = cfg["project"]["scripts"]["wordscramble"].split(":")
    assert module == "apps.cli.play" and func == "main"
    assert (ROOT / "apps" / "cli" / "play.py").exists()
