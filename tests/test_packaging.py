import re
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_only_continuity_tracker_packages_are_installed():
    text = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    block = re.search(r"packages = \[(.*?)\]", text, re.S).group(1)
    packages = re.findall(r'"([^"]+)"', block)

    assert packages
    assert all(p == "continuity_tracker" or p.startswith("continuity_tracker.") for p in packages)


def test_app_entry_point_does_not_patch_sys_path():
    text = (ROOT / "app.py").read_text(encoding="utf-8")

    assert "sys.path" not in text
