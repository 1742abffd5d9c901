import json
import subprocess
from unittest.mock import patch

import pytest

from rustdrill.project import Crate, RustAnalyzerProject


def test_add_path_accepts_rs():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    assert [c.root_module for c in project.crates] == ["exercises/intro/intro1.rs"]
    crate = project.crates[0]
    assert crate.edition == "2021"
    assert crate.deps == []
    assert crate.cfg == ["test"]


@pytest.mark.parametrize(
    "path", ["exercises/README.md", "exercises", "exercises/a.rs.bak"]
)
def test_add_path_rejects_others(path):
    project = RustAnalyzerProject()
    project.add_path(path)
    assert project.crates == []


def test_exercises_to_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "intro").mkdir(parents=True)
    (tmp_path / "exercises" / "intro" / "intro1.rs").write_text("fn main() {}")
    (tmp_path / "exercises" / "quiz1.rs").write_text("")
    (tmp_path / "exercises" / "README.md").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json("exercises")
    assert [c.root_module for c in project.crates] == [
        "exercises/intro/intro1.rs",
        "exercises/quiz1.rs",
    ]


def test_exercises_to_json_missing_dir(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "nothing")
    assert project.crates == []


def test_get_sysroot_src(capsys):
    result = subprocess.CompletedProcess(
        args=[], returncode=0, stdout=b"/opt/toolchain\n", stderr=b""
    )
    project = RustAnalyzerProject()
    with patch("rustdrill.project.subprocess.run", return_value=result):
        project.get_sysroot_src()
    assert project.sysroot_src == "/opt/toolchain/lib/rustlib/src/rust/library"
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_get_sysroot_src_without_rustc():
    project = RustAnalyzerProject()
    with patch(
        "rustdrill.project.subprocess.run", side_effect=FileNotFoundError("rustc")
    ):
        with pytest.raises(FileNotFoundError):
            project.get_sysroot_src()
    assert project.sysroot_src == ""


def test_empty_project_json():
    assert RustAnalyzerProject().to_json() == '{"sysroot_src":"","crates":[]}'


def test_to_json_round_trip():
    project = RustAnalyzerProject(sysroot_src="lib", crates=[Crate("a.rs")])
    data = json.loads(project.to_json())
    assert data["sysroot_src"] == "lib"
    rebuilt = RustAnalyzerProject(
        sysroot_src=data["sysroot_src"],
        crates=[Crate(**c) for c in data["crates"]],
    )
    assert rebuilt == project


def test_write_to_disk(tmp_path):
    project = RustAnalyzerProject(crates=[Crate("exercises/x.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert target.read_text(encoding="utf-8") == project.to_json()
    assert json.loads(target.read_text())["crates"][0]["root_module"] == "exercises/x.rs"