"""Generation of the rust-project.json file for rust-analyzer."""

import json
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file treated as a standalone crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path):
        """Add a crate if the text after the first dot of ``path`` is ``rs``."""
        path = str(path)
        _, dot, ext = path.partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root="exercises"):
        """Add every .rs file found below ``root``."""
        for entry in sorted(Path(root).glob("**/*"), key=str):
            self.add_path(str(entry))

    def get_sysroot_src(self):
        """Ask rustc for the default toolchain and derive the library sources."""
        raw = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True
        ).stdout.decode("utf-8", errors="replace")
        tokens = raw.split()
        toolchain = tokens[0] if tokens else raw
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(
            Path(toolchain, "lib", "rustlib", "src", "rust", "library")
        )

    def to_json(self):
        """Serialise the project as compact JSON."""
        return json.dumps(asdict(self), separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self, path="./rust-project.json"):
        """Write the JSON document to ``path``."""
        Path(path).write_text(self.to_json(), encoding="utf-8")