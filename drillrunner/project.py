"""Building a rust-project.json description of the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry: a single exercise file."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class AnalyzerProject:
    """The project file contents: the toolchain sources and every crate."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }

    def write_to_disk(self, path="./rust-project.json") -> None:
        """Write the project as compact JSON."""
        text = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        Path(path).write_text(text, encoding="utf-8")

    def add_path(self, path: str) -> None:
        """Add a crate when the text after the first dot is ``rs``."""
        _, dot, extension = path.partition(".")
        if dot and extension == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root=".") -> None:
        """Add a crate for every .rs file under ``root``/exercises."""
        for entry in sorted((Path(root) / "exercises").glob("**/*")):
            self.add_path(str(entry))

    def get_sysroot_src(self) -> None:
        """Locate the standard library sources of the default toolchain."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return
        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        output = (result.stdout or b"").decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(Path(toolchain, "lib", "rustlib", "src", "rust", "library"))