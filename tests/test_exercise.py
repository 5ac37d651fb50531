import os
import subprocess
from pathlib import Path

import pytest

from drillrunner.exercise import (
    ContextLine,
    Exercise,
    ExerciseError,
    Mode,
    State,
    clean,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


class FakeTools:
    def __init__(self, compile_code=0, run_code=0, stdout=b"", stderr=b""):
        self.compile_code = compile_code
        self.run_code = run_code
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        if args[0] == "rustc":
            return subprocess.CompletedProcess(args, self.compile_code, b"", b"compile error text")
        return subprocess.CompletedProcess(args, self.run_code, self.stdout, self.stderr)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def make(path, text, mode=Mode.COMPILE, name="example"):
    path.write_text(text)
    return Exercise(name=name, path=path, mode=mode, hint="")


def test_pending_state(workdir):
    exercise = make(workdir / "pending_exercise.rs", PENDING, name="pending_exercise")
    expected = (
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    )
    assert exercise.state() == State(expected)
    assert exercise.looks_done() is False


def test_finished_exercise(workdir):
    exercise = make(workdir / "finished_exercise.rs", FINISHED)
    assert exercise.state() == State()
    assert exercise.looks_done() is True


def test_marker_near_top_clamps_context(workdir):
    exercise = make(workdir / "a.rs", "// I AM NOT DONE\r\nfn main() {}\r\n")
    state = exercise.state()
    assert [c.number for c in state.context] == [1, 2]
    assert state.context[0].line == "// I AM NOT DONE"
    assert state.context[0].important


def test_str_is_path(workdir):
    exercise = make(workdir / "x.rs", FINISHED)
    assert str(exercise) == str(workdir / "x.rs")


def test_clean(workdir):
    Path(temp_file()).write_text("")
    clean()
    assert not Path(temp_file()).exists()


def test_compile_and_close_removes_binary(workdir, monkeypatch):
    tools = FakeTools()
    monkeypatch.setattr(subprocess, "run", tools)
    exercise = make(workdir / "x.rs", FINISHED)
    Path(temp_file()).write_text("")
    with exercise.compile() as compiled:
        assert Path(temp_file()).exists()
        assert compiled.exercise is exercise
    assert not Path(temp_file()).exists()
    assert tools.calls[0][:2] == ["rustc", str(workdir / "x.rs")]
    assert "--edition" in tools.calls[0]


def test_compile_failure_raises(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeTools(compile_code=1))
    exercise = make(workdir / "x.rs", FINISHED)
    Path(temp_file()).write_text("")
    with pytest.raises(ExerciseError) as info:
        exercise.compile()
    assert info.value.output.stderr == "compile error text"
    assert not Path(temp_file()).exists()


def test_run_success_returns_output(workdir, monkeypatch):
    tools = FakeTools(stdout=b"THIS TEST TOO SHALL PASS\n")
    monkeypatch.setattr(subprocess, "run", tools)
    exercise = make(workdir / "t.rs", FINISHED, mode=Mode.TEST)
    with exercise.compile() as compiled:
        out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert tools.calls[0][:2] == ["rustc", "--test"]
    assert tools.calls[1][1:] == ["--show-output"]


def test_run_failure_raises(workdir, monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeTools(run_code=101, stdout=b"out", stderr=b"err"))
    exercise = make(workdir / "x.rs", FINISHED)
    with exercise.compile() as compiled:
        with pytest.raises(ExerciseError) as info:
            compiled.run()
    assert info.value.output.stdout == "out"
    assert info.value.output.stderr == "err"


def test_clippy_writes_manifest(workdir, monkeypatch):
    tools = FakeTools()
    monkeypatch.setattr(subprocess, "run", tools)
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    exercise = make(workdir / "clip.rs", FINISHED, mode=Mode.CLIPPY, name="clip")
    exercise.compile().close()
    manifest = (workdir / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clip"' in manifest
    assert [call[:2] for call in tools.calls[1:]] == [["cargo", "clean"], ["cargo", "clippy"]]


def test_load_exercises(workdir):
    (workdir / "info.toml").write_text(
        '[[exercises]]\nname = "intro1"\npath = "exercises/intro/intro1.rs"\n'
        'mode = "compile"\nhint = "Hello!"\n'
    )
    exercises = load_exercises(workdir / "info.toml")
    assert exercises == [
        Exercise("intro1", Path("exercises/intro/intro1.rs"), Mode.COMPILE, "Hello!")
    ]


def test_load_exercises_bad_mode(workdir):
    (workdir / "info.toml").write_text(
        '[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "bogus"\nhint = ""\n'
    )
    with pytest.raises(ValueError):
        load_exercises(workdir / "info.toml")


def test_load_exercises_missing_field(workdir):
    (workdir / "info.toml").write_text('[[exercises]]\nname = "a"\n')
    with pytest.raises(ValueError):
        load_exercises(workdir / "info.toml")


def test_temp_file_includes_process_id():
    assert str(os.getpid()) in temp_file()