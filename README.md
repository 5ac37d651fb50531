# drillrunner

A library for working through a set of small programming exercises. It reads
the exercise list from an `info.toml` file, compiles and runs each exercise,
and reports which ones are still pending.

An exercise counts as pending while its source still holds an
`I AM NOT DONE` comment. Once the exercise compiles and passes, removing that
comment marks it as done.

## Installing

```
pip install .
```

Exercises are compiled with `rustc`, and exercises in clippy mode are also
checked with `cargo clippy`; these tools must be on your `PATH`.

## The exercise list

`info.toml` holds one `[[exercises]]` table per exercise, each with `name`,
`path`, `mode` and `hint`. The mode is one of:

- `compile` – build the file as a program and run it;
- `test` – build the file's tests and run them with `--show-output`;
- `clippy` – write `./exercises/clippy/Cargo.toml` and lint with
  `cargo clippy -- -D warnings -D clippy::float_cmp`.

## Using it

```python
from drillrunner.exercise import load_exercises
from drillrunner.verify import VerifyError, verify

exercises = load_exercises("info.toml")
try:
    verify(exercises, (0, len(exercises)), verbose=False)
except VerifyError as err:
    print(err.exercise.hint)
```

`verify` goes through the exercises in order, prints a progress bar, and
raises `VerifyError` at the first exercise that fails to build, fails to run
or still carries its marker. For a pending exercise it shows the lines around
the marker. `drillrunner.verify.test` builds and runs one test exercise
without that prompt.

### `drillrunner.exercise`

- `load_exercises(path)` returns a list of `Exercise` objects.
- `Exercise.compile()` returns a `CompiledExercise`, or raises
  `ExerciseError` whose `output` holds the captured `stdout` and `stderr`.
- `CompiledExercise` is a context manager; `run()` runs the built binary and
  raises `ExerciseError` on a non-zero exit, and `close()` removes the
  temporary binary.
- `Exercise.state()` returns a `State`; `State.is_done()` is true when no
  marker is left, otherwise `State.context` holds `ContextLine` entries for
  the marker line and up to two lines on each side.
- `Exercise.looks_done()` is a shortcut for `state().is_done()`.

### `drillrunner.project`

`AnalyzerProject` builds a `rust-project.json` for editor support:
`get_sysroot_src()` takes `RUST_SRC_PATH` or asks `rustc --print sysroot`,
`exercises_to_json(root)` adds a `Crate` for every `.rs` file under
`root/exercises`, and `write_to_disk(path)` writes compact JSON
(by default to `./rust-project.json`).

### `drillrunner.ui`

`warn(message)` and `success(message)` print red and green status lines.
Set `NO_EMOJI` in the environment to get plain text markers.

### `drillrunner.drills`

Worked solutions to exercise topics as plain Python functions and classes:

- `basics` – pricing, comparisons, branching and parity;
- `errors` – validation, integer parsing errors, optional results and whole
  division (`divide`, `DivisionError` and its subclasses);
- `text` – string helpers, a small command machine (`transformer`,
  `Command`) and list doubling;
- `mappings` – fruit baskets, a football score table, capitalisation,
  `factorial` and progress counting;
- `traits` – `append_bar`, `Licensed` software and `ReportCard`;
- `records` – plain records, `Package` fees, the `MachineState` message
  machine, `Wrapper`, `Cons` lists and `abs_all`;
- `concurrency` – per-offset sums on threads, timed workers, a locked job
  counter and a two-sender channel (`send_all`).

## What it does not do

There is no command-line program: no `verify`, `run`, `hint`, `list`,
`reset` or `lsp` commands are installed. The package does not watch files
for changes, does not reset an exercise to its original state, and has no
drills for type conversions. Use the library functions above from your own
scripts.

## Tests

```
pip install .[test]
pytest
```