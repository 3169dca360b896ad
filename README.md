# rustlings

Support code for a set of small Rust exercises:

- `rustlings.project` builds the `rust-project.json` file that lets
  rust-analyzer treat each exercise file as its own crate.
- `rustlings.ui` prints coloured warning and success lines.
- `rustlings.exercises` holds Python counterparts of finished exercises.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## rust-analyzer project files

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("exercises")
project.write_to_disk("./rust-project.json")
```

- `get_sysroot_src()` takes the standard library path from the
  `RUST_SRC_PATH` environment variable if it is set; otherwise it runs
  `rustc --print sysroot` and appends `lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` walks everything under `root` (default
  `exercises`) and calls `path_to_json()` on each path, which adds a `Crate`
  when the text after the first `.` in the path is `rs`. Each crate uses
  edition `2021`, no dependencies and the `test` cfg.
- `to_json()` returns the compact JSON; `write_to_disk(path)` writes it
  (default `./rust-project.json`).

## Status lines

`rustlings.ui.warn(message)` prints a red line marked `⚠️`, and
`rustlings.ui.success(message)` a green line marked `✅`. When the `NO_EMOJI`
environment variable is set, `no_emoji()` returns `True` and the marks become
`!` and `✓`.

## Worked solutions

Modules under `rustlings.exercises`:

- `quizzes` – `calculate_price_of_apples`, `transformer` with the
  `Uppercase`, `Trim` and `Append` commands, and `ReportCard`.
- `errors` – `generate_nametag_text`, `total_cost`, `spend_tokens`,
  `PositiveNonzeroInteger` (raises `CreationError`) and `parse_pos_nonzero`
  (raises `ParsePosNonzeroError`).
- `basics` – `bigger`, `foo_if_fizz`, `call_me`, `sale_price`, `is_even`,
  `square`.
- `enums` – a `State` driven by `Quit`, `Move`, `Echo` and `ChangeColor`
  messages.
- `generics` – `Wrapper`.
- `hashmaps` – `default_fruit_basket`, `fill_fruit_basket` with `Fruit`, and
  `build_scores_table` producing `Team` records.
- `iterators` – `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` (raises `NotDivisibleError` or
  `DivideByZeroError`), `result_with_list`, `list_of_results`, `factorial`,
  and the `count_*` functions over `Progress` values.
- `options` – `maybe_icecream`.
- `strings` – `current_favorite_color`, `is_a_color_word`, `trim_me`,
  `compose_me`, `replace_me`, `longest`.
- `structs` – `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`,
  `Order` with `create_order_template`, and `Package`.
- `traits` – `append_bar` for strings and lists of strings, `Licensed`,
  `SomeSoftware`, `OtherSoftware`, `compare_license_types`.
- `vecs` – `array_and_vec`, `vec_loop`, `vec_map`.
- `threads` – `run_jobs` with `JobStatus`, and `send_tx` and `receive_all`
  moving a `Queue` through a channel from two threads.

## What this package does not do

There is no command-line tool. The package does not read an `info.toml`
exercise list, compile or run exercises with `rustc` or clippy, verify them
in order, track which ones are done, show hints, reset exercises, or watch
the exercise folder for changes.