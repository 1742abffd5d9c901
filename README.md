# rustdrill

Helpers for working through a collection of small Rust exercises:

- `rustdrill.ui` prints coloured status lines in the terminal.
- `rustdrill.project` writes a `rust-project.json` file so that
  rust-analyzer can treat each exercise file as a crate of its own.
- `rustdrill.drills` holds worked solutions to many of the exercises as
  plain Python functions and classes.

## Requirements

- Python 3.11 or newer
- `rustc` on your `PATH`, but only for
  `RustAnalyzerProject.get_sysroot_src`

## Installation

```
pip install .
```

Install the test extra with `pip install .[test]` and run `pytest`.

## Terminal output: `rustdrill.ui`

```python
from rustdrill.ui import styled, warn, success, no_emoji

print(styled("I AM NOT DONE", "bold"))
print(styled("3", "blue", "bold"))
warn("Compiling of exercises/if/if1.rs failed!")
success("Successfully ran exercises/intro/intro1.rs!")
```

- `styled(text, *styles)` wraps the text in ANSI codes. The styles are
  `bold`, `dim`, `italic`, `underlined`, `red`, `green`, `yellow`, `blue`,
  `magenta` and `cyan`. An unknown name raises `ValueError`. With no styles,
  the text comes back unchanged.
- `warn(message)` prints a red line. `success(message)` prints a green line.
- When the `NO_EMOJI` environment variable is set, `no_emoji()` returns
  true. `warn` and `success` then use `!` and `✓` in place of emoji.

## rust-analyzer support: `rustdrill.project`

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # runs `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("./rust-project.json")
```

- `exercises_to_json(root)` searches everything below `root`, in sorted
  order. It adds a `Crate` for each path whose text after the first dot is
  exactly `rs`. Each crate uses edition 2021, has no deps and has
  `cfg = ["test"]`, so rust-analyzer also works inside `#[test]` blocks.
- `add_path(path)` applies the same rule to a single path.
- `get_sysroot_src()` prints the toolchain it found. It then sets
  `sysroot_src` to `<toolchain>/lib/rustlib/src/rust/library`.
- `to_json()` returns compact JSON. `write_to_disk(path)` writes that JSON to
  the given path.

## Worked solutions: `rustdrill.drills`

| Module | Contents |
| --- | --- |
| `quiz` | `calculate_price_of_apples`, `transformer` with `Command`/`CommandKind`, `ReportCard.render` |
| `conditionals` | `bigger`, `foo_if_fizz` |
| `functions` | `call_me`, `sale_price`, `is_even`, `square` |
| `vecs` | `array_and_vec`, `vec_loop`, `vec_map` |
| `strings` | `current_favorite_color`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `generics` | `Wrapper` |
| `enums` | `State.process` with the messages `Quit`, `Echo`, `Move`, `ChangeColor` |
| `options` | `maybe_icecream` |
| `errors` | `generate_nametag_text`, `total_cost`, `purchase`, `PositiveNonzeroInteger`, `parse_pos_nonzero` |
| `hashmaps` | `new_fruit_basket`, `fill_fruit_basket`, `build_scores_table` |
| `structs` | `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`, `Order`, `create_order_template`, `Package` |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide`, `result_with_list`, `list_of_results`, `factorial`, the `count_*` functions |
| `smart_pointers` | `offset_sums`, `Cons`, `create_empty_list`, `create_non_empty_list`, `abs_all` |
| `traits` | `append_bar`, `Licensed`, `compare_license_types`, `some_func` |

```python
from rustdrill.drills.quiz import calculate_price_of_apples
from rustdrill.drills.iterators import divide, NotDivisibleError

calculate_price_of_apples(41)   # 41
divide(81, 9)                   # 9
divide(81, 6)                   # raises NotDivisibleError
```

Errors are raised as exceptions. For example, `parse_pos_nonzero("0")`
raises `ParsePosNonzeroError`, and that error's `source` is a
`CreationError` with kind `CreationErrorKind.ZERO`.

## What this package does not do

- It installs no command-line program.
- It cannot compile, run, test or verify exercise files.
- It does not read an exercise list such as `info.toml`.
- It does not check for the `I AM NOT DONE` marker or track progress.
- It has no watch mode, shows no hints and does not reset exercises.

What it provides is the terminal styling helpers, the `rust-project.json`
generator and the worked solutions described above.