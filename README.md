# puzzlekit

A library of small puzzle solvers. Each solver is a function or a small class that takes ordinary Python values (strings, numbers, lists of rows) and returns strings, numbers, tuples or lists of output lines. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `puzzlekit.drawing` | `drunken_bishop`, `bookcase`, `picture_frame`, `turn_sign`, `atari_text` |
| `puzzlekit.counting` | `bust_probability`, `coins_needed`, `crazy_list_next`, `duo_combinations`, `rabbit_population`, `partitions` |
| `puzzlekit.conversions` | `convert_speed`, `speed_query`, `beer_height`, `halve_number_text`, `nato_update` |
| `puzzlekit.scoreboard` | `Scoreboard`, `final_score` |
| `puzzlekit.boards` | `queen_control`, `word_search`, `describe_path` |
| `puzzlekit.games` | `rps_best_start`, `wordle_colors`, `pair_possible`, `find_father` |
| `puzzlekit.names` | `couple_names`, `format_couple` |
| `puzzlekit.simulations` | `Helpdesk`, `helpdesk_summary`, `bathtub_fill_time` |
| `puzzlekit.tiles` | `tile_floor`, `tile_floor_differently` |
| `puzzlekit.vectors` | `Point`, `extreme_vectors` |
| `puzzlekit.graphs` | `remaining_apples`, `blunder_max_money`, `astar_trace` |
| `puzzlekit.hexmaze` | `HexMaze`, `solve_hex_maze` |
| `puzzlekit.sequences` | `roller_coaster_earnings`, `max_calculations`, `greatest_number`, `hungry_duck`, `longest_train`, `count_inversions`, `skyline_lines`, `recurring_decimal` |
| `puzzlekit.knight` | `Axis`, `find_bomb` |
| `puzzlekit.filetree` | `tree_listing` |
| `puzzlekit.logo` | `Logo`, `draw` |
| `puzzlekit.brackets` | `is_valid`, `minimal_flips`, `solve_brackets`, `longest_balanced_run` |
| `puzzlekit.arithmetic` | `convert_fraction`, `truncated_pyramid`, `xor_decrypt`, `guess_digits`, `missing_plus_signs` |
| `puzzlekit.wordplay` | `fix_spaces`, `frog_exchange` |
| `puzzlekit.search` | `longest_frog_path`, `minimax`, `maze_directions` |
| `puzzlekit.shikaku` | `ShikakuSolver`, `solve_shikaku` |
| `puzzlekit.packing` | `blocks_possible` |
| `puzzlekit.ternary` | `to_decimal`, `to_ternary`, `evaluate` |
| `puzzlekit.keyboard` | `are_similar`, `fix_sticky_text` |

Solvers that draw something (`drunken_bishop`, `bookcase`, `tile_floor`, `truncated_pyramid`, `tree_listing`, `draw`, `solve_shikaku` and the like) return a list of lines without line breaks.

## Examples

```python
from puzzlekit.arithmetic import convert_fraction
from puzzlekit.counting import partitions
from puzzlekit.drawing import bookcase
from puzzlekit.games import wordle_colors
from puzzlekit.sequences import recurring_decimal
from puzzlekit.ternary import evaluate, to_decimal

to_decimal("1T")              # 2
evaluate("1T", "+", "1")      # "10"
recurring_decimal(7)          # "0.(142857)"
convert_fraction("[1; 2]")    # "3/2"
wordle_colors("CRANE", "REACT")  # "OO#OX"
list(partitions(4))           # [(4,), (3, 1), (2, 2), (2, 1, 1), (1, 1, 1, 1)]

print("\n".join(bookcase(5, 6, 2)))
# ///\\\
# |    |
# |____|
# |    |
# |____|
```

Puzzles that are played as a dialogue take the other side as a callable. `find_bomb(width, height, start_x, start_y, oracle)` calls `oracle(x, y)` after every jump and expects `"WARMER"`, `"COLDER"` or `"SAME"` back. It returns the bomb's `(x, y)`.

## Errors and sentinel answers

A solver raises `ValueError` when its input is malformed or it cannot find an answer. When the puzzle itself defines an answer for that case, the solver returns that answer instead. Examples are `"IMPOSSIBLE"` from `guess_digits`, `-1` from `coins_needed` and `solve_brackets`, `"Unsolvable"` from `fix_spaces`, `["No solution"]` from `missing_plus_signs` and `"Impossible, <h> cm."` from `bathtub_fill_time`.

## What it does not do

The package is a library only. It installs no command-line program and reads nothing from standard input or files. To use a solver on puzzle input, parse the input in your own code and call the function.