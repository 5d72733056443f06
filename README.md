# contestkit

Classic competitive programming problems solved as plain Python functions.
Each function takes ordinary Python values (integers, strings, lists, tuples)
and returns the answer as a value. Where a problem has no answer, the function
returns `None`. Where the input breaks the problem's limits, it raises
`ValueError`.

## Installation

```
pip install contestkit
```

The package has no dependencies outside the standard library and supports
Python 3.10 and later.

## Modules

- `contestkit.arithmetic`: closed-form answers such as `adjacent_digit_sums`,
  `cheap_travel`, `coin_transformation`, `kth_not_divisible`,
  `fizzbuzz_remixed`, `journey_day`, `odd_digit_divisors`, `kevin_points`,
  `best_gift_pairs` and `lantern_radius`. `lantern_radius` returns a float.
- `contestkit.text`: string problems such as `brogramming_moves`,
  `chewbacca_minimum`, `mirror_glass`, `fitting_words`, `longest_koyomity`,
  `robot_zero_visits` and `array_exists`.
- `contestkit.twopointers`: sliding windows and two-pointer scans:
  `tower_orders`, `diamond_display`, `count_subarrays_with_sum`,
  `three_values_sum`, `mathletes_score`, `bubble_sort_moo_count`,
  `min_repairs` and `best_reversal_segment`.
- `contestkit.arrays`: array, set and grid reasoning: `can_craft`,
  `game_of_division`, `can_get_three_sums`, `exam_results`,
  `max_problem_difference`, `subtract_min_sortable`, `best_lineup`,
  `strangers_steps`, `card_game_order` and `banker_life`.
- `contestkit.combinatorics`: modular counting and cycles:
  `beautiful_subsequences`, `project_value`, `project_range_sum`,
  `storage_keys`, `book_owners` and `triangle_area_sum`.
- `contestkit.prefixsums`: prefix sums, sweeps and greedy passes:
  `candies_sum`, `convoluted_intervals`, `barn_area`, `visible_mountains`,
  `lifeguard_coverage`, `rental_profit` and `split_field_savings`.
- `contestkit.structures`: problems built on sorting and tree structures:
  `correct_placement`, `isosceles_trapezoid`, `min_penalty` and
  `vocabulary_quiz`.

## Example

```python
from contestkit.arithmetic import cheap_travel, kth_not_divisible
from contestkit.twopointers import count_subarrays_with_sum, three_values_sum

cheap_travel(6, 2, 1, 2)                         # 6
kth_not_divisible(3, 7)                          # 10
count_subarrays_with_sum([2, 4, 1, 2, 7], 7)     # 3
three_values_sum([1, 2, 3], 100)                 # None
```

## What it does not do

contestkit is a library only. It has no command-line programs, and it does not
read problem input from standard input or from files, nor write answer files.
Parsing the input format of a given problem and printing the answer are left
to the caller.

## Running the tests

```
pip install contestkit[test]
pytest
```