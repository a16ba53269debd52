# codewarrior

A collection of small, self-contained solutions to classic programming
exercises. Each lives in its own module and exposes one function. The
package is a library only; it has no command-line interface.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

| Module | Function | What it does |
| --- | --- | --- |
| `codewarrior.arraycombinations` | `solve(data)` | Number of combinations made by picking one distinct value from each inner list |
| `codewarrior.findwithinarray` | `find_in_array(array, predicate)` | Index of the first item where `predicate(item, index)` is true, or `-1` |
| `codewarrior.encryptthis` | `encrypt_this(text)` | Encodes each space-separated word: first letter as its character code, second and last letters swapped |
| `codewarrior.mixbonacci` | `mixbonacci(pattern, length)` | Interleaves terms of the `fib`, `pad`, `jac`, `pel`, `tri` and `tet` sequences (Fibonacci, Padovan, Jacobsthal, Pell, Tribonacci, Tetranacci) |
| `codewarrior.mostfrequentdays` | `most_frequent_days(year)` | The weekday(s) that occur most often in a year, Monday first and Sunday last |
| `codewarrior.multiplicationtable` | `multiplication_table(size)` | A `size` × `size` multiplication table as a list of rows |
| `codewarrior.orderedcount` | `ordered_count(text)` | Character counts in order of first appearance, as `CharCount(char, count)` named tuples |
| `codewarrior.uniq` | `uniq(items)` | Collapses runs of equal adjacent items, like the `uniq` tool |
| `codewarrior.vowelharmony` | `dative(word)` | Dative case of a Hungarian word by vowel harmony (`-nak` / `-nek`), decided by its last vowel |

## Examples

```python
from codewarrior.arraycombinations import solve
from codewarrior.encryptthis import encrypt_this
from codewarrior.mixbonacci import mixbonacci
from codewarrior.mostfrequentdays import most_frequent_days
from codewarrior.multiplicationtable import multiplication_table
from codewarrior.orderedcount import ordered_count
from codewarrior.uniq import uniq
from codewarrior.vowelharmony import dative

solve([[1, 2], [4, 4], [5, 6, 6]])      # 4
encrypt_this("A wise old owl")          # "65 119esi 111dl 111lw"
mixbonacci(["fib", "tet"], 10)          # [0, 0, 1, 0, 1, 0, 2, 1, 3, 1]
most_frequent_days(1984)                # ["Monday", "Sunday"]
multiplication_table(2)                 # [[1, 2], [2, 4]]
uniq(["a", "a", "b", "b", "c"])         # ["a", "b", "c"]
dative("tükör")                         # "tükörnek"

[(c.char, c.count) for c in ordered_count("abracadabra")]
# [("a", 5), ("b", 2), ("r", 2), ("c", 1), ("d", 1)]
```

## Errors

- `dative` raises `ValueError` for a word with no vowel to harmonise with.
- `mixbonacci` raises `ValueError` when the pattern names a sequence other
  than `fib`, `pad`, `jac`, `pel`, `tri` or `tet`. An empty pattern or a
  length of `0` gives an empty list.
- `multiplication_table` raises `ValueError` for a negative size; a size of
  `0` gives an empty list.