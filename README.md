# algolab

A collection of classic algorithms, data structures and small console
programs, written to be read, run and experimented with. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

Library modules:

- `algolab.graph` – adjacency-list graphs (`Graph`, `GraphType`, `Edge`),
  with `read_graph` / `write_graph` for a plain text format. Duplicate
  edges are ignored with a `RuntimeWarning`; malformed headers raise
  `GraphFormatError`.
- `algolab.bfs` – breadth-first search (`bfs`) with distances and
  predecessors, and `format_bfs` for a table of shortest paths.
- `algolab.dfs` – depth-first search (`dfs`) with discovery and finish
  times, and `format_dfs`.
- `algolab.hashtable` – a chained `HashTable` keyed by strings, with
  `insert`, `get`, `delete`, `clear`, `len()` and `in`.
- `algolab.bst` – an unbalanced binary search tree (`BST`); equal keys go
  to the left subtree. Iterating yields the keys in order.
- `algolab.change` – greedy change-making (`greedy_change`) with a finite
  set of coins, each usable once; returns `None` when the amount cannot be
  paid.
- `algolab.quicksort` – in-place quicksort with Lomuto partitioning.
- `algolab.list_sort` – bubble sort repeated until the sequence is sorted.
- `algolab.eggs` – Fibonacci's eggs puzzle (`fibonacci_eggs`).
- `algolab.koch` – a `Turtle` that writes PostScript, with `koch` curves
  and `fractal_tree`.
- `algolab.fuel` – `miles_per_gallon` and `liters_per_100km`.

Console programs: an address book, a reading-list manager, a minesweeper
game, a "decryption" text effect, a fuel-consumption converter, a
guess-the-continent game and a number-guessing game. Their prompts and
messages are in Italian.

## Graph files

Graph files start with a header `n m t` – the number of nodes, the number
of edges and the type (`0` undirected, `1` directed) – followed by one
`src dst weight` line per edge. Nodes are numbered from `0`.

```
4 3 1
0 1 1.0
1 2 1.0
2 3 1.0
```

## Commands

Where a command reads a file, `-` stands for standard input.

```
algolab-bfs 0 graph.txt        # distances and paths from node 0
algolab-dfs graph.txt          # predecessors, discovery and finish times
algolab-count-words text.txt   # lists words, then total and distinct count
algolab-change coins.txt       # greedy change for "R n" followed by n coins
algolab-quicksort              # sorts sample arrays and checks the result
algolab-list-sort [seed]       # bubble-sorts ten random values in 1..100
algolab-eggs                   # smallest answer to Fibonacci's eggs puzzle
algolab-koch [directory]       # writes koch-curve.ps, koch-snowflake.ps, fractal-tree.ps
```

Interactive programs:

```
algolab-address-book           # add contacts, exact and partial search
algolab-books [file]           # reading list kept in a file (default libri.txt)
algolab-minesweeper [seed]     # w/a/s/d to move, Enter to reveal, f to flag, q to quit
algolab-decrypt [text ...]     # the text, or a line read from input, "decrypted"
algolab-fuel                   # asks for miles and gallons
algolab-continent [seed]       # guess which region a point belongs to
algolab-guess-number [--limit] # the computer guesses your number
```

`algolab-books` works on an existing file: it stores eight lines per book
(code, title, author, year, publisher, pages, genre, rating) and does
nothing if the file is missing. With `--limit`, `algolab-guess-number`
also asks for a maximum number of attempts.

## Using the library

```python
import io

from algolab.graph import read_graph
from algolab.bfs import bfs, format_bfs

text = "4 3 1\n0 1 1.0\n1 2 1.0\n2 3 1.0\n"
graph = read_graph(io.StringIO(text))
result = bfs(graph, 0)
print(format_bfs(graph, 0, result))
```

```python
from algolab.hashtable import HashTable

table = HashTable(16)
table.insert("apple", 1)
print("apple" in table, len(table))
```

```python
from algolab.bst import BST

tree = BST()
for key in (5, 3, 8, 1):
    tree.insert(key)
print(list(tree), tree.height())
```

## What is not included

There is no board race game here (dice, ladders, slides and quiz
questions); the games are the ones listed above. The console programs
read plain lines from standard input rather than single key presses, and
keep no state between runs apart from the reading-list file.