# llrbtree

A left-leaning red-black tree mapping integer keys to string values. It comes
with an interactive menu-driven shell, a loader for plain text files, a timing
benchmark, a Graphviz DOT description of the tree and a PNG drawing of it.

## Installation

```
pip install .
```

Run the tests with `pip install .[test]` followed by `pytest`.

## Using the tree

```python
from llrbtree.tree import Tree

tree = Tree()
tree.insert(10, "ten")
tree.insert(5, "five")
tree.insert(20, "twenty")
tree.insert(10, "TEN")          # an existing key gets the new value

node = tree.search(10)           # Node or None
print(node.key, node.value)      # 10 TEN

bound = tree.lower_bound(15)     # exact match, or the greatest key below it
print(bound.key)                 # 10

tree.delete(5)                   # True if the key was there, False otherwise
print(len(tree))                 # 2
print([n.key for n in tree])     # [10, 20]
print(tree.format())             # tree drawing, one "key,R" or "key,B" per line
print(tree.format_inorder())     # keys largest first, as "key(R) " / "key(B) "
```

Iterating over a `Tree` yields its `Node` objects in ascending key order;
`Tree.inorder()` yields them from the largest key to the smallest. Each `Node`
has `key`, `value`, `color` (a `Color`, `RED` or `BLACK`), `left` and `right`.
The root is `tree.root`.

### Loading from a text file

A tree file holds key and value lines, alternating:

```
10
ten
5
five
```

`load_tree_from_text_file(path)` returns a new `Tree`. A key line that is not a
number raises `ParseError`; a key with no value line after it raises
`ReadError`; a file that cannot be opened raises `TreeLoadError`, from which
both others derive. An empty key line is read as key 0.

### Rendering

```python
from llrbtree.render import tree_to_dot, save_tree_png

print(tree_to_dot(tree))          # DOT text of an undirected graph named LLRB
save_tree_png(tree, "llrb.png")   # drawn with matplotlib
```

Red nodes and the edges leading to them are drawn in red, black ones in black.
`tree_to_dot` only returns text; laying it out is left to whatever DOT tool you
use.

### Timing

```python
import random
from llrbtree.timing import run_timing

run_timing(".", random.Random(1), sizes=[1000, 2000], repeats=3, batch=100)
```

Writes `insert_times.txt`, `search_times.txt` and `remove_times.txt` in the
given directory and returns their paths. Each file starts with a header line and
then holds one tab-separated line per tree size with the mean processor time, in
seconds, taken by a batch of operations. `time_insert`, `time_search` and
`time_remove` write a single measurement to an open text file, and
`generate_tree(n, rng)` builds a tree from `n + 1` random insertions.

With no arguments the full benchmark runs: sizes 10,000 to 235,000 in steps of
25,000, 100 repeats each, 1,000 operations per batch. That takes a long time.

### Reading numbers from a prompt

`llrbtree.prompt.read_uint(prompt, stdin, stdout)` writes the prompt and reads
lines until one holds a single unsigned number, reporting bad lines and asking
again. It raises `EndOfInput` when the input ends.

## The interactive shell

```
llrbtree
```

or `python -m llrbtree.cli`. The menu offers:

1. Insert element
2. Remove element
3. Search element
4. Find lower bound
5. Inorder traversal not in range (prints all keys, largest first)
6. Save tree visualization (PNG) to `llrb.png` in the current directory
7. Print tree
8. Load tree from txt file (replaces the current tree on success)
9. Timing tree (full benchmark, result files in the current directory)
10. Exit

The shell exits with status 0 at option 10 and with status 4 at end of input.
The same loop is available from code as `llrbtree.cli.Shell(stdin, stdout).run()`.