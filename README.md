# estructuras

Classic data structures and algorithms in plain Python, with a few small
command-line tools built on them. There are no third-party dependencies.

## Contents

| Module | Contents |
| --- | --- |
| `estructuras.dlist` | `DoublyLinkedList`: `append`, `prepend`, `insert_sorted`, `remove`, `pop_first`, `pop_last`, `find`, `clear`, forward and reverse iteration |
| `estructuras.linked_list` | `SinglyLinkedList`: `append`, `prepend`, `pop_last`, `count_less_than`, `clear` |
| `estructuras.stack_queue` | `Stack` (`push`, `pop`, `peek`, `is_empty`) and `Queue` (`enqueue`, `dequeue`, `peek`, `is_empty`) |
| `estructuras.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `binary_search`, `random_array` |
| `estructuras.bst` | `BinarySearchTree` with `in_order`, `pre_order`, `post_order` and `breadth_first` |
| `estructuras.avl` | `AVLTree`, self-balancing, with the same traversals plus `height` and `by_height` |
| `estructuras.hashtable` | `HashTable`: separate chaining over doubly linked lists, with a caller-supplied hash function |
| `estructuras.monsters` | `Monster`, `monster_hash`, `count_entries`, `MonsterCatalog`, `CatalogError` |
| `estructuras.colors` | `Color`, `color_hash`, `ColorCatalog`, `ColorCatalogError` |
| `estructuras.exam_loader` | `load_list` and `summarize` for the numbered-block input format |
| `estructuras.menus` | `run_stack_menu`, `run_tree_menu`, `run_avl_menu` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Behaviour worth knowing

- Empty containers raise instead of returning a flag: `pop_first`,
  `pop_last`, `Stack.pop`, `Stack.peek`, `Queue.dequeue` and `Queue.peek`
  raise `IndexError`. `DoublyLinkedList.remove` and `HashTable.remove`
  raise `ValueError` for a missing item; the trees' `remove` raises
  `KeyError`.
- Search trees reject duplicates: `insert` returns `False` when an equal
  value is already present.
- The sort functions accept any iterable and return a new sorted list.
  `binary_search` returns an index of the target in an ascending
  sequence, or `None`.
- `AVLTree.height()` is `-1` for an empty tree and `0` for a single node.
  `by_height()` yields `(value, height, depth)` tuples, right subtree
  first, in the order of a sideways drawing of the tree.

## Examples

```python
from estructuras.dlist import DoublyLinkedList
from estructuras.stack_queue import Stack, Queue
from estructuras.avl import AVLTree
from estructuras.sorting import quick_sort, binary_search

numbers = DoublyLinkedList([1, 4, 5])
numbers.insert_sorted(3)
print(list(numbers), list(reversed(numbers)))   # [1, 3, 4, 5] [5, 4, 3, 1]

stack = Stack([1, 2])
stack.push(3)
print(stack.peek())                             # 3

queue = Queue([5, 2, 3])
print(queue.dequeue())                          # 5

tree = AVLTree([1, 2, 3, 4, 5, 6, 7])
print(tree.height(), tree.breadth_first())      # 2 [4, 2, 6, 1, 3, 5, 7]

values = quick_sort([9, 1, 7, 3])
print(values, binary_search(values, 7))         # [1, 3, 7, 9] 2
```

A `HashTable` takes a number of buckets and a function
`hash_function(item, table_size)`; its result is reduced modulo the number
of buckets:

```python
from estructuras.hashtable import HashTable
from estructuras.monsters import Monster, monster_hash

table = HashTable(100, monster_hash)
table.insert(Monster(name="cat", cr=0.0, hp=2))
print(table.find(Monster(name="cat")).hp)   # 2
print(table.report())                       # "bucket[i]: n" lines, then "Longest was: n"
```

`Monster` compares and hashes by name only; `Color` compares by its
`r`, `g`, `b` components only.

## Command-line tools

```
estructuras-monsters [PATH] [NAME]
```

Loads a monster CSV (default `monsters.csv`) whose first line is a header
and whose lines read `name,cr,type,size,ac,hp,align`, prints the bucket
report of the hash table, then looks up `NAME` (default `cat`). An empty
or malformed cell stops loading with an error message.

```
estructuras-colors [PATH]
```

Loads a headerless color CSV (default `colors.csv`) of
`id,name,hex,r,g,b` lines, where the components must be plain digits, and
looks up the colors (153, 102, 102) and (0x48, 0x3D, 0x8B).

```
estructuras-exam [PATH]
```

Reads a numbered-block file (default `datos_in.txt`): each block is a
number `n` followed by `3 * n` values put at the front of a singly linked
list, then a number `m` followed by `m` values put at the end; when `m` is
7 the last item is removed first. Afterwards the last ten items are
dropped and, for each threshold 0 to 9, the number of remaining values
below it is printed. A malformed number ends the run with exit status 1.

```
estructuras-menus [stack|tree|avl]
```

Starts an interactive menu on standard input (default `avl`). The stack
menu exits with option 6, the tree menus with option 0; end of input also
ends a menu.

## What it does not do

All structures live in memory only; nothing is saved between runs. The
catalogs are loaded from CSV files and cannot be edited or written back.
There is no graph structure in the package.