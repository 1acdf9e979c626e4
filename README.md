# porotree

A small data-structures library built around the *poro*. A poro is a value
with an integer position, a volume and an optional colour. The library has
three modules:

- `porotree.poro` has `Poro`, the value type. It has the attributes `x`, `y`,
  `volume` and `color`, and the methods `move_to(x, y)` and `is_empty()`.
  Colours are stored in lower case. A poro with position `(0, 0)`, volume `0`
  and no colour is *empty*. Poros are mutable, so they are not hashable.
- `porotree.vector` has `PoroVector`, a fixed-size vector of poros whose
  indexes start at 1.
- `porotree.tree` has `PoroTree`, a binary search tree of poros ordered by
  volume.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from porotree.poro import Poro
from porotree.tree import PoroTree

tree = PoroTree()
for volume in (100, 50, 20, 110):
    tree.insert(Poro(1, 2, volume, "Rojo"))

print(tree.height())      # 3
print(tree.node_count())  # 4
print(tree.leaf_count())  # 2
print(tree.root())        # (1, 2) 100.00 rojo

tree.remove(Poro(1, 2, 20, "rojo"))
print(tree.inorder())     # the poros in ascending volume, as a PoroVector
print(tree)               # the poros in level order
```

A non-empty poro prints as `(x, y) volume colour`. The volume has two
decimals, and `-` stands in for a missing colour. An empty poro prints as
`()`.

### PoroTree

- A poro with a smaller volume goes to the left. Any other poro goes to the
  right.
- `insert(poro)` stores a copy of the poro. It returns `False` if an equal
  poro is already in the tree.
- `remove(poro)` returns `False` if the poro was not found. When it removes a
  node with two children, the largest poro of the left subtree takes its
  place.
- `poro in tree` tests whether the poro is in the tree.
- `root()` returns a copy of the root poro. For an empty tree it returns an
  empty poro.
- `height()`, `node_count()` and `leaf_count()` describe the shape of the
  tree. `is_empty()` tells whether the tree has no poros.
- `inorder()`, `preorder()`, `postorder()` and `levels()` each return a
  `PoroVector` holding the poros in that order.
- `a + b` returns a copy of `a` with every non-empty poro of `b` inserted.
- `a - b` returns a copy of `a` with every non-empty poro of `b` removed.
- Two trees are equal when their in-order traversals are equal.
- `copy()` returns an independent deep copy.
- `str(tree)` is the string of `tree.levels()`.

### PoroVector

- `PoroVector(size)` holds `size` empty poros. A size below 1 gives an empty
  vector.
- `PoroVector.from_poros(iterable)` builds a vector from copies of the given
  poros.
- Indexes run from 1 to `len(vector)`. Reading outside that range returns an
  empty poro. Writing outside it raises `IndexError`. Assigning a poro stores
  a copy of it.
- `count()` returns how many of the stored poros are not empty.
- `resize(size)` keeps the existing poros and pads the vector with empty
  ones. It returns `False` and changes nothing if `size` is not positive or
  is equal to the current length.
- Iterating a vector yields its poros in order.
- `str(vector)` looks like `[1 (1, 2) 50.00 rojo 2 ()]`. An empty vector
  prints as `[]`.

## Demo

The package comes with a small demonstration command:

```
porotree-demo
```

It builds a tree by inserting poros of volume 100, 50, 20 and 110, then
removes the poro of volume 20. At the start and after each step it prints
the height (`Altura`), node count (`Nodos`), leaf count (`NodosHoja`) and
root (`Raiz`). It takes no options other than `--help`. You can also run it
as `python -m porotree.demo`.

## Limits

Everything is held in memory. The package cannot save trees or vectors to
disk or load them back. The only command is the demonstration above.