# squaremat

A small pure-Python library of square matrices of floats. It supports element
access with bounds checking, arithmetic with matrices and scalars,
non-negative integer powers, transpose, determinant, and comparisons based on
the sum of all elements. It has no dependencies outside the standard library.

## Installation

```
pip install squaremat
```

## Usage

```python
from squaremat.matrix import SquareMat

m = SquareMat(2)          # 2x2 matrix of zeros
m[0][0] = 1; m[0][1] = 2
m[1][0] = 3; m[1][1] = 4

n = SquareMat.identity(2)

print(m + n)              # element-wise sum
print(m - n)              # element-wise difference
print(-m)                 # every element negated
print(m * n)              # matrix product
print(m * 2, 2 * m)       # scalar product
print(m % n)              # element-wise product
print(m % 3)              # element-wise modulo by an integer, never negative
print(m / 2)              # scalar division
print(m ** 2)             # non-negative integer power; m ** 0 is the identity
print(~m)                 # transpose (same as m.transpose())
print(m.determinant())    # -2.0
```

`m.size` is the number of rows (and columns), `m.copy()` returns an
independent copy, and `m.total()` returns the sum of all elements.

Indexing goes row first: `m[i]` gives a bounds-checked view of row `i`, and
`m[i][j]` reads or sets one element. Values set this way are stored as floats.

Printing a matrix writes one line per row, for example:

```
|  1 2  |
|  3 4  |
```

### In-place operations

The in-place forms `+=`, `-=`, `*=` (matrix or scalar), `%=` (matrix or
integer) and `/=` modify the matrix itself.

`increment()` and `decrement()` add or subtract 1 from every element and
return the matrix itself; `post_increment()` and `post_decrement()` do the same
but return a copy of the matrix as it was before.

### Comparisons

`==`, `!=`, `<`, `>`, `<=` and `>=` compare the sums of all elements (the value
of `total()`), so matrices with different contents, or even of different
sizes, can compare equal. Matrices are not hashable.

### Errors

- A size of zero or less raises `ValueError`.
- A row or column index out of range raises `IndexError`.
- Combining matrices of different sizes raises `ValueError`.
- Modulo by zero or a negative number, division by zero, and a negative
  power raise `ValueError`.
- Modulo by a non-integer and a non-integer power raise `TypeError`.

## Demo

A walk-through of the operations on a few 3x3 examples can be printed with:

```
squaremat-demo
```

The same text is returned as a string by `squaremat.demo.run_demo()`.

## Limits

The library has no matrix inverse, so negative powers are not supported. The
determinant is computed by cofactor expansion, which becomes slow for large
matrices. There is no reading or writing of matrices from files.