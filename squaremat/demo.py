"""A walk through the SquareMat operations, printed as text."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from squaremat.matrix import SquareMat


def _filled(rows: Sequence[Sequence[float]]) -> SquareMat:
    """Build a matrix from nested rows of numbers."""
    result = SquareMat(len(rows))
    for i, values in enumerate(rows):
        for j, value in enumerate(values):
            result[i][j] = value
    return result


def _flag(value: bool) -> str:
    return "true" if value else "false"


def run_demo() -> str:
    """Run the demonstration and return everything it prints."""
    out: list[str] = []

    def say(*parts: object) -> None:
        out.append("".join(str(part) for part in parts))

    say("SquareMat Demo\n")
    say("======================\n\n")

    say("Creating a 3x3 matrix m1:\n")
    m1 = _filled([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    say(m1, "\n")

    say("Creating another 3x3 matrix m2:\n")
    m2 = _filled([[9, 8, 7], [6, 5, 4], [3, 2, 1]])
    say(m2, "\n")

    say("Matrix addition (m1 + m2):\n")
    say(m1 + m2, "\n")

    say("Matrix subtraction (m1 - m2):\n")
    say(m1 - m2, "\n")

    say("Matrix multiplication (m1 * m2):\n")
    say(m1 * m2, "\n")

    say("Element-wise multiplication (m1 % m2):\n")
    say(m1 % m2, "\n")

    say("Scalar multiplication (m1 * 2):\n")
    say(m1 * 2, "\n")

    say("Scalar division (m1 / 2):\n")
    say(m1 / 2, "\n")

    say("Transpose of m1 (~m1):\n")
    say(~m1, "\n")

    say(f"Determinant of m1 (!m1): {m1.determinant():g}\n\n")

    say("Creating an invertible matrix m3:\n")
    m3 = _filled([[1, 2, 3], [0, 1, 4], [5, 6, 0]])
    say(m3, "\n")

    say(f"Determinant of m3 (!m3): {m3.determinant():g}\n\n")

    say("m3 raised to power 2 (m3^2):\n")
    say(m3 ** 2, "\n")

    say("3x3 Identity matrix:\n")
    say(SquareMat.identity(3), "\n")

    say("Comparison of m1 and m2:\n\n")
    say("m1 == m2: ", _flag(m1 == m2), "\n")
    say("m1 != m2: ", _flag(m1 != m2), "\n")
    say("m1 < m2: ", _flag(m1 < m2), "\n")
    say("m1 > m2: ", _flag(m1 > m2), "\n")

    say("m1:\n\n")
    say(m1, "\n")

    say("Pre-increment (++m1):\n")
    m1.increment()
    say(m1, "\n")

    say("Post-increment (m1++):\n")
    say(m1.post_increment(), "\n")
    say("After post-increment, m1:\n")
    say(m1, "\n")

    say("Pre-decrement (--m1):\n")
    m1.decrement()
    say(m1, "\n")

    say("Post-decrement (m1--):\n")
    say(m1.post_decrement(), "\n")
    say("After post-decrement, m1:\n")
    say(m1, "\n")

    say("Compound assignment (m1 += m2):\n")
    m1 += m2
    say(m1, "\n")

    say("Compound assignment (m1 *= 2):\n")
    m1 *= 2
    say(m1, "\n")

    say("Compound assignment (m1 %= 3):\n")
    m1 %= 3
    say(m1, "\n")

    say("Compound assignment (m1 /= 2):\n")
    m1 /= 2
    say(m1, "\n")

    say("Modulo operation (m1 % 3):\n")
    say(m1 % 3, "\n")

    say(f"Accessing m1[0][1]: {m1[0][1]:g}\n\n")
    m1[0][1] = 42
    say("After setting m1[0][1] = 42:\n")
    say(m1, "\n")

    say("\nDemo completed successfully!\n")
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration to standard output."""
    parser = argparse.ArgumentParser(
        prog="squaremat-demo",
        description="Show the square matrix operations on a few examples.",
    )
    parser.parse_args(argv)
    sys.stdout.write(run_demo())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())