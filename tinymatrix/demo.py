"""
Sample program printing example matrices and operation results.

Usage:
    python -m tinymatrix.demo
    python -m tinymatrix.demo --decimals 4
"""

import argparse
import sys

from tinymatrix.matrix import Matrix


def run(decimals: int = 2, out=None) -> None:
    if out is None:
        out = sys.stdout

    def show(m: Matrix) -> None:
        out.write(m.render(decimals))

    m1 = Matrix.from_values(3, 3, [
        1.0, 2.0, 3.0,
        -2.0, -1.0, 10.0,
        5.0, 6.0, -1.5,
    ])
    m2 = Matrix.from_values(3, 3, [
        4.0, 1.0, 0.0,
        -2.0, -5.0, 1.0,
        -1.0, 3.2, 0.0,
    ])
    show(m1)
    show(m2)

    diagonal, above, below = m1.main_diagonal()
    out.write(f"{diagonal.tolist()}\n")
    out.write(f"{above.tolist()}\n")
    out.write(f"{below.tolist()}\n")

    upper = Matrix.from_values(3, 3, [
        1.0, 2.0, 3.0,
        0.0, -1.0, 10.0,
        0.0, 0.0, 0.0,
    ])
    out.write(f"{upper.is_upper_triangular()}\n")

    a = Matrix.from_values(2, 2, [1.0, 2.0, 4.0, 5.0])
    b = Matrix.from_values(2, 2, [5.0, 6.0, 8.0, 9.0])
    show(a + b)
    show(a - b)
    show(a * b)
    show(a.identity())
    show(a.concat_cols(b))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Print sample TinyMatrix matrices and operation results'
    )
    parser.add_argument(
        '--decimals', '-d',
        type=int,
        default=2,
        help='Decimal places per value (default: 2)'
    )
    args = parser.parse_args(argv)
    run(decimals=args.decimals)
    return 0


if __name__ == '__main__':
    sys.exit(main())
