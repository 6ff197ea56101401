#!/usr/bin/env python3
import logging
import sys

from polynomial_parser import parse_polynomial
from solver import real_roots, DEFAULT_STEP

def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = sys.argv[1:] if argv is None else argv
    p = parse_polynomial(args[0] if args else "x^2 - 5x + 6")
    dx = float(args[1]) if len(args) > 1 else DEFAULT_STEP
    print(f"p(x)   = {p}")
    print(f"p'(x)  = {p.derivative()}")
    print(f"∫p(x)  = {p.integral(0.0)}")
    print(f"roots (dx = {dx}): {real_roots(p, dx)}")

if __name__ == "__main__":
    main()
