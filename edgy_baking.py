# edgy_baking.py
import sys
import time
import math
import argparse
from typing import List, Optional, Tuple

from ortools.linear_solver import pywraplp

# Number of levels the enumeration descends before adding the remaining prefix
MAX_DEPTH = 3

Item = Tuple[int, float]
Box = Tuple[int, int]


def make_items(boxes: List[Box]) -> Tuple[List[Item], int]:
    """
    Turn (width, height) boxes into sorted (cost, value) items.

    Args:
        boxes (List[Box]): Box dimensions as (width, height) pairs

    Returns:
        Tuple of (items sorted by cost then value, total uncut perimeter)
    """
    items = []
    have = 0
    for w, h in boxes:
        items.append((2 * min(w, h), 2 * math.hypot(w, h)))
        have += 2 * (w + h)
    items.sort()
    return items, have


def prefix_sums(items: List[Item]) -> List[float]:
    sums = [0.0] * (len(items) + 1)
    for i, (_, value) in enumerate(items):
        sums[i + 1] = sums[i] + value
    return sums


def check(lo: int, hi: float, p: int) -> float:
    if hi <= p:
        return hi
    if lo <= p < hi:
        return float(p)
    return -1.0


def rec(level: int, n: int, lo: int, hi: float,
        items: List[Item], sums: List[float], p: int) -> float:
    """
    Best capped perimeter reachable from this state.

    At the last level the values of all items in items[:n] are added to hi
    without their costs. Above it, every item i < n is tried as the next cut
    and the search continues on items[:i].
    """
    ans = check(lo, hi + (sums[n] if level == MAX_DEPTH else 0), p)
    if level < MAX_DEPTH:
        for i in range(n):
            cost, value = items[i]
            ans = max(ans, rec(level + 1, i, lo + cost, hi + value,
                               items, sums, p))
    return ans


def solve_case(p: int, boxes: List[Box]) -> float:
    items, have = make_items(boxes)
    sums = prefix_sums(items)
    return rec(0, len(items), have, have, items, sums, p)


def solve_exact(items: List[Item], have: int, p: int) -> Optional[float]:
    """
    Solve the case exactly as a MILP with OR-Tools.

    Each item is either left alone or cut; a cut adds between cost and value
    to the perimeter. Returns -1.0 if even the uncut total exceeds p, or None
    if no MILP backend is available.
    """
    solver = pywraplp.Solver.CreateSolver('SCIP')
    if not solver:
        print("Error: MILP solver not available. Please check your OR-Tools installation.",
              file=sys.stderr)
        return None

    cut = []
    extra = []
    for i, (cost, value) in enumerate(items):
        x = solver.IntVar(0, 1, f"cut_{i}")
        y = solver.NumVar(0, value - cost, f"extra_{i}")
        # Extra perimeter is only available on cut items
        solver.Add(y <= (value - cost) * x)
        cut.append(x)
        extra.append(y)

    total = have + solver.Sum([cost * x for (cost, _), x in zip(items, cut)]) \
        + solver.Sum(extra)
    solver.Add(total <= p)
    solver.Maximize(total)

    status = solver.Solve()
    if status == pywraplp.Solver.OPTIMAL or status == pywraplp.Solver.FEASIBLE:
        return solver.Objective().Value()
    return -1.0


def format_case(k: int, answer: float) -> str:
    return f"Case #{k}: {answer:.8f}"


def parse_input(input_data: str) -> List[Tuple[int, List[Box]]]:
    """
    Parse whitespace-separated contest input into (p, boxes) test cases.

    Raises:
        ValueError: If the input is empty, truncated or holds invalid numbers
    """
    tokens = input_data.split()
    if not tokens:
        raise ValueError("Input is empty.")

    pos = 0

    def next_int(name: str) -> int:
        nonlocal pos
        if pos >= len(tokens):
            raise ValueError(
                f"Unexpected end of input while reading {name} (token {pos + 1}).")
        token = tokens[pos]
        try:
            number = int(token)
        except ValueError:
            raise ValueError(
                f"Token {pos + 1} ('{token}') for {name} is not an integer.") from None
        pos += 1
        return number

    t = next_int("test case count T")
    if t < 0:
        raise ValueError(f"Test case count must be non-negative, got {t}.")

    cases = []
    for case_no in range(1, t + 1):
        n = next_int(f"N of case #{case_no}")
        p = next_int(f"P of case #{case_no}")
        if n < 0:
            raise ValueError(
                f"Case #{case_no}: item count must be non-negative, got {n}.")
        if p < 0:
            raise ValueError(
                f"Case #{case_no}: perimeter cap must be non-negative, got {p}.")

        boxes = []
        for i in range(1, n + 1):
            w = next_int(f"W of item {i} in case #{case_no}")
            h = next_int(f"H of item {i} in case #{case_no}")
            if w <= 0 or h <= 0:
                raise ValueError(
                    f"Case #{case_no}: item {i} has non-positive size {w}x{h}.")
            boxes.append((w, h))
        cases.append((p, boxes))

    if pos < len(tokens):
        print(f"Warning: Ignoring {len(tokens) - pos} trailing token(s) after the last test case.",
              file=sys.stderr)

    return cases


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Edgy Baking: maximum perimeter within the cap')
    parser.add_argument('--data', default=None,
                        help='Input data file (default: standard input)')
    parser.add_argument('--exact', action='store_true',
                        help='Cross-check every case against the OR-Tools MILP model')
    parser.add_argument('--quiet', action='store_true',
                        help='Do not print the timing report')
    args = parser.parse_args(argv)

    overall_start_time = time.perf_counter()

    input_read_start_time = time.perf_counter()
    try:
        if args.data is None:
            input_data = sys.stdin.read()
        else:
            with open(args.data, 'r') as file:
                input_data = file.read()
        cases = parse_input(input_data)
    except FileNotFoundError:
        print(f"Error: Input file '{args.data}' not found.", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    input_read_end_time = time.perf_counter()

    computation_start_time = time.perf_counter()
    answers = [solve_case(p, boxes) for p, boxes in cases]
    computation_end_time = time.perf_counter()

    if args.exact:
        mismatches = 0
        for k, ((p, boxes), answer) in enumerate(zip(cases, answers), start=1):
            items, have = make_items(boxes)
            exact = solve_exact(items, have, p)
            if exact is None:
                return 1
            diff = abs(exact - answer)
            print(f"Case #{k}: enumeration={answer:.8f} exact={exact:.8f} diff={diff:.2e}",
                  file=sys.stderr)
            # MILP feasibility tolerance is relative to the cap
            if diff > 1e-6 * max(1.0, abs(exact)):
                mismatches += 1
        print(f"Exact check: {mismatches} of {len(cases)} case(s) differ.",
              file=sys.stderr)

    output_write_start_time = time.perf_counter()
    for k, answer in enumerate(answers, start=1):
        print(format_case(k, answer))
    output_write_end_time = time.perf_counter()

    overall_end_time = time.perf_counter()

    if not args.quiet:
        print(f"\n--- Timing Report (seconds) ---", file=sys.stderr)
        print(
            f"Input Reading:   {input_read_end_time - input_read_start_time:.6f}", file=sys.stderr)
        print(
            f"Computation:     {computation_end_time - computation_start_time:.6f}", file=sys.stderr)
        print(
            f"Output Writing:  {output_write_end_time - output_write_start_time:.6f}", file=sys.stderr)
        print(
            f"Total Execution: {overall_end_time - overall_start_time:.6f}", file=sys.stderr)
        print(f"-----------------------------", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
