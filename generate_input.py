import random
import argparse
from pathlib import Path

MAX_CASES = 100
MAX_ITEMS = 100
MAX_SIDE = 250
MAX_PERIMETER = 10**8
OUTPUT_FILENAME = "data.txt"


def generate_cases(num_cases, max_items, rng):
    """
    Build random test cases within the contest bounds.

    The cap is drawn between the uncut perimeter and the perimeter with every
    box cut along its diagonal, which is where the answer is interesting.
    """
    cases = []
    for _ in range(num_cases):
        n = rng.randint(1, max_items)
        boxes = [(rng.randint(1, MAX_SIDE), rng.randint(1, MAX_SIDE))
                 for _ in range(n)]
        have = sum(2 * (w + h) for w, h in boxes)
        full = have + sum(int(2 * (w * w + h * h) ** 0.5) for w, h in boxes)
        p = rng.randint(have, min(full, MAX_PERIMETER))
        cases.append((p, boxes))
    return cases


def render_cases(cases):
    lines = [str(len(cases))]
    for p, boxes in cases:
        lines.append(f"{len(boxes)} {p}")
        lines.extend(f"{w} {h}" for w, h in boxes)
    return "\n".join(lines) + "\n"


def create_data_file(output_file_path, num_cases=MAX_CASES, max_items=MAX_ITEMS, seed=None):
    """
    Tworzy plik wejściowy z losowymi przypadkami testowymi.
    """
    rng = random.Random(seed)
    cases = generate_cases(num_cases, max_items, rng)

    print(
        f"Generowanie pliku '{output_file_path}' ({num_cases} przypadków, do {max_items} ciastek)...")

    try:
        with open(output_file_path, 'w', encoding='utf-8') as f:
            f.write(render_cases(cases))

        print(f"Pomyślnie wygenerowano plik '{output_file_path}'.")
        file_size = Path(output_file_path).stat().st_size
        print(f"Rozmiar pliku: {file_size} bajtów.")

    except IOError as e:
        print(f"Błąd podczas zapisu do pliku '{output_file_path}': {e}")
        return False

    return True


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Random input generator for the Edgy Baking solver')
    parser.add_argument('--cases', type=int, default=MAX_CASES,
                        help=f'Number of test cases (default: {MAX_CASES})')
    parser.add_argument('--items', type=int, default=MAX_ITEMS,
                        help=f'Maximum cookies per case (default: {MAX_ITEMS})')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed')
    parser.add_argument('--output', default=None,
                        help=f'Output file (default: {OUTPUT_FILENAME} next to this script)')
    args = parser.parse_args(argv)

    if not 1 <= args.cases <= MAX_CASES:
        print(f"Error: --cases must be between 1 and {MAX_CASES}.")
        return 1
    if not 1 <= args.items <= MAX_ITEMS:
        print(f"Error: --items must be between 1 and {MAX_ITEMS}.")
        return 1

    output = args.output or Path(__file__).resolve().parent / OUTPUT_FILENAME
    return 0 if create_data_file(output, args.cases, args.items, args.seed) else 1


if __name__ == "__main__":
    raise SystemExit(main())
