"""Benchmark decode/encode throughput on synthetic clip strings.

Outputs one table row per conversion path:
  Path | Payloads | Elapsed | Throughput | Symbols/sec
"""

import argparse
import random
import time

import clipstring as cs


def format_bytes(num_bytes: int) -> str:
    """Format bytes into human-readable units."""
    size = float(num_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} TB"


def make_payloads(count: int, length: int, seed: int) -> list[str]:
    """Build deterministic random clip strings of fixed length."""
    rng = random.Random(seed)
    return ["".join(rng.choices(cs.ALPHABET, k=length)) for _ in range(count)]


def measure(name: str, fn, n_payloads: int, n_symbols: int) -> float:
    """Run one benchmark case and print its table row."""
    start = time.perf_counter()
    _ = fn()
    # coarse clocks can report zero for tiny runs
    elapsed = max(time.perf_counter() - start, 1e-9)
    rate = n_symbols / elapsed
    print(
        f"| {name:22} | {n_payloads:10,} | {f'{elapsed:.3f}s':10} "
        f"| {f'{format_bytes(int(n_symbols / elapsed))}/sec':16} | {rate:>14,.0f} |"
    )
    return elapsed


def main() -> None:
    """Run decode/encode benchmarks on synthetic payloads."""
    parser = argparse.ArgumentParser(
        description="Benchmark clipstring decode() and encode()."
    )
    parser.add_argument(
        "--payloads",
        type=int,
        default=2_000,
        help="Number of clip strings to convert (default: 2,000).",
    )
    parser.add_argument(
        "--length",
        type=int,
        default=1_024,
        help="Symbols per clip string (default: 1,024).",
    )
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    payloads = make_payloads(args.payloads, args.length, args.seed)
    n_symbols = args.payloads * args.length
    bit_strings = [cs.decode(p) for p in payloads]

    print()
    print(
        f"| {'Path':22} | {'Payloads':10} | {'Elapsed':10} "
        f"| {'Throughput':16} | {'Symbols/sec':14} |"
    )
    print(f"| {'-' * 22} | {'-' * 10} | {'-' * 10} | {'-' * 16} | {'-' * 14} |")

    measure(
        "decode",
        lambda: [cs.decode(p) for p in payloads],
        args.payloads,
        n_symbols,
    )
    measure(
        "encode",
        lambda: [cs.encode(b) for b in bit_strings],
        args.payloads,
        n_symbols,
    )
    print()


if __name__ == "__main__":
    main()
