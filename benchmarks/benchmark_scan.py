"""Benchmark PEM scanning speed and allocation.

Scans generated certificate bundles of increasing size and reports
throughput plus the peak memory allocated during the scan. The peak
should stay well below the bundle size: the scanner allocates line
offsets and block descriptors, never block content.

Run with:
    uv run python benchmarks/benchmark_scan.py
"""

import gc
import os
import time
import tracemalloc
from dataclasses import dataclass

from pemblocks import encode_pem, scan_pem

DER_SIZE = 1200  # bytes, roughly an RSA-2048 certificate
ITERATIONS = 20


@dataclass
class ScanTiming:
    """Timing data for one bundle size."""

    block_count: int
    buffer_chars: int
    avg_time_us: float
    peak_alloc_bytes: int

    @property
    def mb_per_second(self) -> float:
        return self.buffer_chars / self.avg_time_us if self.avg_time_us else 0.0


def make_bundle(block_count: int) -> str:
    """Generate a bundle of certificate blocks with random payloads."""
    blocks = [encode_pem(os.urandom(DER_SIZE), "CERTIFICATE", newline="\n") for _ in range(block_count)]
    return "\n".join(blocks) + "\n"


def measure(block_count: int) -> ScanTiming:
    bundle = make_bundle(block_count)

    # Warm up
    scan_pem(bundle)

    start = time.perf_counter()
    for _ in range(ITERATIONS):
        scan_pem(bundle)
    elapsed = time.perf_counter() - start

    gc.collect()
    tracemalloc.start()
    scan_pem(bundle)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    return ScanTiming(
        block_count=block_count,
        buffer_chars=len(bundle),
        avg_time_us=elapsed / ITERATIONS * 1_000_000,
        peak_alloc_bytes=peak,
    )


def main() -> None:
    print(f"{'blocks':>8} {'chars':>10} {'avg µs':>10} {'MB/s':>8} {'peak alloc':>12}")
    print("-" * 52)
    for block_count in (1, 10, 100, 1000):
        t = measure(block_count)
        print(
            f"{t.block_count:>8} {t.buffer_chars:>10} {t.avg_time_us:>10.1f} "
            f"{t.mb_per_second:>8.1f} {t.peak_alloc_bytes:>12}"
        )


if __name__ == "__main__":
    main()
