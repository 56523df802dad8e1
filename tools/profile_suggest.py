# tools/profile_suggest.py
"""
Small profiling harness for Autocorrector.suggest.
Usage:
  python tools/profile_suggest.py --data data/sample_corpus.txt --led 2 --iters 1000 --fragment "the quik"

Prints mean/median/stdev/min/max latency in ms and a sample of suggestions.
"""
import argparse
import statistics
import sys
import time

from autocorrector import Autocorrector, AutocorrectError

# fragments used when --fragment is not given
SAMPLE_QUERIES = [
    "the",
    "the qu",
    "thequick",
    "quik",
    "brwn fox",
    "over the ",
    "lazy d",
]


def benchmark(ac, queries, iterations):
    """Run each query `iterations` times; return per-call latencies in ms."""
    times = []
    for _ in range(iterations):
        for q in queries:
            t0 = time.perf_counter()
            ac.suggest(q)
            times.append((time.perf_counter() - t0) * 1000.0)
    return times


def summarize(times):
    return {
        "mean": statistics.mean(times),
        "median": statistics.median(times),
        "stdev": statistics.pstdev(times),
        "min": min(times),
        "max": max(times),
    }


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--data", default="data/sample_corpus.txt", help="comma separated corpus files")
    parser.add_argument("--prefix", action="store_true")
    parser.add_argument("--whitespace", action="store_true")
    parser.add_argument("--led", type=int, default=2)
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--fragment", type=str, default=None, help="single input fragment")
    args = parser.parse_args(argv)

    try:
        t0 = time.perf_counter()
        ac = Autocorrector.from_paths(
            [p for p in args.data.split(",") if p],
            prefix=args.prefix,
            whitespace=args.whitespace,
            led=args.led,
        )
        print("Built index in %.1f ms: %s" % ((time.perf_counter() - t0) * 1000.0, ac.stats()))
    except AutocorrectError as e:
        print(f"ERROR: {e}")
        return 1

    queries = [args.fragment] if args.fragment is not None else SAMPLE_QUERIES
    print("Warming up...")
    benchmark(ac, queries, args.warm)
    print("Measuring...")
    s = summarize(benchmark(ac, queries, args.iters))
    print("Stats (ms): mean=%.3f median=%.3f stdev=%.3f min=%.3f max=%.3f" % (
        s["mean"], s["median"], s["stdev"], s["min"], s["max"],
    ))
    for q in queries:
        print(f"{q!r:>14} -> {ac.suggest(q)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
