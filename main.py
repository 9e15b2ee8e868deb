# main.py
import logging
import sys

from succinct.wavelet_matrix import WaveletMatrix
from utils.data_loader import load_symbols
from tests.benchmark import print_benchmark_summary, run_full_benchmark

SAMPLE_TEXT = "ATCTATGGGAGGAAGAGAAAGTGGAATCTCTGTATCATCTTTCTTAGTCC"
SIZE_LIMIT = 1_000_000  # bytes read from an input file
TOP_K = 4


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if len(sys.argv) > 1:
        symbols = load_symbols(sys.argv[1], SIZE_LIMIT)
    else:
        symbols = SAMPLE_TEXT.encode("latin-1")

    wm = WaveletMatrix(symbols)
    print(f"Length: {len(wm)}")

    top = wm.topk(0, len(wm), TOP_K)
    for symbol, count in top:
        first = wm.select(symbol, 0)
        print(f"{chr(symbol)!r}: count={count} first={first} rank@half={wm.rank(symbol, len(wm) // 2)}")

    if len(wm):
        print(f"Median symbol: {chr(wm.quantile(0, len(wm), len(wm) // 2))!r}")

    results = run_full_benchmark(symbols)
    print_benchmark_summary(results)


if __name__ == "__main__":
    main()
