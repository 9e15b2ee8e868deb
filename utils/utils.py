import time

import numpy as np

ALPHABET_SIZE = 256


def time_function(func):
    """
    Decorator to measure the execution time of a function
    """
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        end_time = time.time()
        execution_time = end_time - start_time
        return result, execution_time
    return wrapper


def to_symbols(values):
    """Convert bytes, a latin-1 string or an iterable of ints into a uint8 array."""
    if isinstance(values, str):
        values = values.encode("latin-1")
    if isinstance(values, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(values), dtype=np.uint8).copy()

    symbols = np.asarray(list(values))
    if not symbols.size:
        return symbols.astype(np.uint8)
    if symbols.dtype.kind not in "iub":
        raise ValueError(f"symbols must be integers, got {symbols.dtype}")
    symbols = symbols.astype(np.int64)
    if symbols.min() < 0 or symbols.max() >= ALPHABET_SIZE:
        raise ValueError(f"symbols must be in [0, {ALPHABET_SIZE})")
    return symbols.astype(np.uint8)


def build_offsets(symbols):
    """
    First position of every symbol in `symbols`.
    Symbols that never occur get len(symbols).
    """
    offsets = np.full(ALPHABET_SIZE, len(symbols), dtype=np.int64)
    values, first = np.unique(symbols, return_index=True)
    offsets[values] = first
    return offsets
