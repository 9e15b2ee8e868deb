import os
from pathlib import Path

import requests
from tqdm import tqdm
import logging

from tests.benchmark import print_benchmark_summary, run_full_benchmark
from utils.data_loader import load_symbols
from utils.utils import time_function

logger = logging.getLogger(__name__)

# Standard test collections (50MB versions)
DATASETS_50MB = {
    'dna': 'http://pizzachili.dcc.uchile.cl/texts/dna/dna.50MB.gz',        # DNA sequences
    'english': 'http://pizzachili.dcc.uchile.cl/texts/nlang/english.50MB.gz', # English text
    'proteins': 'http://pizzachili.dcc.uchile.cl/texts/protein/proteins.50MB.gz', # Protein sequences
    'sources': 'http://pizzachili.dcc.uchile.cl/texts/code/sources.50MB.gz',   # Source code
    'xml': 'http://pizzachili.dcc.uchile.cl/texts/xml/dblp.xml.50MB.gz'    # XML data
}
DATASET_DIR = Path("datasets")
SIZE_LIMIT = 5 * 1024 * 1024  # bytes indexed per dataset
CHUNK_SIZE = 1 << 16


def download_dataset(name, url):
    """Download a compressed dataset into DATASET_DIR and return its path"""
    DATASET_DIR.mkdir(parents=True, exist_ok=True)
    dataset_path = DATASET_DIR / f"{name}.gz"
    logger.info(f"Downloading {url}")

    with requests.get(url, stream=True, timeout=60) as response:
        response.raise_for_status()
        total = int(response.headers.get("content-length", 0))
        with open(dataset_path, "wb") as f, tqdm(total=total, unit="B", unit_scale=True, desc=name) as bar:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                f.write(chunk)
                bar.update(len(chunk))
    return dataset_path


def benchmark_dataset(dataset_path):
    """Run benchmark on a single dataset"""
    logger.info(f"Testing dataset: {dataset_path}")

    symbols, load_time = time_function(load_symbols)(dataset_path, SIZE_LIMIT)
    logger.info(f"Loaded {len(symbols)} bytes in {load_time:.4f} seconds")

    results = run_full_benchmark(symbols)

    print(f"\nResults for {dataset_path}:")
    print_benchmark_summary(results)
    return results


def main():
    """Run benchmarks on all datasets"""
    logging.basicConfig(level=logging.INFO)
    for name, url in DATASETS_50MB.items():
        print(f"\nTesting {name} dataset...")

        dataset_path = DATASET_DIR / f"{name}.gz"
        if not os.path.exists(dataset_path):
            dataset_path = download_dataset(name, url)

        benchmark_dataset(dataset_path)


if __name__ == "__main__":
    main()
