import gzip
import logging

logger = logging.getLogger(__name__)


def load_symbols(path, size_limit=None):
    """Read a plain or gzipped file as bytes, up to `size_limit` bytes if given."""
    opener = gzip.open if str(path).endswith(".gz") else open
    try:
        with opener(path, "rb") as f:
            if size_limit is not None:
                return f.read(size_limit)
            return f.read()
    except OSError as e:
        logger.error(f"Failed to read symbols from {path}: {e}")
        raise
