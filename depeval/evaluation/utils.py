import logging
import time
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def measure(label: str):
    """
    Замер времени блока. Длительность пишется в лог после завершения блока,
    исключения пробрасываются без изменений.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        logger.info(f"{label}: {duration:.2f} sec")
