"""
Helper functions for draining cursors and measuring how lazy pipelines
behave in time and memory.
"""

import gc
import logging
import time
import tracemalloc
from typing import Any, Callable, Dict, List, Tuple

from .cursor import Cursor, to_cursor
from .lazy import LazyCollection

logger = logging.getLogger(__name__)


# Global performance tracking
_performance_metrics = {
    "operations": [],
    "total_time_ms": 0.0,
    "total_memory_mb": 0.0,
    "operation_count": 0
}


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging for scripts using the package"""
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def drain(source: Any) -> List[Tuple[Any, Any]]:
    """Traverse any source from the start and collect (key, value) pairs"""
    return list(to_cursor(source).items())


def is_lazy(obj: Any) -> bool:
    """True when the object defers work until iterated (a cursor or a lazy collection)"""
    return isinstance(obj, (Cursor, LazyCollection))


def _record(info: Dict[str, Any]) -> None:
    _performance_metrics["operations"].append(info)
    _performance_metrics["total_time_ms"] += info["execution_time_ms"]
    _performance_metrics["total_memory_mb"] += info["memory_usage_mb"]
    _performance_metrics["operation_count"] += 1


def measure_performance(operation_name: str, func: Callable, *args, **kwargs) -> Dict[str, Any]:
    """Measure time and peak memory of a function call; the call's result is in ``result``"""
    tracemalloc.start()
    gc.collect()
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()

        performance_info = {
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak / 1024 / 1024,
            "success": True,
            "result": result,
            "result_size": len(result) if hasattr(result, "__len__") else None,
            "timestamp": time.time()
        }
        _record(performance_info)
        logger.debug(f"{operation_name} took {execution_time_ms:.2f}ms")
        return performance_info

    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()
        _record({
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak / 1024 / 1024,
            "success": False,
            "error": str(e),
            "timestamp": time.time()
        })
        logger.error(f"{operation_name} failed after {execution_time_ms:.2f}ms: {e}")
        raise

    finally:
        tracemalloc.stop()


def get_performance_summary() -> Dict[str, Any]:
    """Get summary of all performance metrics"""
    count = _performance_metrics["operation_count"]
    if count == 0:
        return {
            "total_operations": 0,
            "total_time_ms": 0.0,
            "total_memory_mb": 0.0,
            "avg_time_ms": 0.0,
            "avg_memory_mb": 0.0
        }

    return {
        "total_operations": count,
        "total_time_ms": _performance_metrics["total_time_ms"],
        "total_memory_mb": _performance_metrics["total_memory_mb"],
        "avg_time_ms": _performance_metrics["total_time_ms"] / count,
        "avg_memory_mb": _performance_metrics["total_memory_mb"] / count
    }


def clear_performance_metrics():
    """Clear all performance metrics"""
    global _performance_metrics
    _performance_metrics = {
        "operations": [],
        "total_time_ms": 0.0,
        "total_memory_mb": 0.0,
        "operation_count": 0
    }
