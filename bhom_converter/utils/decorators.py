# bhom_converter/utils/decorators.py

import time
import functools
from typing import Callable, Any
from bhom_converter.utils.logger import Log


def measure_time(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start_time
            Log.performance(f"'{func.__name__}' took {elapsed:.4f} seconds")
    return wrapper


def log_lifecycle(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        # 메서드면 첫 인자(self)의 실제 클래스 이름, 함수면 __qualname__ 그대로
        owner = func.__qualname__.split(".")[-2:-1]
        is_method = bool(args) and owner not in ([], ["<locals>"])
        name = f"{type(args[0]).__name__}.{func.__name__}" if is_method else func.__qualname__

        Log.trace(f"Starting: {name}")
        result = func(*args, **kwargs)
        Log.trace(f"Finished: {name}")
        return result
    return wrapper
