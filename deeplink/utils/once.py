import threading
from typing import Any, Callable


def run_once(fn: Callable[..., Any]) -> Callable[..., bool]:
    """
    Wrap ``fn`` so that only the first invocation runs it.

    The wrapper returns True when it ran ``fn`` and False for every later call.
    Safe to call from several threads.
    """
    lock = threading.Lock()
    done = False

    def wrapper(*args: Any, **kwargs: Any) -> bool:
        nonlocal done
        with lock:
            if done:
                return False
            done = True
        fn(*args, **kwargs)
        return True

    return wrapper
