import sys
import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """terminal color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """raised by assert_that, so failed checks read differently from crashes."""
    pass


# --- public api ---

def test(description: str) -> Callable:
    """decorator registering a function as a test case; the function stays callable by pytest."""

    def decorator(func: Callable) -> Callable:
        _registry['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(expected: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """calls func and checks it raises `expected`; returns the caught exception for further checks."""
    try:
        func(*args, **kwargs)
    except expected as e:
        return e
    raise SuiteAssertionError(f"expected {expected.__name__} to be raised")


def run(title: str = "test run", verbose_errors: bool = False) -> int:
    """runs every registered test, prints a report and returns the number of failures."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _registry['results'] = []

    for entry in _registry['tests']:
        error: Optional[str] = None
        try:
            entry['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose_errors:
                traceback.print_exc()

        _registry['results'].append({'passed': error is None, 'description': entry['description'], 'error': error})

        if error is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {entry['description']}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {entry['description']}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    failed = _print_summary(start_time)

    # each script run starts from a clean registry
    _registry['tests'] = []
    return failed


def main(title: str) -> None:
    """script entry point: run the suite and exit non-zero on failure."""
    sys.exit(1 if run(title=title, verbose_errors='-v' in sys.argv) else 0)


def _print_summary(start_time: float) -> int:
    duration = (time.perf_counter() - start_time) * 1000
    results = _registry['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count
