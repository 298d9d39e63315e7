# cache the result of function call
# a stored entry is never dropped, so the wrapped function must be pure.

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

Arg = TypeVar("Arg")
Result = TypeVar("Result")

# distinguishes "not cached" from a cached None
NOT_FOUND = object()


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0  # number of function invocations, failed ones included

    @property
    def calls(self) -> int:
        return self.hits + self.misses

    @property
    def hit_ratio(self) -> float:
        return self.hits / self.calls if self.calls > 0 else 0.0


class Memoizer(Generic[Arg, Result]):
    """Bind a single-argument pure function to a cache.

    Each distinct argument (by hash and equality) is evaluated at most once
    for the lifetime of the instance. When the function raises, the exception
    reaches the caller as is and nothing is stored, so the next call with the
    same argument evaluates the function again.
    """

    def __init__(self, function: Callable[[Arg], Result], name: Optional[str] = None, trace: bool = False):
        self._function = function
        self._results: Dict[Arg, Result] = {}
        self.name: str = name if name is not None else getattr(
            function, "__name__", repr(function))
        self.trace = trace
        self.stats = CacheStats()

    @property
    def function(self) -> Callable[[Arg], Result]:
        return self._function

    def call(self, arg: Arg) -> Result:
        # unhashable arg raises TypeError here, before the function runs
        value = self._results.get(arg, NOT_FOUND)
        if value is not NOT_FOUND:
            self.stats.hits += 1
            self._print_trace("hit", arg)
            return value

        self.stats.misses += 1
        self._print_trace("miss", arg)
        value = self._function(arg)
        self._results[arg] = value
        return value

    __call__ = call

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, arg: Any) -> bool:
        return arg in self._results

    def __repr__(self) -> str:
        return "<Memoizer %s entries=%d hits=%d misses=%d>" % (
            self.name, len(self), self.stats.hits, self.stats.misses)

    def _print_trace(self, event: str, arg: Any) -> None:
        if self.trace:
            print("memoizer %s: %s %r" % (self.name, event, arg))


def memoizer(f: Callable[..., Result]) -> Callable[..., Result]:
    # positional arguments are the key. for a method, the key includes self.
    def apply(args: Tuple) -> Result:
        return f(*args)

    m: Memoizer[Tuple, Result] = Memoizer(
        apply, name=getattr(f, "__name__", repr(f)))

    @wraps(f)
    def w(*args):
        return m.call(args)
    w.memoizer = m  # type: ignore
    return w
