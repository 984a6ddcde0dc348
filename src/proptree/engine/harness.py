# src/proptree/engine/harness.py
"""@proptest: turn a function with typed parameters into a property test.

    @proptest(cases=500, xs=VecStrategy(AnyU8(), range(3, 6)))
    def test_sorted_is_idempotent(xs: list[int], flag: bool) -> None:
        assert sorted(sorted(xs)) == sorted(xs)

Parameters with an explicit strategy use it; every other parameter with a
type annotation uses the unstructured fallback via ArbitraryStrategy.
Parameters with neither stay in the wrapper's signature, so pytest can
still inject fixtures into them.
"""

from __future__ import annotations

import functools
import inspect
import typing
from collections.abc import Callable
from typing import Any

from proptree.arbitrary import ArbitraryStrategy
from proptree.contracts.errors import ConfigurationError
from proptree.contracts.tree import Strategy
from proptree.core.config import LoggingSettings, RunnerSettings, load_settings
from proptree.core.logging import configure_logging
from proptree.engine.runner import PropertyRunner


@functools.cache
def _apply_logging(settings: LoggingSettings) -> None:
    """Configure logging once per distinct logging configuration."""
    configure_logging(json_output=settings.json_output, level=settings.level)


def proptest(
    *,
    cases: int | None = None,
    recursion_limit: int | None = None,
    rejection_limit: int | None = None,
    max_shrink_steps: int | None = None,
    seed: int | None = None,
    settings: RunnerSettings | None = None,
    **strategies: Strategy[Any],
) -> Callable[[Callable[..., Any]], Callable[..., None]]:
    """Decorate a property function.

    Keyword arguments left as None fall back to `settings`, or to
    load_settings() (environment, PROPTREE_RUNNER__*) when no settings object
    is given. In that case the loaded logging section (PROPTREE_LOGGING__*)
    is applied too, once per distinct configuration.

    Raises:
        ConfigurationError: If a strategy names a parameter the function does
            not have, or the function takes *args or **kwargs
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., None]:
        signature = inspect.signature(fn)
        unknown = set(strategies) - set(signature.parameters)
        if unknown:
            raise ConfigurationError(f"{fn.__qualname__} has no parameters named {sorted(unknown)}")

        hints = typing.get_type_hints(fn)
        generated: dict[str, Strategy[Any]] = {}
        passthrough: list[inspect.Parameter] = []
        for name, param in signature.parameters.items():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                raise ConfigurationError(f"{fn.__qualname__}: *args/**kwargs cannot be generated ({name})")
            if name in strategies:
                generated[name] = strategies[name]
            elif name in hints:
                generated[name] = ArbitraryStrategy(hints[name])
            else:
                passthrough.append(param.replace(kind=inspect.Parameter.KEYWORD_ONLY))

        @functools.wraps(fn)
        def wrapper(**fixtures: Any) -> None:
            if settings is not None:
                base = settings
            else:
                loaded = load_settings()
                _apply_logging(loaded.logging)
                base = loaded.runner
            runner = PropertyRunner(
                base.merged(
                    cases=cases,
                    recursion_limit=recursion_limit,
                    rejection_limit=rejection_limit,
                    max_shrink_steps=max_shrink_steps,
                    seed=seed,
                )
            )

            def prop(**drawn: Any) -> Any:
                return fn(**drawn, **fixtures)

            runner.run(prop, generated, name=fn.__qualname__)

        # pytest inspects __signature__ (and __wrapped__) for fixture names
        wrapper.__signature__ = signature.replace(parameters=passthrough, return_annotation=None)  # type: ignore[attr-defined]
        del wrapper.__wrapped__  # type: ignore[attr-defined]
        return wrapper

    return decorator
