# src/proptree/engine/runner.py
"""PropertyRunner: generates cases, runs the property, shrinks failures.

Per case:
    1. derive a case seed from the master seed and build a fresh
       GenerationContext around it
    2. draw every parameter through the bounded rejection loop
    3. call the property with deep copies of the drawn values
    4. on failure, shrink all parameter trees together and raise
       PropertyFailed with the minimal example

Fatal generation errors (RecursionLimitExceeded, RejectionLimitExceeded,
configuration errors) propagate unchanged; they are never retried and never
reported as property failures.
"""

from __future__ import annotations

import copy
import random
from collections.abc import Callable, Mapping
from typing import Any

from tenacity import RetryError, Retrying, retry_if_result, stop_after_attempt

from proptree.contracts.errors import PropertyFailed, RejectionLimitExceeded
from proptree.contracts.outcome import Outcome
from proptree.contracts.reports import CaseFailure, RunReport
from proptree.contracts.tree import Strategy, ValueTree
from proptree.core.config import RunnerSettings
from proptree.core.context import GenerationContext
from proptree.core.logging import get_logger
from proptree.engine.shrinker import shrink
from proptree.strategies.primitives.tuples import TupleValueTree

logger = get_logger(__name__)

Property = Callable[..., Any]


class PropertyRunner:
    """Runs one property against generated cases.

    Example:
        runner = PropertyRunner(RunnerSettings(cases=200, seed=7))
        report = runner.run(prop, {"xs": VecStrategy(AnyU8())})
    """

    def __init__(self, settings: RunnerSettings | None = None) -> None:
        self._settings = settings if settings is not None else RunnerSettings()

    @property
    def settings(self) -> RunnerSettings:
        return self._settings

    def draw(self, context: GenerationContext, strategy: Strategy[Any], parameter: str | None = None) -> ValueTree[Any]:
        """Draw one accepted tree, retrying rejected draws.

        The context's iteration counter advances after every attempt.

        Raises:
            RejectionLimitExceeded: If every attempt up to the rejection
                limit was rejected
        """
        limit = self._settings.rejection_limit

        def attempt() -> Outcome[ValueTree[Any]]:
            outcome = strategy.new_tree(context)
            context.advance_iteration()
            if outcome.is_rejected:
                logger.debug(
                    "strategy_rejected",
                    parameter=parameter,
                    iteration=outcome.iteration,
                    depth=outcome.depth,
                )
            return outcome

        try:
            outcome = Retrying(
                stop=stop_after_attempt(limit),
                retry=retry_if_result(lambda result: result.is_rejected),
                reraise=False,
            )(attempt)
        except RetryError as e:
            last: Outcome[ValueTree[Any]] = e.last_attempt.result()
            raise RejectionLimitExceeded(
                attempts=e.last_attempt.attempt_number,
                limit=limit,
                iteration=last.iteration,
                depth=last.depth,
                parameter=parameter,
            ) from None
        return outcome.value

    def run(
        self,
        prop: Property,
        strategies: Mapping[str, Strategy[Any]],
        *,
        name: str | None = None,
    ) -> RunReport:
        """Run the property for the configured number of cases.

        Args:
            prop: Callable taking one keyword argument per strategy
            strategies: Parameter name -> strategy
            name: Name used in reports (defaults to prop's qualified name)

        Returns:
            RunReport when every case passed

        Raises:
            PropertyFailed: On the first failing case, after shrinking
        """
        property_name = name or getattr(prop, "__qualname__", repr(prop))
        master_seed = self._settings.seed if self._settings.seed is not None else random.SystemRandom().getrandbits(64)
        master = random.Random(master_seed)
        names = list(strategies)
        draw_attempts = 0

        for case_index in range(self._settings.cases):
            case_seed = master.getrandbits(64)
            context = GenerationContext(random.Random(case_seed), recursion_limit=self._settings.recursion_limit)
            trees = [self.draw(context, strategies[param], param) for param in names]
            draw_attempts += context.iteration

            values = tuple(tree.current() for tree in trees)
            failure = self._evaluate(prop, names, values)
            if failure is None:
                logger.debug("property_case_passed", property=property_name, case=case_index)
                continue

            logger.warning(
                "property_case_failed",
                property=property_name,
                case=case_index,
                seed=case_seed,
                master_seed=master_seed,
                iteration=context.iteration,
                error=repr(failure),
            )
            original = dict(zip(names, copy.deepcopy(values), strict=True))
            result = shrink(
                TupleValueTree(trees),
                lambda candidate: self._evaluate(prop, names, candidate),
                failure,
                max_steps=self._settings.max_shrink_steps,
            )
            report = CaseFailure(
                property_name=property_name,
                case_index=case_index,
                case_seed=case_seed,
                iteration=context.iteration,
                original=original,
                minimal=dict(zip(names, result.minimal, strict=True)),
                shrink_steps=result.steps,
                simplifications=result.simplifications,
                exception_type=type(result.failure).__name__,
                message=str(result.failure),
            )
            raise PropertyFailed(report) from result.failure

        logger.info(
            "property_run_completed",
            property=property_name,
            cases=self._settings.cases,
            seed=master_seed,
            draw_attempts=draw_attempts,
        )
        return RunReport(property_name, self._settings.cases, master_seed, draw_attempts)

    @staticmethod
    def _evaluate(prop: Property, names: list[str], values: tuple[Any, ...]) -> Exception | None:
        """Call the property on copies of the values; return its failure, if any."""
        kwargs = dict(zip(names, copy.deepcopy(values), strict=True))
        try:
            prop(**kwargs)
        except Exception as e:
            return e
        return None
