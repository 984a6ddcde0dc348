# src/proptree/contracts/reports.py
"""Structured reports produced by the case runner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CaseFailure:
    """Everything needed to reproduce and diagnose a failing case.

    Fields:
        property_name: Qualified name of the property function
        case_index: Zero-based index of the failing case in the run
        case_seed: Seed of the case's random source (replays the draw)
        iteration: Context iteration counter when the case was drawn
        original: Arguments of the first failing example
        minimal: Arguments after shrinking
        shrink_steps: Property evaluations spent shrinking
        simplifications: Shrink steps that kept the failure
        exception_type: Class name of the minimal failure's exception
        message: str() of the minimal failure's exception
    """

    property_name: str
    case_index: int
    case_seed: int
    iteration: int
    original: dict[str, Any]
    minimal: dict[str, Any]
    shrink_steps: int
    simplifications: int
    exception_type: str
    message: str

    def describe(self) -> str:
        args = ", ".join(f"{name}={value!r}" for name, value in self.minimal.items())
        return (
            f"property {self.property_name} failed at case {self.case_index} "
            f"(seed {self.case_seed}, iteration {self.iteration}) after "
            f"{self.shrink_steps} shrink steps: {self.property_name}({args}) "
            f"raised {self.exception_type}: {self.message}"
        )


@dataclass(frozen=True)
class RunReport:
    """Summary of a completed (all cases passed) property run."""

    property_name: str
    cases: int
    seed: int
    draw_attempts: int
