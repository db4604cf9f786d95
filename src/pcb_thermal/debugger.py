"""
Calculation Trace
=================

Records every step of a calculation (inputs, formula, variables, result)
so the formulas behind a displayed number can be checked by hand.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional


@dataclass
class TraceStep:
    """A single calculation step with inputs, formula, and result."""
    section: str            # e.g., "IPC-2221 AREA", "RESISTANCE"
    description: str        # Human-readable description
    formula: str            # Formula as text, empty for inputs
    variables: dict         # Named values substituted into the formula
    result: Any
    result_name: str
    result_unit: str = ""
    comment: str = ""


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


class CalculationTrace:
    """
    Ordered record of calculation steps, grouped in sections.

    Usage:
        trace = CalculationTrace("Trace Width")
        trace.start_section("IPC-2221 AREA")
        trace.add_step(
            description="Required copper area",
            formula="A = (I / (k * dT^b))^(1/c)",
            variables={"I": 30.0, "k": 0.048, "dT": 10.0},
            result=1234.5,
            result_name="A",
            result_unit="mil²",
        )
        print(trace.get_report())
    """

    def __init__(self, title: str):
        self.title = title
        self.steps: List[TraceStep] = []
        self.created: datetime = datetime.now()
        self._section = ""

    def start_section(self, name: str):
        """Start a new section; following steps belong to it."""
        self._section = name

    def add_step(
        self,
        description: str,
        formula: str,
        variables: dict,
        result: Any,
        result_name: str,
        result_unit: str = "",
        comment: str = ""
    ) -> Any:
        """Record a step and return its result, so calls can be inlined."""
        self.steps.append(TraceStep(
            section=self._section,
            description=description,
            formula=formula,
            variables=dict(variables),
            result=result,
            result_name=result_name,
            result_unit=result_unit,
            comment=comment,
        ))
        return result

    def add_input(self, name: str, value: Any, unit: str = "", description: str = "") -> Any:
        """Record a user input."""
        return self.add_step(
            description=description or f"Input: {name}",
            formula="",
            variables={},
            result=value,
            result_name=name,
            result_unit=unit,
        )

    def add_constant(self, name: str, value: Any, unit: str = "", description: str = "") -> Any:
        """Record a configuration constant."""
        return self.add_step(
            description=description or f"Constant: {name}",
            formula="",
            variables={},
            result=value,
            result_name=name,
            result_unit=unit,
        )

    def find_step_by_result(self, result_name: str) -> Optional[TraceStep]:
        """Most recent step that produced result_name."""
        for step in reversed(self.steps):
            if step.result_name == result_name:
                return step
        return None

    def sections(self) -> List[str]:
        """Section names in recording order."""
        names = []
        for step in self.steps:
            if step.section not in names:
                names.append(step.section)
        return names

    def get_report(self) -> str:
        """Formatted text report of all steps."""
        lines = [
            "=" * 70,
            f"CALCULATION STEPS - {self.title}",
            "=" * 70,
            f"Generated: {self.created.strftime('%Y-%m-%d %H:%M:%S')}",
        ]

        section = None
        for number, step in enumerate(self.steps, start=1):
            if step.section != section:
                section = step.section
                lines.append("")
                lines.append(f">>> {section}")
                lines.append("-" * 70)

            lines.append(f"[{number}] {step.description}")
            if step.variables:
                substituted = ", ".join(
                    f"{name}={_format_value(value)}" for name, value in step.variables.items()
                )
                lines.append(f"    Inputs: {substituted}")
            if step.formula:
                lines.append(f"    Formula: {step.formula}")

            result = f"    => {step.result_name} = {_format_value(step.result)}"
            if step.result_unit:
                result += f" {step.result_unit}"
            lines.append(result)

            if step.comment:
                lines.append(f"    // {step.comment}")

        lines.append("")
        lines.append("=" * 70)
        lines.append(f"Total Steps: {len(self.steps)}")
        lines.append("=" * 70)
        return "\n".join(lines)
