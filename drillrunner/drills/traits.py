"""Shared behaviour drills: appending, licensing and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass
class ReportCard:
    """A student's report card; the grade may be numeric or alphabetic."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"