"""Pydantic models for the Playwright JSON reporter output."""

from collections.abc import Sequence

from pydantic import BaseModel, Field


class ReportTest(BaseModel):
    """One project run of a spec."""

    status: str


class ReportSpec(BaseModel):
    """A test as declared in source, with one entry per project."""

    title: str
    tests: Sequence[ReportTest] = Field(default_factory=list)


class ReportSuite(BaseModel):
    """A file or describe block."""

    title: str
    specs: Sequence[ReportSpec] = Field(default_factory=list)
    suites: Sequence["ReportSuite"] = Field(default_factory=list)


class Report(BaseModel):
    """Top-level JSON report document."""

    suites: Sequence[ReportSuite] = Field(default_factory=list)
