from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class DiffResult(str, Enum):
    EQUAL = "EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    SIZE_MISMATCH = "SIZE_MISMATCH"


class DiffInsight(BaseModel):
    """A maximal run of differing bytes, 0-based from the start of both buffers."""
    offset: int = Field(ge=0)
    length: int = Field(ge=1)


class DiffReport(BaseModel):
    result: DiffResult
    insights: List[DiffInsight] = []  # non-empty only for NOT_EQUAL

    @model_validator(mode="after")
    def check_insights_match_result(self) -> "DiffReport":
        if bool(self.insights) != (self.result == DiffResult.NOT_EQUAL):
            raise ValueError(f"{self.result.value} report cannot carry {len(self.insights)} insights")
        return self


class DiffReportResponse(BaseModel):
    """
    Wire shape of a report. `insights` is left out of the JSON body
    unless the result is NOT_EQUAL.
    """
    result: DiffResult
    insights: Optional[List[DiffInsight]] = None

    @classmethod
    def from_report(cls, report: DiffReport) -> "DiffReportResponse":
        return cls(result=report.result, insights=list(report.insights) or None)
