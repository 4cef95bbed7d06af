from pydantic import BaseModel, Field
from typing import List


class ReviewStatistic(BaseModel):
    """Review statistic for one subject"""
    subject_id: int
    subject_type: str
    percentage_correct: int = Field(..., ge=0, le=100)


class ReviewStatisticEntry(BaseModel):
    """Collection element wrapping a statistic in its `data` field"""
    data: ReviewStatistic


class ReviewStatistics(BaseModel):
    """Response of `GET /review_statistics`"""
    total_count: int = 0
    data: List[ReviewStatisticEntry] = Field(default_factory=list)

    def subject_ids(self) -> List[int]:
        """Subject IDs in response order, duplicates kept"""
        return [entry.data.subject_id for entry in self.data]
