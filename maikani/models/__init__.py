from .subject import SubjectData, SubjectDetails, Subjects, Meaning, AuxiliaryMeaning, Reading
from .statistics import ReviewStatistics, ReviewStatisticEntry, ReviewStatistic

__all__ = [
    "SubjectData",
    "SubjectDetails",
    "Subjects",
    "Meaning",
    "AuxiliaryMeaning",
    "Reading",
    "ReviewStatistics",
    "ReviewStatisticEntry",
    "ReviewStatistic",
]
