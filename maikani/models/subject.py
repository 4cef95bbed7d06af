from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime


class Meaning(BaseModel):
    """A meaning accepted (or shown) for a subject"""
    model_config = ConfigDict(frozen=True)

    meaning: str
    primary: bool = False
    accepted_answer: bool = False


class AuxiliaryMeaning(BaseModel):
    """Extra meaning used only to grade answers (whitelist/blacklist)"""
    model_config = ConfigDict(frozen=True)

    meaning: str
    type: str = Field(..., description="'whitelist' or 'blacklist'")


class Reading(BaseModel):
    """A reading of a kanji or vocabulary subject"""
    model_config = ConfigDict(frozen=True)

    type: Optional[str] = Field(None, description="onyomi, kunyomi or nanori (kanji only)")
    primary: bool = False
    reading: str
    accepted_answer: bool = False


class SubjectDetails(BaseModel):
    """The `data` block of a WaniKani subject"""
    model_config = ConfigDict(frozen=True)

    created_at: datetime
    level: int
    slug: str
    hidden_at: Optional[datetime] = None
    document_url: str
    characters: Optional[str] = Field(None, description="None for image-only radicals")
    meanings: List[Meaning] = Field(default_factory=list)
    auxiliary_meanings: List[AuxiliaryMeaning] = Field(default_factory=list)
    readings: List[Reading] = Field(default_factory=list)
    component_subject_ids: List[int] = Field(default_factory=list)
    amalgamation_subject_ids: List[int] = Field(default_factory=list)
    visually_similar_subject_ids: List[int] = Field(default_factory=list)
    meaning_mnemonic: str = ""
    meaning_hint: Optional[str] = None
    reading_mnemonic: Optional[str] = None
    reading_hint: Optional[str] = None


class SubjectData(BaseModel):
    """
    A single subject resource as returned by `GET /subjects`.

    Subjects are content, not user data, so they never change for the
    lifetime of the process and can be cached without expiry.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Subject ID")
    object: str = Field("", description="radical, kanji, vocabulary or kana_vocabulary")
    url: str = ""
    data: SubjectDetails


class Subjects(BaseModel):
    """A batch of subjects; also the response body of /criticalSubjects"""
    data: List[SubjectData] = Field(default_factory=list)
