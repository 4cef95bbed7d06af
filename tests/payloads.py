"""
WaniKani payload builders shared by the tests.
"""

from typing import List, Optional

import httpx

BASE_URL = "https://api.wanikani.com/v2"
TOKEN = "test-token"


def make_subject_payload(subject_id: int, characters: Optional[str] = "大") -> dict:
    """Build a kanji subject the way WaniKani returns it"""
    return {
        "id": subject_id,
        "object": "kanji",
        "url": f"{BASE_URL}/subjects/{subject_id}",
        "data_updated_at": "2023-01-01T00:00:00.000000Z",
        "data": {
            "created_at": "2012-02-27T18:08:16.000000Z",
            "level": 1,
            "slug": f"subject-{subject_id}",
            "hidden_at": None,
            "document_url": f"https://www.wanikani.com/kanji/{subject_id}",
            "characters": characters,
            "meanings": [
                {"meaning": "Big", "primary": True, "accepted_answer": True}
            ],
            "auxiliary_meanings": [
                {"meaning": "Large", "type": "whitelist"}
            ],
            "readings": [
                {"type": "onyomi", "primary": True, "reading": "たい", "accepted_answer": True},
                {"type": "kunyomi", "primary": False, "reading": "おお", "accepted_answer": False}
            ],
            "component_subject_ids": [16],
            "amalgamation_subject_ids": [2467, 2468],
            "visually_similar_subject_ids": [],
            "meaning_mnemonic": "A person stretching their arms out wide.",
            "meaning_hint": "Think big.",
            "reading_mnemonic": "Tie it up.",
            "reading_hint": None,
            "lesson_position": 0,
            "spaced_repetition_system_id": 1
        }
    }


def make_statistics_payload(subject_ids: List[int]) -> dict:
    """Build a review_statistics collection for the given subjects"""
    return {
        "object": "collection",
        "url": f"{BASE_URL}/review_statistics",
        "pages": {"per_page": 500, "next_url": None, "previous_url": None},
        "total_count": len(subject_ids),
        "data_updated_at": "2023-01-01T00:00:00.000000Z",
        "data": [
            {
                "id": 1000 + index,
                "object": "review_statistic",
                "data": {
                    "created_at": "2023-01-01T00:00:00.000000Z",
                    "subject_id": subject_id,
                    "subject_type": "kanji",
                    "meaning_correct": 3,
                    "meaning_incorrect": 2,
                    "percentage_correct": 60,
                    "hidden": False
                }
            }
            for index, subject_id in enumerate(subject_ids)
        ]
    }


def requested_ids(request: httpx.Request) -> List[int]:
    """Subject IDs a /subjects request asked for"""
    raw = request.url.params.get("ids", "")
    return [int(value) for value in raw.split(",") if value]
