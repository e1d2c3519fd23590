"""
Fake WorkoutRecordRepository for testing.
"""
from typing import Optional, List, Dict, Any


class FakeWorkoutRecordRepository:
    """
    In-memory fake implementation of WorkoutRecordRepository.

    Each save_batch call is kept in `batches`. Use fail_with() to make the
    next saves return an unsuccessful reply, or set `error` to make them raise.
    """

    def __init__(self):
        self.batches: List[List[Dict[str, Any]]] = []
        self.user_ids: List[Optional[str]] = []
        self.error: Optional[Exception] = None
        self._failure: Optional[str] = None

    @property
    def records(self) -> List[Dict[str, Any]]:
        """All saved records, flattened."""
        return [record for batch in self.batches for record in batch]

    def fail_with(self, message: str) -> None:
        self._failure = message

    def reset(self) -> None:
        self.batches = []
        self.user_ids = []
        self.error = None
        self._failure = None

    def save_batch(
        self,
        records: List[Dict[str, Any]],
        user_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        if self.error is not None:
            raise self.error
        if self._failure is not None:
            return {"success": False, "error": self._failure}
        self.batches.append([dict(r) for r in records])
        self.user_ids.append(user_id)
        return {"success": True}
