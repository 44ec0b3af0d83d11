# app/services/store.py
import threading
import uuid
from dataclasses import dataclass
from typing import Dict, Optional

from app.schemas import Receipt

class ReceiptNotFound(KeyError):
    """Lookup of an identifier this store never issued."""

    def __init__(self, receipt_id: str):
        super().__init__(receipt_id)
        self.receipt_id = receipt_id

@dataclass(frozen=True)
class ScoreRecord:
    id: str
    points: int
    receipt: Optional[Receipt] = None

class ResultStore:
    """
    In-memory, process-lifetime map of receipt id -> ScoreRecord.

    Every insert and lookup runs under one lock. Ids are generated before the
    lock is taken; only the map operation itself is inside it.
    """

    def __init__(self):
        self._records: Dict[str, ScoreRecord] = {}
        self._lock = threading.Lock()

    @staticmethod
    def new_id() -> str:
        return str(uuid.uuid4())

    def put(self, points: int, receipt: Optional[Receipt] = None) -> str:
        while True:
            receipt_id = self.new_id()
            record = ScoreRecord(id=receipt_id, points=points, receipt=receipt)
            with self._lock:
                if receipt_id not in self._records:
                    self._records[receipt_id] = record
                    return receipt_id

    def get_record(self, receipt_id: str) -> ScoreRecord:
        with self._lock:
            record = self._records.get(receipt_id)
        if record is None:
            raise ReceiptNotFound(receipt_id)
        return record

    def get(self, receipt_id: str) -> int:
        return self.get_record(receipt_id).points

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
