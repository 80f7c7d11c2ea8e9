# highcard/common/results.py

from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class ResultRecord:
    round_number: int
    winner_name: str
    score_after_round: int


class ResultsLog:
    """Append-only, chronological record of won rounds. Tied rounds never get here."""

    def __init__(self) -> None:
        self._records: List[ResultRecord] = []

    def append(self, round_number: int, winner_name: str, score_after_round: int) -> ResultRecord:
        record = ResultRecord(round_number, winner_name, score_after_round)
        self._records.append(record)
        return record

    def records(self) -> Tuple[ResultRecord, ...]:
        return tuple(self._records)

    def render_all(self) -> List[str]:
        if not self._records:
            return ["No rounds played."]
        lines = ["=== Round Results ==="]
        for r in self._records:
            lines.append(f"Round {r.round_number}: Winner = {r.winner_name} (score after round: {r.score_after_round})")
        return lines

    def __iter__(self) -> Iterator[ResultRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
