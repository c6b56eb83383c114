"""
frequency.py
Implements the FrequencyTable and the trial loop that fills it.
Related modules:
- dice.py: die_face maps each random draw onto a face.
- entropy.py: Provides the default random source.
- report.py: Renders a completed FrequencyTable.
"""

import logging
from typing import Callable, Dict, Iterator, List, Tuple

from .dice import die_face

logger = logging.getLogger(__name__)


class FrequencyTable:
    """
    Counts how many trials produced each face.
    Faces appear only once recorded; iteration is always in ascending face order.
    """
    def __init__(self):
        self._counts: Dict[int, int] = {}

    def record(self, face: int) -> None:
        """Increment the count for a face."""
        self._counts[face] = self._counts.get(face, 0) + 1

    def count(self, face: int) -> int:
        """Return the count for a face (0 if never observed)."""
        return self._counts.get(face, 0)

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def items(self) -> List[Tuple[int, int]]:
        """Return (face, count) pairs sorted by face."""
        return sorted(self._counts.items())

    def as_dict(self) -> Dict[int, int]:
        return dict(self.items())

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._counts))

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable({self.as_dict()!r})"


def run_trials(trials: int, source: Callable[[], int], faces: int = 6) -> FrequencyTable:
    """
    Roll the die `trials` times and tally the faces.
    Any OSError raised by the source propagates immediately; no partial table is returned.
    Args:
        trials (int): Number of rolls.
        source (callable): Zero-argument callable returning a non-negative random int.
        faces (int): Number of faces on the die.
    Returns:
        FrequencyTable: Counts for every observed face.
    Raises:
        ValueError: If trials is negative.
    """
    if trials < 0:
        raise ValueError("trials must be non-negative")
    logger.debug("running %d trials with a %d-sided die", trials, faces)
    frequency = FrequencyTable()
    for _ in range(trials):
        frequency.record(die_face(source(), faces))
    logger.debug("finished %d trials: %s", trials, frequency.as_dict())
    return frequency
