import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from recovery.bigint import short_text
from recovery.errors import InsufficientPoints, InterpolationError, NoConsensus
from recovery.lagrange import Point, interpolate

log = logging.getLogger(__name__)


def combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every k-subset of range(n) once, as sorted index tuples in lexicographic order."""
    if k < 1 or k > n:
        return
    idx = list(range(k))
    while True:
        yield tuple(idx)
        i = k - 1
        while i >= 0 and idx[i] == i + n - k:
            i -= 1
        if i < 0:
            return
        idx[i] += 1
        for j in range(i + 1, k):
            idx[j] = idx[j - 1] + 1


def subsets(points: Sequence[Point], k: int) -> Iterator[list[Point]]:
    for idx in combinations(len(points), k):
        yield [points[i] for i in idx]


@dataclass
class VoteTally:
    # insertion order is first-seen order, which breaks ties
    counts: dict[int, int] = field(default_factory=dict)
    evaluated: int = 0
    skipped: int = 0

    def vote(self, candidate: int) -> None:
        self.counts[candidate] = self.counts.get(candidate, 0) + 1

    def winner(self) -> int:
        if not self.counts:
            raise NoConsensus(self.evaluated, 0)

        best = None
        best_count = 0
        for candidate, count in self.counts.items():
            if count > best_count:
                best, best_count = candidate, count

        if best_count == 1 and len(self.counts) > 1:
            raise NoConsensus(self.evaluated, len(self.counts))
        return best


def tally(points: Sequence[Point], k: int) -> VoteTally:
    if k < 1:
        raise ValueError("k must be at least 1")
    if len(points) < k:
        raise InsufficientPoints(len(points), k)

    votes = VoteTally()
    for subset in subsets(points, k):
        votes.evaluated += 1
        try:
            value = interpolate(subset)
        except InterpolationError as e:
            votes.skipped += 1
            xs = ", ".join(short_text(p.x) for p in subset)
            log.debug(f"Skipping subset [{xs}]: {e}")
            continue
        votes.vote(value)

    log.info(
        f"Evaluated {votes.evaluated} subsets, {votes.skipped} skipped, "
        f"{len(votes.counts)} distinct candidates"
    )
    return votes


def reconstruct(points: Sequence[Point], k: int) -> int:
    return tally(points, k).winner()
