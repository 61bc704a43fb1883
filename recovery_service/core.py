import logging
import time
from dataclasses import dataclass, field
from typing import Any

from recovery.bigint import short_text, to_decimal
from recovery.errors import InvalidNumeral
from recovery.lagrange import Point, interpolate_first
from recovery.numeral import decode
from recovery.reconciler import tally
from recovery_service.config import STRATEGIES, Settings
from share_documents.models import ShareSet

log = logging.getLogger(__name__)


@dataclass
class RecoveryResult:
    secret: int
    n: int
    k: int
    strategy: str
    points_used: list[int]
    rejected_shares: list[dict[str, Any]] = field(default_factory=list)
    votes: dict[int, int] = field(default_factory=dict)
    subsets_evaluated: int = 0
    subsets_skipped: int = 0
    events: list[dict[str, Any]] = field(default_factory=list)
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "secret": to_decimal(self.secret),
            "n": self.n,
            "k": self.k,
            "strategy": self.strategy,
            "points_used": [to_decimal(x) for x in self.points_used],
            "rejected_shares": [{"x": to_decimal(r["x"]), "error": r["error"]} for r in self.rejected_shares],
            "votes": {to_decimal(c): v for c, v in self.votes.items()},
            "subsets_evaluated": self.subsets_evaluated,
            "subsets_skipped": self.subsets_skipped,
            "events": self.events,
        }


class RecoveryCore:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        if self.settings.strategy not in STRATEGIES:
            raise ValueError(f"invalid strategy {self.settings.strategy!r}")

    def decode_shares(self, share_set: ShareSet) -> tuple[list[Point], list[dict[str, Any]]]:
        points: list[Point] = []
        rejected: list[dict[str, Any]] = []
        for share in share_set.shares:
            try:
                y = decode(share.base, share.digits)
            except InvalidNumeral as e:
                if self.settings.strict_shares:
                    raise
                log.warning(f"Dropping share x={short_text(share.x)}: {e}")
                rejected.append({"x": share.x, "error": str(e)})
                continue
            points.append(Point(x=share.x, y=y))
        return points, rejected

    def recover(self, share_set: ShareSet) -> RecoveryResult:
        points, rejected = self.decode_shares(share_set)
        events: list[dict[str, Any]] = [
            {"event": "DECODE_REJECTED", "timestamp": time.time(), "x": to_decimal(r["x"]), "error": r["error"]}
            for r in rejected
        ]

        k = share_set.k
        if self.settings.strategy == "first":
            secret = interpolate_first(points, k)
            votes: dict[int, int] = {secret: 1}
            evaluated, skipped = 1, 0
        else:
            t = tally(points, k)
            secret = t.winner()
            votes = dict(t.counts)
            evaluated, skipped = t.evaluated, t.skipped

        events.append(
            {
                "event": "RECONSTRUCTED",
                "timestamp": time.time(),
                "strategy": self.settings.strategy,
                "votes": votes[secret],
            }
        )
        log.info(f"Reconstructed secret from {len(points)} points (k={k}) with {votes[secret]} votes")

        return RecoveryResult(
            secret=secret,
            n=share_set.n,
            k=k,
            strategy=self.settings.strategy,
            points_used=[p.x for p in points],
            rejected_shares=rejected,
            votes=votes,
            subsets_evaluated=evaluated,
            subsets_skipped=skipped,
            events=events,
            source=share_set.source,
        )
