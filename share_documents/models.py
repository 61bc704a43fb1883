from dataclasses import dataclass


class ShareDocumentError(ValueError):
    pass


@dataclass(frozen=True)
class Share:
    x: int
    base: int
    digits: str


@dataclass(frozen=True)
class ShareSet:
    n: int
    k: int
    shares: tuple[Share, ...]
    source: str | None = None

    def xs(self) -> list[int]:
        return [s.x for s in self.shares]
