from typing import Any

from recovery.bigint import short_text


class RecoveryError(ValueError):
    pass


class InvalidNumeral(RecoveryError):
    pass


class InvalidBase(InvalidNumeral):
    def __init__(self, base: Any):
        shown = short_text(base) if isinstance(base, int) else repr(base)
        super().__init__(f"invalid base {shown}, expected an integer in 2..36")
        self.base = base


class InvalidDigit(InvalidNumeral):
    def __init__(self, character: str, base: int):
        super().__init__(f"invalid digit {character!r} for base {base}")
        self.character = character
        self.base = base


class InterpolationError(RecoveryError):
    pass


class DuplicateAbscissa(InterpolationError):
    def __init__(self, x: int):
        super().__init__(f"duplicate x {short_text(x)}")
        self.x = x


class NonIntegerResult(InterpolationError):
    def __init__(self, value: Any):
        # value is a Fraction whose terms may be far too long to print
        super().__init__(
            "interpolation did not produce an integer secret: "
            f"{short_text(value.numerator)}/{short_text(value.denominator)}"
        )
        self.value = value


class ReconstructionError(RecoveryError):
    pass


class InsufficientPoints(ReconstructionError):
    def __init__(self, available: int, k: int):
        super().__init__(f"not enough points to reconstruct polynomial: have {available}, need {k}")
        self.available = available
        self.k = k


class NoConsensus(ReconstructionError):
    def __init__(self, subsets_evaluated: int, candidates: int):
        super().__init__(
            f"no consensus among {subsets_evaluated} subsets ({candidates} distinct integer candidates)"
        )
        self.subsets_evaluated = subsets_evaluated
        self.candidates = candidates
