from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class RootResult:
    """Outcome of a single solve.

    iterations counts correction steps (bracket updates for bracketing
    methods). seeds is the number of starting points the method took, so the
    approximation sequence the method walked through has
    iterations + seeds elements.
    """
    root: float
    iterations: int
    converged: bool
    residual: float
    method: str
    seeds: int = 1

    @property
    def sequence_length(self) -> int:
        return self.iterations + self.seeds

    @property
    def finite(self) -> bool:
        return bool(np.isfinite(self.root))

    def __float__(self) -> float:
        return float(self.root)
