from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

JITTER_MAX = 10.0


@dataclass
class TokenPlot:
    """Everything the plot page (or the JSON API) needs for one sentence."""
    tokens: List[str]
    xs: List[int]
    ys: List[int]
    zs: List[float]
    prediction: str
    history: List[str] = field(default_factory=list)

    def as_payload(self) -> Dict[str, Any]:
        return asdict(self)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Generator for the z axis. Pass a seed only to make draws reproducible."""
    return np.random.default_rng(seed)


def build_series(
    tokens: Sequence[str],
    rng: Optional[np.random.Generator] = None,
) -> Tuple[List[int], List[int], List[float]]:
    """
    Derive the three plot axes from a token sequence:
      - xs: token position (0-based)
      - ys: token length in characters
      - zs: uniform draw in [0, 10), meaningless filler for the 3rd axis
    """
    if rng is None:
        rng = make_rng()

    n = len(tokens)
    xs = list(range(n))
    ys = [len(t) for t in tokens]
    zs = (rng.random(n) * JITTER_MAX).tolist()
    return xs, ys, zs


def predict(tokens: Sequence[str]) -> str:
    """Average token length with 2 decimals; "0.00" for no tokens."""
    if not tokens:
        return "0.00"
    mean = float(np.mean([len(t) for t in tokens]))
    return f"{mean:.2f}"


def build_plot(
    tokens: Sequence[str],
    history: Sequence[str] = (),
    rng: Optional[np.random.Generator] = None,
) -> TokenPlot:
    xs, ys, zs = build_series(tokens, rng=rng)
    return TokenPlot(
        tokens=list(tokens),
        xs=xs,
        ys=ys,
        zs=zs,
        prediction=predict(tokens),
        history=list(history),
    )
