"""Exponential moving average smoothing"""

from typing import Sequence

from refchart.data.models import Sample


def ema(values: Sequence[float], alpha: float = 0.0) -> list[float]:
    """
    Bias-corrected exponential moving average

    raw[0] = (1 - alpha) * values[0]
    raw[i] = alpha * raw[i-1] + (1 - alpha) * values[i]
    out[i] = raw[i] / (1 - alpha ** (i + 1))

    Args:
        values: Values in order
        alpha: Decay in [0, 1); 0 returns the values unchanged

    Returns:
        Smoothed values, same length as the input
    """
    if not 0.0 <= alpha < 1.0:
        raise ValueError(f"alpha must be in [0, 1), got {alpha}")

    raw = []
    for i, value in enumerate(values):
        if i == 0:
            raw.append((1 - alpha) * value)
        else:
            raw.append(alpha * raw[i - 1] + (1 - alpha) * value)

    return [r / (1 - alpha ** (i + 1)) for i, r in enumerate(raw)]


def smooth_samples(samples: Sequence[Sample], alpha: float = 0.0) -> list[Sample]:
    """Apply the EMA to sample prices, keeping timestamps."""
    smoothed = ema([s.price for s in samples], alpha)
    return [Sample(ts=s.ts, price=p) for s, p in zip(samples, smoothed)]
