"""Power-law gamma correction."""

import math
import numbers
from dataclasses import dataclass

from imagetransform.errors import InvalidGamma, InvalidSample
from imagetransform.geometry._rounding import round_half_away

DEFAULT_INPUT_GAMMA = 1.0
DEFAULT_OUTPUT_GAMMA = 1.6


@dataclass(frozen=True)
class GammaPair:
    """Input and output gamma; a sample maps to ``sample ** (input / output)``."""

    input_gamma: float = DEFAULT_INPUT_GAMMA
    output_gamma: float = DEFAULT_OUTPUT_GAMMA

    def __post_init__(self) -> None:
        for name in ("input_gamma", "output_gamma"):
            value = getattr(self, name)
            if (
                isinstance(value, bool)
                or not isinstance(value, numbers.Real)
                or not math.isfinite(value)
                or value <= 0
            ):
                raise InvalidGamma(f"{name} must be a finite number greater than 0, got: {value!r}")
            object.__setattr__(self, name, float(value))

    @property
    def exponent(self) -> float:
        return self.input_gamma / self.output_gamma

    @property
    def is_identity(self) -> bool:
        return self.input_gamma == self.output_gamma


def correct(sample: float, gamma: GammaPair) -> float:
    """
    Gamma-correct one normalised channel sample.

    Samples outside [0, 1] are clamped first, and so is the result.

    Raises:
        InvalidSample: if the sample is NaN or infinite
    """
    if isinstance(sample, bool) or not isinstance(sample, numbers.Real) or not math.isfinite(sample):
        raise InvalidSample(f"Sample must be a finite number, got: {sample!r}")

    clamped = min(1.0, max(0.0, float(sample)))
    return min(1.0, max(0.0, clamped**gamma.exponent))


def gamma_table(gamma: GammaPair, levels: int = 256) -> list[int]:
    """
    Lookup table mapping each integer channel level to its corrected level.

    With the default 256 levels this is the table ``PIL.Image.point`` takes
    for one 8-bit band.
    """
    if levels < 2:
        raise ValueError(f"levels must be at least 2, got: {levels}")

    top = levels - 1
    return [round_half_away(correct(level / top, gamma) * top) for level in range(levels)]
