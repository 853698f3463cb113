"""Per-sample colour math."""

from imagetransform.color.gamma import GammaPair, correct, gamma_table

__all__ = ["GammaPair", "correct", "gamma_table"]
