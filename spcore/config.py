"""Configuration classes for spcore components."""

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Configuration for graph construction and result presentation."""

    # Reject negative edge weights when building a graph. When disabled, such
    # edges are accepted and shortest-path results are undefined.
    reject_negative_weights: bool = True

    # Maximum number of decimals shown for non-integer costs in text output
    cost_decimals: int = 3

    def format_cost(self, value: float) -> str:
        """Return ``value`` as text, trimming trailing zeros of fractional costs."""
        if isinstance(value, int):
            return str(value)
        if value != value or value in (float("inf"), float("-inf")):
            return str(value)
        s = f"{value:.{self.cost_decimals}f}"
        if "." in s:
            s = s.rstrip("0").rstrip(".")
        return s


# Global configuration instance
ENGINE_CONFIG = EngineConfig()
