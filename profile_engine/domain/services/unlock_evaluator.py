"""Layer unlock state evaluation."""

from ..exceptions import ValidationError
from ..value_objects import LayerStatus
from .layer_rules import (
    DEVELOPED_STABILITY,
    INTEGRATED_STABILITY,
    UNLOCK_THRESHOLDS,
    UnlockThreshold,
)


def threshold_for(layer_id: int) -> UnlockThreshold:
    """Get the unlock threshold row for a layer."""
    try:
        return UNLOCK_THRESHOLDS[layer_id]
    except KeyError:
        raise ValidationError("layer_id", layer_id, "must be between 1 and 15") from None


def evaluate_unlock(layer_id: int, density: int, convergence: int, stability: float) -> LayerStatus:
    """Classify a layer's evidence into one of the four maturity states.

    Status reflects how well-corroborated the layer is, not its value.
    """
    threshold = threshold_for(layer_id)

    if density >= threshold.density_min and convergence >= threshold.convergence_min:
        if stability >= INTEGRATED_STABILITY:
            return LayerStatus.INTEGRATED
        if stability >= DEVELOPED_STABILITY:
            return LayerStatus.DEVELOPED
        return LayerStatus.EMERGING

    if density >= 1:
        return LayerStatus.EMERGING

    return LayerStatus.UNFORMED
