"""Layer aggregation from blueprint answers."""

import logging
from typing import Dict, Mapping

from ..entities import Answer, Layer, LAYER_IDS
from .layer_rules import (
    CONFIDENCE_PER_CONVERGENCE,
    CORROBORATION_RULES,
    LAYER_NAMES,
    LAYER_SIGNALS,
    PRIMARY_SIGNALS,
)
from .unlock_evaluator import evaluate_unlock

logger = logging.getLogger(__name__)


class LayerAggregator:
    """Maps a full answer set onto the fifteen-layer model.

    Stateless: each call rebuilds every layer from the answers supplied, and
    layers never read each other's evidence.
    """

    def calculate_layers(self, answers: Mapping[str, Answer]) -> Dict[int, Layer]:
        """Build the complete layer table for an answer set."""
        layers = {layer_id: self._initial_layer(layer_id) for layer_id in LAYER_IDS}

        for layer in layers.values():
            self._collect_signals(layer, answers)
            self._apply_corroboration(layer, answers)
            self._apply_primary_signal(layer, answers)
            layer.status = evaluate_unlock(
                layer.id, layer.signal_density, layer.convergence_count, layer.stability
            )

        logger.debug(
            "Calculated layers from %d answers, %d unlocked",
            len(answers), sum(1 for layer in layers.values() if layer.is_unlocked)
        )
        return layers

    def _initial_layer(self, layer_id: int) -> Layer:
        return Layer(
            id=layer_id,
            name=LAYER_NAMES[layer_id],
            description=f"Initial hypothesis for Layer {layer_id}",
        )

    def _collect_signals(self, layer: Layer, answers: Mapping[str, Answer]) -> None:
        for question_id in LAYER_SIGNALS[layer.id]:
            if question_id in answers:
                layer.signal_density += 1
                layer.add_evidence(f"Signal from {question_id} captured.")

    def _apply_corroboration(self, layer: Layer, answers: Mapping[str, Answer]) -> None:
        for rule in CORROBORATION_RULES.get(layer.id, ()):
            if not rule.is_satisfied(answers):
                continue

            layer.convergence_count += rule.convergence
            layer.confidence = min(1.0, layer.confidence + CONFIDENCE_PER_CONVERGENCE * rule.convergence)
            if rule.stability is not None:
                layer.stability = max(layer.stability, rule.stability)
            if rule.evidence:
                layer.add_evidence(rule.evidence)

    def _apply_primary_signal(self, layer: Layer, answers: Mapping[str, Answer]) -> None:
        signal = PRIMARY_SIGNALS.get(layer.id)
        if signal is None or not signal.is_available(answers):
            return

        value = signal.value_for(answers[signal.question_id])
        if value is not None:
            layer.value = value
