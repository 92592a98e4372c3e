from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .evaluators import AlgorithmMode
    from .math import Point

EvaluatorFn = Callable[..., "Point"]

evaluator_registry: dict["AlgorithmMode", EvaluatorFn] = {}


def register_evaluator(mode: "AlgorithmMode"):
    def _decorator(fn: EvaluatorFn) -> EvaluatorFn:
        if mode is None or mode in evaluator_registry:
            raise ValueError(f"Invalid or duplicate evaluator for mode '{mode}'")
        evaluator_registry[mode] = fn
        return fn
    return _decorator
