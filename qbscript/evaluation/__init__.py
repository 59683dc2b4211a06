from qbscript.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
