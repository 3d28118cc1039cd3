from tinylisp.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
