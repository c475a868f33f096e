from .optimizer import SourceOptimizer, optimize

__all__ = ["SourceOptimizer", "optimize"]
