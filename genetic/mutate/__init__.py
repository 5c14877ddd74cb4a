from genetic.mutate.operators import GaussianMutation, SwapMutation

__all__ = ["GaussianMutation", "SwapMutation"]
