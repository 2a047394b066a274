from .rng import RNG

__all__ = ["RNG"]
