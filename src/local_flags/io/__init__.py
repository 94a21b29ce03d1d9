from .sdpa import write_sdpa

__all__ = ["write_sdpa"]
