from __future__ import annotations
from typing import List
from .base import BaseOracle, OracleError, REGISTRY, register

from .wordlist import WordListOracle  # registers
from .remote import RemoteOracle  # registers


def create_oracle(oracle_id: str, **kwargs) -> BaseOracle:
    """
    Factory: instantiate a registered oracle by id.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseOracle", "OracleError", "WordListOracle", "RemoteOracle",
           "create_oracle", "get_oracle_ids", "register"]
