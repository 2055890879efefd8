"""STARK key pair types and the derivation hook."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class KeyPairWithYCoordinate:
    public_key: str
    public_key_y_coordinate: str
    private_key: str

    def to_onboarding_params(self) -> dict:
        """Body expected by :meth:`Onboarding.create_user`."""
        return {
            "starkKey": self.public_key,
            "starkKeyYCoordinate": self.public_key_y_coordinate,
        }


# Deterministic STARK key derivation from signature bytes.
KeyDeriver = Callable[[bytes], KeyPairWithYCoordinate]
