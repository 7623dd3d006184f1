# Path: hashify_cli/registry/algorithms/fnv.py
"""
FNV-1a Algorithm

Fowler-Noll-Vo 1a hash with configurable width, prime and offset basis.
Default configuration is the 32-bit variant.
"""

from typing import Annotated

from pydantic import model_validator

from ..digest_value import DigestValue
from ..field_types import BIG_INTEGER, INT32
from ..models import AlgorithmCategory, ConfigProfile, HashConfig
from .base import HashAlgorithm


FNV_PARAMETERS = {
    32: (0x01000193, 0x811C9DC5),
    64: (0x00000100000001B3, 0xCBF29CE484222325),
    128: (0x0000000001000000000000000000013B, 0x6C62272E07BB014262B821756295C58D),
}


class FNVConfig(HashConfig):
    """
    FNV-1a parameters.

    Attributes:
        hash_size_in_bits: Digest width; a positive multiple of 8
        prime: FNV prime
        offset: Offset basis
    """
    hash_size_in_bits: Annotated[int, INT32] = 32
    prime: Annotated[int, BIG_INTEGER] = FNV_PARAMETERS[32][0]
    offset: Annotated[int, BIG_INTEGER] = FNV_PARAMETERS[32][1]

    @model_validator(mode='after')
    def _check_width(self) -> 'FNVConfig':
        if self.hash_size_in_bits <= 0 or self.hash_size_in_bits % 8:
            raise ValueError(
                f"hash_size_in_bits must be a positive multiple of 8, "
                f"got {self.hash_size_in_bits}"
            )
        return self

    @classmethod
    def for_width(cls, bits: int) -> 'FNVConfig':
        prime, offset = FNV_PARAMETERS[bits]
        return cls(hash_size_in_bits=bits, prime=prime, offset=offset)


class FNV1a(HashAlgorithm):
    """FNV-1a: XOR each byte into the state, then multiply by the prime."""

    name = 'FNV1a'
    category = AlgorithmCategory.NONCRYPTOGRAPHIC
    config_type = FNVConfig

    def profiles(self) -> list[ConfigProfile]:
        return [
            ConfigProfile(f'FNV{bits}', lambda bits=bits: FNVConfig.for_width(bits),
                          f'{bits}-bit FNV-1a')
            for bits in sorted(FNV_PARAMETERS)
        ]

    def _compute(self, data: bytes, config: FNVConfig) -> DigestValue:
        bits = config.hash_size_in_bits
        mask = (1 << bits) - 1
        state = config.offset & mask
        for byte in data:
            state = ((state ^ byte) * config.prime) & mask
        return DigestValue(state.to_bytes(bits // 8, 'big'))
