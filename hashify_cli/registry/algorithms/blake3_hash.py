# Path: hashify_cli/registry/algorithms/blake3_hash.py
"""
Blake3 Algorithm

Extendable-output Blake3 through the blake3 bindings. Supports the three
Blake3 modes: plain hashing, keyed hashing (32-byte key) and key
derivation (context string).
"""

from typing import Annotated

from blake3 import blake3
from pydantic import model_validator

from ..digest_value import DigestValue
from ..field_types import INT32, STRING, UINT8, array_of
from ..models import AlgorithmCategory, HashConfig
from .base import HashAlgorithm


KEY_SIZE = 32


class Blake3Config(HashConfig):
    """
    Blake3 parameters.

    Attributes:
        hash_size_in_bits: Output length, a positive multiple of 8
        key: Empty, or exactly 32 bytes for keyed mode
        derive_key_context: Non-empty selects key derivation mode
    """
    hash_size_in_bits: Annotated[int, INT32] = 256
    key: Annotated[tuple[int, ...], array_of(UINT8)] = ()
    derive_key_context: Annotated[str, STRING] = ''

    @model_validator(mode='after')
    def _check_modes(self) -> 'Blake3Config':
        if self.hash_size_in_bits <= 0 or self.hash_size_in_bits % 8:
            raise ValueError(
                f"hash_size_in_bits must be a positive multiple of 8, "
                f"got {self.hash_size_in_bits}"
            )
        if self.key and len(self.key) != KEY_SIZE:
            raise ValueError(f"key must be exactly {KEY_SIZE} bytes, got {len(self.key)}")
        if self.key and self.derive_key_context:
            raise ValueError("key and derive_key_context cannot be combined")
        return self


class Blake3(HashAlgorithm):
    name = 'Blake3'
    category = AlgorithmCategory.CRYPTOGRAPHIC
    config_type = Blake3Config

    def _compute(self, data: bytes, config: Blake3Config) -> DigestValue:
        options = {}
        if config.key:
            options['key'] = bytes(config.key)
        if config.derive_key_context:
            options['derive_key_context'] = config.derive_key_context

        hasher = blake3(data, **options)
        return DigestValue(hasher.digest(length=config.hash_size_in_bits // 8))
