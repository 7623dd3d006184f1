# Path: hashify_cli/registry/algorithms/argon2id.py
"""
Argon2id Algorithm

Raw Argon2id output through argon2-cffi's low-level API. The input bytes
are the secret; the configured salt is used as is, so equal inputs give
equal digests.

Profiles:
- OWASP: t=2, m=19 MiB, p=1 (the tool default)
- RFC9106LowMemory: t=3, m=64 MiB, p=4
- RFC9106HighMemory: t=1, m=2 GiB, p=4
"""

from typing import Annotated

from argon2.low_level import Type, hash_secret_raw
from pydantic import model_validator

from ..digest_value import DigestValue
from ..field_types import INT32, UINT8, array_of
from ..models import AlgorithmCategory, ConfigProfile, HashConfig
from .base import HashAlgorithm


MIN_SALT_SIZE = 8
DEFAULT_SALT = (0,) * 16


class Argon2idConfig(HashConfig):
    """
    Argon2id parameters.

    Attributes:
        time_cost: Number of passes
        memory_cost: Memory in KiB
        parallelism: Number of lanes
        hash_size_in_bits: Output length, a multiple of 8, at least 32
        salt: Salt bytes, at least 8
    """
    time_cost: Annotated[int, INT32] = 2
    memory_cost: Annotated[int, INT32] = 19456
    parallelism: Annotated[int, INT32] = 1
    hash_size_in_bits: Annotated[int, INT32] = 256
    salt: Annotated[tuple[int, ...], array_of(UINT8)] = DEFAULT_SALT

    @model_validator(mode='after')
    def _check_costs(self) -> 'Argon2idConfig':
        if self.time_cost < 1:
            raise ValueError("time_cost must be at least 1")
        if self.parallelism < 1:
            raise ValueError("parallelism must be at least 1")
        if self.memory_cost < 8 * self.parallelism:
            raise ValueError("memory_cost must be at least 8 KiB per lane")
        if self.hash_size_in_bits < 32 or self.hash_size_in_bits % 8:
            raise ValueError("hash_size_in_bits must be a multiple of 8, at least 32")
        if len(self.salt) < MIN_SALT_SIZE:
            raise ValueError(f"salt must be at least {MIN_SALT_SIZE} bytes")
        return self

    @classmethod
    def owasp(cls) -> 'Argon2idConfig':
        return cls()

    @classmethod
    def rfc9106_low_memory(cls) -> 'Argon2idConfig':
        return cls(time_cost=3, memory_cost=64 * 1024, parallelism=4)

    @classmethod
    def rfc9106_high_memory(cls) -> 'Argon2idConfig':
        return cls(time_cost=1, memory_cost=2 * 1024 * 1024, parallelism=4)


class Argon2id(HashAlgorithm):
    name = 'Argon2id'
    category = AlgorithmCategory.CRYPTOGRAPHIC
    config_type = Argon2idConfig

    def profiles(self) -> list[ConfigProfile]:
        return [
            ConfigProfile('OWASP', Argon2idConfig.owasp, 't=2, m=19 MiB, p=1'),
            ConfigProfile('RFC9106LowMemory', Argon2idConfig.rfc9106_low_memory,
                          't=3, m=64 MiB, p=4'),
            ConfigProfile('RFC9106HighMemory', Argon2idConfig.rfc9106_high_memory,
                          't=1, m=2 GiB, p=4'),
        ]

    def _compute(self, data: bytes, config: Argon2idConfig) -> DigestValue:
        digest = hash_secret_raw(
            secret=data,
            salt=bytes(config.salt),
            time_cost=config.time_cost,
            memory_cost=config.memory_cost,
            parallelism=config.parallelism,
            hash_len=config.hash_size_in_bits // 8,
            type=Type.ID,
        )
        return DigestValue(digest)
