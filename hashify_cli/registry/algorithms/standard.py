# Path: hashify_cli/registry/algorithms/standard.py
"""
Standard Library Algorithms

Algorithms backed by hashlib and zlib:
- MD5, SHA1, SHA256, SHA384, SHA512 (no configuration)
- SHA3 (selectable digest size)
- Blake2b (digest size, key, salt, personalization)
- Adler32 (no configuration)
"""

import hashlib
import zlib
from typing import Annotated

from pydantic import model_validator

from ..digest_value import DigestValue
from ..field_types import INT32, UINT8, array_of
from ..models import AlgorithmCategory, ConfigProfile, HashConfig
from .base import HashAlgorithm


# =============================================================================
# FIXED HASHLIB DIGESTS
# =============================================================================

class HashlibAlgorithm(HashAlgorithm):
    """Fixed-size digest from a hashlib constructor."""

    category = AlgorithmCategory.CRYPTOGRAPHIC
    hashlib_name: str

    def _compute(self, data: bytes, config: HashConfig) -> DigestValue:
        return DigestValue(hashlib.new(self.hashlib_name, data).digest())


class MD5(HashlibAlgorithm):
    name = 'MD5'
    hashlib_name = 'md5'


class SHA1(HashlibAlgorithm):
    name = 'SHA1'
    hashlib_name = 'sha1'


class SHA256(HashlibAlgorithm):
    name = 'SHA256'
    hashlib_name = 'sha256'


class SHA384(HashlibAlgorithm):
    name = 'SHA384'
    hashlib_name = 'sha384'


class SHA512(HashlibAlgorithm):
    name = 'SHA512'
    hashlib_name = 'sha512'


# =============================================================================
# SHA3
# =============================================================================

SHA3_SIZES = (224, 256, 384, 512)


class SHA3Config(HashConfig):
    """SHA3 digest size in bits (224, 256, 384 or 512)."""
    hash_size_in_bits: Annotated[int, INT32] = 256

    @model_validator(mode='after')
    def _check_size(self) -> 'SHA3Config':
        if self.hash_size_in_bits not in SHA3_SIZES:
            raise ValueError(
                f"hash_size_in_bits must be one of {SHA3_SIZES}, got {self.hash_size_in_bits}"
            )
        return self


class SHA3(HashAlgorithm):
    name = 'SHA3'
    category = AlgorithmCategory.CRYPTOGRAPHIC
    config_type = SHA3Config

    def profiles(self) -> list[ConfigProfile]:
        return [
            ConfigProfile(f'SHA3-{bits}', lambda bits=bits: SHA3Config(hash_size_in_bits=bits))
            for bits in SHA3_SIZES
        ]

    def _compute(self, data: bytes, config: SHA3Config) -> DigestValue:
        hasher = hashlib.new(f'sha3_{config.hash_size_in_bits}', data)
        return DigestValue(hasher.digest())


# =============================================================================
# BLAKE2B
# =============================================================================

class Blake2bConfig(HashConfig):
    """
    Blake2b parameters.

    Attributes:
        hash_size_in_bits: Digest size, a multiple of 8 up to 512
        key: Optional key, up to 64 bytes
        salt: Optional salt, up to 16 bytes
        personalization: Optional personalization, up to 16 bytes
    """
    hash_size_in_bits: Annotated[int, INT32] = 512
    key: Annotated[tuple[int, ...], array_of(UINT8)] = ()
    salt: Annotated[tuple[int, ...], array_of(UINT8)] = ()
    personalization: Annotated[tuple[int, ...], array_of(UINT8)] = ()

    @model_validator(mode='after')
    def _check_sizes(self) -> 'Blake2bConfig':
        bits = self.hash_size_in_bits
        if bits <= 0 or bits % 8 or bits > hashlib.blake2b.MAX_DIGEST_SIZE * 8:
            raise ValueError(f"hash_size_in_bits must be a multiple of 8 up to 512, got {bits}")
        if len(self.key) > hashlib.blake2b.MAX_KEY_SIZE:
            raise ValueError(f"key must be at most {hashlib.blake2b.MAX_KEY_SIZE} bytes")
        if len(self.salt) > hashlib.blake2b.SALT_SIZE:
            raise ValueError(f"salt must be at most {hashlib.blake2b.SALT_SIZE} bytes")
        if len(self.personalization) > hashlib.blake2b.PERSON_SIZE:
            raise ValueError(
                f"personalization must be at most {hashlib.blake2b.PERSON_SIZE} bytes"
            )
        return self


class Blake2b(HashAlgorithm):
    name = 'Blake2b'
    category = AlgorithmCategory.CRYPTOGRAPHIC
    config_type = Blake2bConfig

    def profiles(self) -> list[ConfigProfile]:
        return [
            ConfigProfile('Blake2b-256', lambda: Blake2bConfig(hash_size_in_bits=256)),
            ConfigProfile('Blake2b-512', lambda: Blake2bConfig(hash_size_in_bits=512)),
        ]

    def _compute(self, data: bytes, config: Blake2bConfig) -> DigestValue:
        hasher = hashlib.blake2b(
            data,
            digest_size=config.hash_size_in_bits // 8,
            key=bytes(config.key),
            salt=bytes(config.salt),
            person=bytes(config.personalization),
        )
        return DigestValue(hasher.digest())


# =============================================================================
# ADLER32
# =============================================================================

class Adler32(HashAlgorithm):
    name = 'Adler32'
    category = AlgorithmCategory.NONCRYPTOGRAPHIC

    def _compute(self, data: bytes, config: HashConfig) -> DigestValue:
        return DigestValue(zlib.adler32(data).to_bytes(4, 'big'))
