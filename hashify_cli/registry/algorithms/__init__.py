# Path: hashify_cli/registry/algorithms/__init__.py
"""
Registered Hash Algorithms

ALL_ALGORITHMS lists the algorithm classes in registration order.
"""

from .base import EmptyConfig, HashAlgorithm
from .argon2id import Argon2id, Argon2idConfig
from .blake3_hash import Blake3, Blake3Config
from .crc import CRC, CRCConfig, compute_crc
from .fnv import FNV1a, FNVConfig
from .standard import (
    MD5, SHA1, SHA256, SHA384, SHA512, SHA3, SHA3Config,
    Blake2b, Blake2bConfig, Adler32,
)


ALL_ALGORITHMS: tuple[type[HashAlgorithm], ...] = (
    MD5,
    SHA1,
    SHA256,
    SHA384,
    SHA512,
    SHA3,
    Blake2b,
    Blake3,
    Argon2id,
    CRC,
    FNV1a,
    Adler32,
)

__all__ = [
    'ALL_ALGORITHMS',
    'HashAlgorithm',
    'EmptyConfig',
    'MD5', 'SHA1', 'SHA256', 'SHA384', 'SHA512',
    'SHA3', 'SHA3Config',
    'Blake2b', 'Blake2bConfig',
    'Blake3', 'Blake3Config',
    'Argon2id', 'Argon2idConfig',
    'CRC', 'CRCConfig', 'compute_crc',
    'FNV1a', 'FNVConfig',
    'Adler32',
]
