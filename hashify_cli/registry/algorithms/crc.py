# Path: hashify_cli/registry/algorithms/crc.py
"""
CRC Algorithm

Generic parameterised cyclic redundancy check covering widths 1 to 64.
The parameter model follows the usual Rocksoft description: width,
polynomial (normal form), initial value, input/output reflection and a
final XOR.

Profiles are the common catalogue entries; the default configuration is
CRC-32 (ISO-HDLC).

Check values over b"123456789":
    CRC8            0xF4
    CRC16           0xBB3D
    CRC16CCITTFalse 0x29B1
    CRC32           0xCBF43926
    CRC32C          0xE3069283
    CRC32BZip2      0xFC891918
    CRC64           0x995DC9BBDF1939FA
"""

from typing import Annotated

from pydantic import model_validator

from ..digest_value import DigestValue
from ..field_types import BIG_INTEGER, BOOLEAN, INT32
from ..models import AlgorithmCategory, ConfigProfile, HashConfig
from .base import HashAlgorithm


MIN_WIDTH = 1
MAX_WIDTH = 64


class CRCConfig(HashConfig):
    """
    CRC parameters.

    Attributes:
        hash_size_in_bits: Register width in bits (1-64)
        polynomial: Generator polynomial in normal form, without the top bit
        initial_value: Register preset
        reflect_in: Process input bytes least significant bit first
        reflect_out: Reflect the register before the final XOR
        xor_out: Value XORed into the final register
    """
    hash_size_in_bits: Annotated[int, INT32] = 32
    polynomial: Annotated[int, BIG_INTEGER] = 0x04C11DB7
    initial_value: Annotated[int, BIG_INTEGER] = 0xFFFFFFFF
    reflect_in: Annotated[bool, BOOLEAN] = True
    reflect_out: Annotated[bool, BOOLEAN] = True
    xor_out: Annotated[int, BIG_INTEGER] = 0xFFFFFFFF

    @model_validator(mode='after')
    def _check_width(self) -> 'CRCConfig':
        if not MIN_WIDTH <= self.hash_size_in_bits <= MAX_WIDTH:
            raise ValueError(
                f"hash_size_in_bits must be between {MIN_WIDTH} and {MAX_WIDTH}, "
                f"got {self.hash_size_in_bits}"
            )
        return self

    @classmethod
    def crc8(cls) -> 'CRCConfig':
        return cls(hash_size_in_bits=8, polynomial=0x07, initial_value=0x00,
                   reflect_in=False, reflect_out=False, xor_out=0x00)

    @classmethod
    def crc16(cls) -> 'CRCConfig':
        return cls(hash_size_in_bits=16, polynomial=0x8005, initial_value=0x0000,
                   reflect_in=True, reflect_out=True, xor_out=0x0000)

    @classmethod
    def crc16_ccitt_false(cls) -> 'CRCConfig':
        return cls(hash_size_in_bits=16, polynomial=0x1021, initial_value=0xFFFF,
                   reflect_in=False, reflect_out=False, xor_out=0x0000)

    @classmethod
    def crc32(cls) -> 'CRCConfig':
        return cls()

    @classmethod
    def crc32c(cls) -> 'CRCConfig':
        return cls(polynomial=0x1EDC6F41)

    @classmethod
    def crc32_bzip2(cls) -> 'CRCConfig':
        return cls(reflect_in=False, reflect_out=False)

    @classmethod
    def crc64(cls) -> 'CRCConfig':
        return cls(hash_size_in_bits=64, polynomial=0x42F0E1EBA9EA3693,
                   initial_value=0xFFFFFFFFFFFFFFFF, reflect_in=True,
                   reflect_out=True, xor_out=0xFFFFFFFFFFFFFFFF)


def _reflect(value: int, width: int) -> int:
    result = 0
    for _ in range(width):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result


def compute_crc(data: bytes, config: CRCConfig) -> int:
    """
    Compute a CRC register value bit by bit.

    Args:
        data: Input bytes
        config: CRC parameters

    Returns:
        Final CRC value, masked to the configured width
    """
    width = config.hash_size_in_bits
    mask = (1 << width) - 1
    poly = config.polynomial & mask
    crc = config.initial_value & mask

    if config.reflect_in:
        poly = _reflect(poly, width)
        crc = _reflect(crc, width)
        for byte in data:
            crc ^= byte
            for _ in range(8):
                crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
    else:
        top_bit = 1 << (width - 1)
        for byte in data:
            for bit in range(7, -1, -1):
                incoming = (byte >> bit) & 1
                feedback = bool(crc & top_bit) ^ incoming
                crc = (crc << 1) & mask
                if feedback:
                    crc ^= poly

    # The register is held reflected when reflect_in is set
    if config.reflect_in != config.reflect_out:
        crc = _reflect(crc, width)

    return (crc ^ config.xor_out) & mask


class CRC(HashAlgorithm):
    """Parameterised CRC, emitted big-endian in ceil(width / 8) bytes."""

    name = 'CRC'
    category = AlgorithmCategory.NONCRYPTOGRAPHIC
    config_type = CRCConfig

    def profiles(self) -> list[ConfigProfile]:
        return [
            ConfigProfile('CRC8', CRCConfig.crc8, 'CRC-8 (SMBus)'),
            ConfigProfile('CRC16', CRCConfig.crc16, 'CRC-16/ARC'),
            ConfigProfile('CRC16CCITTFalse', CRCConfig.crc16_ccitt_false,
                          'CRC-16/CCITT-FALSE'),
            ConfigProfile('CRC32', CRCConfig.crc32, 'CRC-32 (ISO-HDLC, zlib)'),
            ConfigProfile('CRC32C', CRCConfig.crc32c, 'CRC-32C (Castagnoli)'),
            ConfigProfile('CRC32BZip2', CRCConfig.crc32_bzip2, 'CRC-32/BZIP2'),
            ConfigProfile('CRC64', CRCConfig.crc64, 'CRC-64/XZ'),
        ]

    def _compute(self, data: bytes, config: CRCConfig) -> DigestValue:
        width = config.hash_size_in_bits
        value = compute_crc(data, config)
        return DigestValue(value.to_bytes((width + 7) // 8, 'big'))
