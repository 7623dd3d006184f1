# Path: hashify_cli/registry/digest_value.py
"""
Digest Value

Result of a hash computation. Exposes its readable fields and its
operations to scripts through the ScriptSurface declaration, so the
output finalizer can write e.g.:

    AsHexString()
    AsHexString(True)
    Join(", ", AsByteArray())
    Coerce(16).AsHexString()
"""

import base64
from typing import Any, Optional, Union

from hashify_cli.core.script_surface import ScriptOperation


class DigestValue:
    """
    Immutable digest with conversion helpers.

    Attributes:
        hash: Digest bytes (most significant byte first for integer digests)
        bit_length: Number of meaningful bits
    """

    __slots__ = ('_hash', '_bit_length')

    def __init__(self, digest: Union[bytes, bytearray], bit_length: Optional[int] = None):
        digest = bytes(digest)
        if bit_length is None:
            bit_length = len(digest) * 8
        if bit_length < 0 or bit_length > len(digest) * 8:
            raise ValueError(
                f"Bit length {bit_length} does not fit a {len(digest)}-byte digest"
            )
        self._hash = digest
        self._bit_length = bit_length

    @property
    def hash(self) -> bytes:
        return self._hash

    @property
    def bit_length(self) -> int:
        return self._bit_length

    # =========================================================================
    # CONVERSIONS
    # =========================================================================

    def as_bytes(self) -> bytes:
        return self._hash

    def as_hex(self, uppercase: bool = False) -> str:
        text = self._hash.hex()
        return text.upper() if uppercase else text

    def as_base64(self, url_safe: bool = False) -> str:
        encoder = base64.urlsafe_b64encode if url_safe else base64.b64encode
        return encoder(self._hash).decode('ascii')

    def as_binary_string(self) -> str:
        bits = ''.join(f"{byte:08b}" for byte in self._hash)
        return bits[:self._bit_length]

    def as_integer(self, signed: bool = False) -> int:
        return int.from_bytes(self._hash, 'big', signed=signed)

    def coerce(self, bit_length: int) -> 'DigestValue':
        """
        Truncate the digest to its leading bit_length bits.

        Args:
            bit_length: Bits to keep (1 to the current bit length)

        Returns:
            New DigestValue; trailing bits of the last byte are zeroed
        """
        if isinstance(bit_length, bool) or not isinstance(bit_length, int):
            raise TypeError("Bit length must be an integer")
        if bit_length < 1 or bit_length > self._bit_length:
            raise ValueError(
                f"Bit length must be between 1 and {self._bit_length}, got {bit_length}"
            )

        byte_count = (bit_length + 7) // 8
        data = bytearray(self._hash[:byte_count])
        spare_bits = byte_count * 8 - bit_length
        if spare_bits:
            data[-1] &= (0xFF << spare_bits) & 0xFF
        return DigestValue(bytes(data), bit_length)

    # =========================================================================
    # SCRIPT SURFACE
    # =========================================================================

    def script_fields(self) -> dict[str, Any]:
        return {
            'Hash': self._hash,
            'BitLength': self._bit_length,
        }

    def script_operations(self) -> list[ScriptOperation]:
        return [
            ScriptOperation('AsByteArray', (), self.as_bytes),
            ScriptOperation('AsHexString', (), self.as_hex),
            ScriptOperation('AsHexString', ('bool',), self.as_hex),
            ScriptOperation('AsBase64String', (), self.as_base64),
            ScriptOperation('AsBase64String', ('bool',), self.as_base64),
            ScriptOperation('AsBinaryString', (), self.as_binary_string),
            ScriptOperation('AsBigInteger', (), self.as_integer),
            ScriptOperation('AsBigInteger', ('bool',), self.as_integer),
            ScriptOperation('Coerce', ('int',), self.coerce),
            ScriptOperation('Equals', ('DigestValue',), self._equals_digest),
            ScriptOperation('Equals', ('bytes',), self._equals_bytes),
            ScriptOperation('ToString', (), self.as_hex),
        ]

    def _equals_digest(self, other: 'DigestValue') -> bool:
        return isinstance(other, DigestValue) and self == other

    def _equals_bytes(self, other: Union[bytes, bytearray]) -> bool:
        return isinstance(other, (bytes, bytearray)) and self._hash == bytes(other)

    # =========================================================================
    # PROTOCOL
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigestValue):
            return NotImplemented
        return self._hash == other._hash and self._bit_length == other._bit_length

    def __hash__(self) -> int:
        return hash((self._hash, self._bit_length))

    def __bytes__(self) -> bytes:
        return self._hash

    def __len__(self) -> int:
        return len(self._hash)

    def __str__(self) -> str:
        return self.as_hex()

    def __repr__(self) -> str:
        return f"DigestValue({self.as_hex()!r}, bit_length={self._bit_length})"
