"""Converter between non-negative integers and fixed-width big-endian bytes."""

from typing import Optional

from ..mpc import MPC
from ..mpc.types import MPZ


class NumberConverter:
    """Fixed-length big-endian encoding of natural numbers."""

    @staticmethod
    def to_bytes(value: MPZ, length: int) -> bytes:
        """Encode a natural number into exactly length bytes.

        Args:
            value (MPZ): The number to encode, non-negative
            length (int): Width of the encoding in bytes

        Returns:
            bytes: Big-endian encoding left-padded with zeros

        Raises:
            ValueError: If the value is negative or does not fit
        """
        if value < 0:
            raise ValueError(f"Cannot encode negative value {value}")
        try:
            return int(value).to_bytes(length, "big")
        except OverflowError as e:
            raise ValueError(
                f"Value of {value.bit_length()} bits does not fit in {length} bytes"
            ) from e

    @staticmethod
    def from_bytes(data: bytes, offset: int = 0, length: Optional[int] = None) -> MPZ:
        """Decode a big-endian natural number from a slice of data.

        Args:
            data (bytes): Source buffer
            offset (int): Index of the first byte to read
            length (int): Number of bytes to read, defaults to the rest of data

        Returns:
            MPZ: The decoded number
        """
        end = len(data) if length is None else offset + length
        if offset < 0 or end > len(data):
            raise ValueError(
                f"Cannot read bytes [{offset}, {end}) from a buffer of {len(data)} bytes"
            )
        return MPC.mpz(int.from_bytes(data[offset:end], "big"))

    @staticmethod
    def concat(*parts: bytes) -> bytes:
        return b"".join(parts)
