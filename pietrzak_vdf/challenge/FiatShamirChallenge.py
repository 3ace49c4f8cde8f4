import hashlib

from ..converters.number_converter import NumberConverter
from ..mpc.types import MPZ
from ..protocol_constants import CHALLENGE_BYTES, HASH_NAME, TIME_BYTES


class FiatShamirChallenge:
    """Derives the 128-bit challenge r = H(mu, x, y, t) of a halving round.

    The prover and the verifier must derive identical challenges from the same
    transcript, so the result depends on nothing but the arguments: every call
    hashes with a fresh digest context.
    """

    def __init__(self, length: int, hash_name: str = HASH_NAME) -> None:
        """
        Args:
            length (int): Byte width of group elements (the modulus encoding width)
            hash_name (str): Any hashlib algorithm with a digest of at least 16 bytes
        """
        if hashlib.new(hash_name).digest_size < CHALLENGE_BYTES:
            raise ValueError(
                f"Digest {hash_name} is shorter than {CHALLENGE_BYTES} bytes"
            )
        self._length = length
        self._hash_name = hash_name

    def get_length(self) -> int:
        return self._length

    def get_hash_name(self) -> str:
        return self._hash_name

    def derive(self, mu: MPZ, x: MPZ, y: MPZ, t: int) -> MPZ:
        md = hashlib.new(self._hash_name)
        md.update(NumberConverter.to_bytes(mu, self._length))
        md.update(NumberConverter.to_bytes(x, self._length))
        md.update(NumberConverter.to_bytes(y, self._length))
        md.update(NumberConverter.to_bytes(t, TIME_BYTES))
        return NumberConverter.from_bytes(md.digest(), 0, CHALLENGE_BYTES)  # truncate to 128 bits
