import pytest
from gmpy2 import mpz

from pietrzak_vdf.converters.number_converter import NumberConverter
from pietrzak_vdf.rsa import RSA

# Mersenne primes 2^89 - 1 and 2^127 - 1
P89 = mpz(2) ** 89 - 1
P127 = mpz(2) ** 127 - 1


def encode_input(N, x, length=None):
    """enc(N) || enc(x) with both halves as wide as N needs unless length is given."""
    if length is None:
        length = (N.bit_length() + 7) // 8
    return NumberConverter.to_bytes(N, length) + NumberConverter.to_bytes(x, length)


@pytest.fixture
def mersenne_rsa():
    """A 216-bit RSA group with known, fixed prime factors."""
    return RSA(P89, P127)


@pytest.fixture
def mersenne_input(mersenne_rsa):
    """Input bytes for x = 3^100 mod N in the Mersenne group."""
    N = mersenne_rsa.get_N()
    return encode_input(N, pow(mpz(3), 100, N))


@pytest.fixture
def encode():
    """The encode_input helper, for tests that build inputs by hand."""
    return encode_input
