# protocol_constants.py

from .mpc import MPC


DELTA = 4096  # Exponent chunk size; halving stops once t <= DELTA
TWO_POW_DELTA = MPC.pow(MPC.mpz(2), DELTA)

CHALLENGE_BYTES = 16  # Fiat-Shamir challenges are truncated to 128 bits
TIME_BYTES = 8  # t is hashed as an 8-byte big-endian integer
MAX_TIME_PARAMETER = 2**63 - 1

HASH_NAME = "sha256"  # Digest used for challenge derivation

PRIME_BIT_SIZE = 1024  # Bit size of each trapdoor prime (modulus is twice this)
PRIMALITY_REPS = 40  # Miller-Rabin rounds, false positive rate <= 2^-80

TIME_PARAMETER = 1 << 20  # T - Total squarings for delay
