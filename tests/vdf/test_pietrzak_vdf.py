import pytest
from gmpy2 import mpz

from pietrzak_vdf.converters.number_converter import NumberConverter
from pietrzak_vdf.vdf import PietrzakVDF, ProofKind, Solution

# Product of the primes 1009 and 1013
SMALL_N = 1022117


@pytest.fixture
def vdf():
    """Test-scale VDF: T = 8 with halving down to t = 2."""
    return PietrzakVDF(8, delta=2)


@pytest.fixture
def mersenne_solution(vdf, mersenne_input):
    return vdf.solve(mersenne_input)


def flip(data: bytes, index: int, mask: int = 0x01) -> bytes:
    return data[:index] + bytes([data[index] ^ mask]) + data[index + 1 :]


# Construction
# ------------------------------------------------------------------------------


@pytest.mark.parametrize("T", [0, -2, 3, 7, 2**63])
def test_invalid_time_parameter(T):
    with pytest.raises(ValueError):
        PietrzakVDF(T)


@pytest.mark.parametrize("delta", [-1, 0, 1])
def test_invalid_delta(delta):
    with pytest.raises(ValueError):
        PietrzakVDF(8, delta=delta)


def test_smallest_delta_terminates():
    # t = 6 halves to 3, is rounded up to 4, then halves to 2
    assert PietrzakVDF(6, delta=2).get_num_rounds() == 2
    assert PietrzakVDF(2, delta=2).get_num_rounds() == 0


@pytest.mark.parametrize("bits", [0, 12, -8])
def test_invalid_prime_bit_size(bits):
    with pytest.raises(ValueError):
        PietrzakVDF(8, prime_bit_size=bits)


def test_defaults():
    vdf = PietrzakVDF(2**20)
    assert vdf.get_delta() == 4096
    assert vdf.get_prime_bit_size() == 1024
    assert vdf.get_hash_name() == "sha256"


@pytest.mark.parametrize(
    "T, delta, rounds",
    [
        (8, 2, 2),  # 8 -> 4 -> 2
        (12, 2, 3),  # 12 -> 6 -> 4 (odd half) -> 2
        (2, 2, 0),
        (4096, 4096, 0),
        (4098, 4096, 1),  # half of 4098 is odd, t becomes 2050
        (2**20, 4096, 8),
    ],
)
def test_get_num_rounds(T, delta, rounds):
    assert PietrzakVDF(T, delta=delta).get_num_rounds() == rounds


def test_from_environment(monkeypatch):
    monkeypatch.setenv("VDF_TIME_PARAMETER", "100")
    monkeypatch.setenv("VDF_DELTA", "10")
    monkeypatch.setenv("VDF_PRIME_BIT_SIZE", "64")
    vdf = PietrzakVDF.from_environment()
    assert vdf.get_time_parameter() == 100
    assert vdf.get_delta() == 10
    assert vdf.get_prime_bit_size() == 64


# solve
# ------------------------------------------------------------------------------


def test_solve_small_modulus(vdf, encode):
    """Test T = 8, delta = 2 with the modulus 1009 * 1013 and x = 5."""
    input_value = encode(SMALL_N, mpz(5))
    solution = vdf.solve(input_value)

    assert solution.get_input() == input_value
    assert NumberConverter.from_bytes(solution.get_output()) == pow(5, 2**8, SMALL_N)
    assert len(solution.get_proof()) == 2 * 3  # two rounds of 3-byte elements
    assert solution.get_proof_kind() == ProofKind.ROUNDS
    assert vdf.verify(solution)


def test_solve_first_chunk_is_mu_root(vdf, mersenne_rsa, mersenne_solution):
    """Test that the first proof element is x^(2^(T/2 - 1))."""
    N = mersenne_rsa.get_N()
    length = mersenne_solution.get_length()
    x = NumberConverter.from_bytes(mersenne_solution.get_input(), length, length)

    first_chunk = mersenne_solution.get_proof_chunks()[0]
    assert NumberConverter.from_bytes(first_chunk) == pow(x, 2**3, N)


def test_solve_reduces_input(vdf, encode):
    """Test that x >= N is reduced before squaring."""
    solution = vdf.solve(encode(SMALL_N, SMALL_N + 5, length=3))
    assert NumberConverter.from_bytes(solution.get_output()) == pow(5, 2**8, SMALL_N)
    assert vdf.verify(solution)


def test_solve_is_deterministic(vdf, mersenne_input):
    assert vdf.solve(mersenne_input) == vdf.solve(mersenne_input)


def test_solve_without_rounds(encode):
    """Test that T <= delta gives an empty proof checked directly."""
    vdf = PietrzakVDF(8, delta=8)
    solution = vdf.solve(encode(SMALL_N, mpz(5)))
    assert solution.get_proof() == b""
    assert vdf.verify(solution)


def test_solve_rejects_odd_length_input(vdf):
    with pytest.raises(ValueError):
        vdf.solve(b"\x01\x02\x03")


def test_solve_rejects_zero_modulus(vdf):
    with pytest.raises(ValueError):
        vdf.solve(b"\x00\x00\x00\x05")


# verify: round trips
# ------------------------------------------------------------------------------


@pytest.mark.parametrize("T, delta", [(8, 2), (12, 2), (30, 4), (1000, 16), (4098, 4096)])
def test_round_trip(mersenne_input, T, delta):
    vdf = PietrzakVDF(T, delta=delta)
    assert vdf.verify(vdf.solve(mersenne_input))


def test_round_trip_with_odd_halving(mersenne_input, mersenne_rsa):
    """Test T = 12, where the second round halves 6 into the odd 3."""
    vdf = PietrzakVDF(12, delta=2)
    solution = vdf.solve(mersenne_input)
    assert len(solution.get_proof_chunks()) == 3
    assert vdf.verify(solution)


def test_round_trip_with_alternative_digest(mersenne_input):
    vdf = PietrzakVDF(8, delta=2, hash_name="sha512")
    solution = vdf.solve(mersenne_input)
    assert vdf.verify(solution)
    assert not PietrzakVDF(8, delta=2).verify(solution)


def test_trapdoor_round_trip():
    vdf = PietrzakVDF(1000, delta=16, prime_bit_size=64)
    solution = vdf.create()

    assert len(solution.get_input()) == 32
    assert len(solution.get_output()) == 16
    assert len(solution.get_proof()) == 8
    assert solution.get_proof_kind() == ProofKind.FACTOR
    assert vdf.verify(solution)


def test_trapdoor_output_matches_solve():
    """Test that the trapdoor and the sequential computation agree."""
    vdf = PietrzakVDF(1000, delta=16, prime_bit_size=64)
    created = vdf.create()
    solved = vdf.solve(created.get_input())
    assert solved.get_output() == created.get_output()
    assert vdf.verify(solved)


def test_trapdoor_round_trip_with_huge_time_parameter():
    vdf = PietrzakVDF(2**62, prime_bit_size=64)
    assert vdf.verify(vdf.create())


def test_trapdoor_solution_is_tied_to_time_parameter():
    solution = PietrzakVDF(1000, prime_bit_size=64).create()
    assert not PietrzakVDF(1002, prime_bit_size=64).verify(solution)


# verify: rejections
# ------------------------------------------------------------------------------


def test_output_bit_flips_rejected(vdf, mersenne_solution):
    output = mersenne_solution.get_output()
    for index in range(len(output)):
        for bit in range(8):
            tampered = Solution(
                mersenne_solution.get_input(),
                flip(output, index, 1 << bit),
                mersenne_solution.get_proof(),
            )
            assert not vdf.verify(tampered), f"byte {index} bit {bit}"


def test_proof_byte_changes_rejected(vdf, mersenne_solution):
    proof = mersenne_solution.get_proof()
    for index in range(len(proof)):
        for mask in (0x01, 0x80, 0xFF):
            tampered = Solution(
                mersenne_solution.get_input(),
                mersenne_solution.get_output(),
                flip(proof, index, mask),
            )
            assert not vdf.verify(tampered), f"byte {index} mask {mask:#x}"


def test_swapped_proof_chunks_rejected(vdf, mersenne_solution):
    first, second = mersenne_solution.get_proof_chunks()
    tampered = Solution(
        mersenne_solution.get_input(), mersenne_solution.get_output(), second + first
    )
    assert not vdf.verify(tampered)


@pytest.mark.parametrize("cut", [1, 27, 54])
def test_truncated_proof_rejected(vdf, mersenne_solution, cut):
    proof = mersenne_solution.get_proof()
    tampered = Solution(
        mersenne_solution.get_input(), mersenne_solution.get_output(), proof[:-cut]
    )
    assert not vdf.verify(tampered)


def test_trailing_proof_bytes_rejected(vdf, mersenne_solution):
    tampered = Solution(
        mersenne_solution.get_input(),
        mersenne_solution.get_output(),
        mersenne_solution.get_proof() + b"\x00" * 27,
    )
    assert not vdf.verify(tampered)


def test_non_minimal_output_rejected(vdf, mersenne_rsa, mersenne_solution):
    """Test that y + N is rejected although it is congruent to the true output."""
    N = mersenne_rsa.get_N()
    y = NumberConverter.from_bytes(mersenne_solution.get_output())
    for non_minimal in (N, y + N):
        tampered = Solution(
            mersenne_solution.get_input(),
            NumberConverter.to_bytes(non_minimal, 28),
            mersenne_solution.get_proof(),
        )
        assert not vdf.verify(tampered)


def test_proof_for_other_time_parameter_rejected(mersenne_input):
    solution = PietrzakVDF(8, delta=2).solve(mersenne_input)
    assert not PietrzakVDF(16, delta=2).verify(solution)
    assert not PietrzakVDF(8, delta=4).verify(solution)


def test_zero_modulus_rejected(vdf):
    assert not vdf.verify(Solution(b"\x00\x00\x00\x05", b"\x00\x00", b""))


def test_odd_length_input_is_a_contract_violation(vdf):
    with pytest.raises(ValueError):
        vdf.verify(Solution(b"\x01\x02\x03", b"\x00", b""))


# verify: factor proofs
# ------------------------------------------------------------------------------


@pytest.fixture
def factor_solution(mersenne_rsa, encode):
    """Honest factor proof with elements padded to 28 bytes so a factor fits in 14."""
    N = mersenne_rsa.get_N()
    x = mpz(3) ** 100 % N
    y = pow(x, 2**8, N)
    return Solution(
        encode(N, x, length=28),
        NumberConverter.to_bytes(y, 28),
        NumberConverter.to_bytes(mersenne_rsa.get_p(), 14),
    )


def test_factor_proof_accepted(vdf, factor_solution):
    assert factor_solution.get_proof_kind() == ProofKind.FACTOR
    assert vdf.verify(factor_solution)


def test_factor_proof_with_wrong_output_rejected(vdf, factor_solution):
    tampered = Solution(
        factor_solution.get_input(),
        flip(factor_solution.get_output(), 27),
        factor_solution.get_proof(),
    )
    assert not vdf.verify(tampered)


@pytest.mark.parametrize("p", [0, 1, 2, 12345, 618970019642690137449562113])
def test_factor_proof_not_dividing_rejected(vdf, factor_solution, p):
    tampered = Solution(
        factor_solution.get_input(),
        factor_solution.get_output(),
        NumberConverter.to_bytes(mpz(p), 14),
    )
    assert not vdf.verify(tampered)


def test_factor_proof_with_composite_factors_rejected(vdf, encode):
    """Test N = 105 = 15 * 7 with the composite factor 15."""
    N = mpz(105)
    x = mpz(4)
    solution = Solution(
        encode(N, x, length=2),
        NumberConverter.to_bytes(pow(x, 2**8, N), 2),
        NumberConverter.to_bytes(mpz(15), 1),
    )
    assert not vdf.verify(solution)


# Batch operations
# ------------------------------------------------------------------------------


def test_create_many():
    vdf = PietrzakVDF(100, delta=8, prime_bit_size=64)
    solutions = vdf.create_many(3)
    assert len(solutions) == 3
    assert len({solution.get_input() for solution in solutions}) == 3
    assert all(vdf.verify(solution) for solution in solutions)


def test_verify_many(vdf, mersenne_solution):
    tampered = Solution(
        mersenne_solution.get_input(),
        mersenne_solution.get_output(),
        flip(mersenne_solution.get_proof(), 0),
    )
    assert vdf.verify_many([mersenne_solution, tampered, mersenne_solution]) == [
        True,
        False,
        True,
    ]
