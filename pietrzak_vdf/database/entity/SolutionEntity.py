import uuid
from typing import List, Optional

from sqlalchemy import Column, JSON, String

from ..mixins.saveable import Saveable
from ..database import get_orm_base

# Define the Base class for ORM models
Base = get_orm_base()


class SolutionEntity(Base, Saveable):
    """Database entity for storing VDF solutions."""

    __tablename__ = "vdf_solutions"

    id = Column(
        String, primary_key=True, default=lambda: str(uuid.uuid4())
    )  # Unique generated string ID
    request_id = Column(
        String, nullable=True
    )  # Optional associated randomness request id, filled in later
    time_parameter = Column(String, nullable=False)  # Store base 10 string of T
    input = Column(String, nullable=False)  # Store hex string of enc(N) || enc(x)
    output = Column(String, nullable=False)  # Store hex string of enc(y)
    proof = Column(JSON, nullable=False)  # Proof as a JSON list of hex strings
    proof_kind = Column(String, nullable=False)  # "factor" or "rounds"

    def __repr__(self):
        return (
            f"<SolutionEntity(id={self.id}, request_id={self.request_id}, "
            f"time_parameter={self.time_parameter}, proof_kind={self.proof_kind})>"
        )

    def __init__(
        self,
        time_parameter: str,
        input_hex: str,
        output_hex: str,
        proof: List[str],
        proof_kind: str,
        request_id: Optional[str] = None,
    ):
        """Initialize a solution entity.

        Args:
            time_parameter (str): Base 10 string of the time parameter T
            input_hex (str): Hex string of the solution input
            output_hex (str): Hex string of the solution output
            proof (List[str]): Hex strings of the proof chunks
            proof_kind (str): Value of the solution's ProofKind
            request_id (str): Optional associated request id
        """
        self.id = str(uuid.uuid4())  # Generate ID on creation
        self.time_parameter = time_parameter
        self.input = input_hex
        self.output = output_hex
        self.proof = proof
        self.proof_kind = proof_kind
        self.request_id = request_id
