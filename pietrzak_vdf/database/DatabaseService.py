import logging
from typing import List, Optional

from sqlalchemy.orm import sessionmaker

from . import database
from .entity.SolutionEntity import SolutionEntity
from ..converters.solution_converter import SolutionConverter
from ..vdf.Solution import Solution

logger = logging.getLogger(__name__)


class DatabaseService:
    """Service class for storing and loading VDF solutions."""

    @staticmethod
    def save_solutions(
        solutions: List[Solution], time_parameter: int, request_id: Optional[str] = None
    ) -> List[SolutionEntity]:
        """
        Save solutions in a single transaction. Nothing is stored if one fails.

        Args:
            solutions: Solutions produced by a VDF with the given time parameter
            time_parameter: T of that VDF
            request_id: Optional request id attached to every entity

        Returns:
            List[SolutionEntity]: The stored entities, in input order
        """
        entities = [
            SolutionConverter.to_entity(solution, time_parameter, request_id)
            for solution in solutions
        ]

        Session = sessionmaker(bind=database.get_engine(), expire_on_commit=False)
        session = Session()

        try:
            session.add_all(entities)
            session.commit()
        except Exception:
            session.rollback()
            logger.exception("Failed to save %d solutions", len(entities))
            raise
        finally:
            session.close()

        logger.info("Saved %d solutions for T=%d", len(entities), time_parameter)
        return entities

    @staticmethod
    def load_solutions(time_parameter: int) -> List[Solution]:
        """Load every stored solution made with the given time parameter."""
        Session = sessionmaker(bind=database.get_engine())
        session = Session()

        try:
            entities = (
                session.query(SolutionEntity)
                .filter_by(time_parameter=str(time_parameter))
                .all()
            )
            return [SolutionConverter.from_entity(entity) for entity in entities]
        finally:
            session.close()
