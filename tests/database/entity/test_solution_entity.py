import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker
from unittest.mock import patch

from pietrzak_vdf.converters.solution_converter import SolutionConverter
from pietrzak_vdf.database import database
from pietrzak_vdf.database.database import get_orm_base
from pietrzak_vdf.database.DatabaseService import DatabaseService
from pietrzak_vdf.database.entity.SolutionEntity import SolutionEntity
from pietrzak_vdf.vdf import Solution


def make_entity(request_id=None):
    return SolutionEntity(
        time_parameter="8",
        input_hex="00150005",
        output_hex="0010",
        proof=["0011", "0004"],
        proof_kind="rounds",
        request_id=request_id,
    )


# Setup in-memory SQLite database for testing
@pytest.fixture(scope="module")
def test_engine():
    engine = create_engine("sqlite:///:memory:")
    Base = get_orm_base()
    Base.metadata.create_all(engine)  # Create tables

    yield engine

    # Teardown: drop tables
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_database(test_engine):
    Session = sessionmaker(bind=test_engine)
    session = Session()

    yield session  # Provide the session to tests

    session.close()


def test_solution_entity_save(test_database):
    """Test the saving functionality of SolutionEntity."""
    entity = make_entity()

    test_database.add(entity)
    test_database.commit()

    saved_entity = test_database.query(SolutionEntity).filter_by(id=entity.id).first()
    assert saved_entity is not None, "Entity was not saved."
    assert saved_entity.time_parameter == "8"
    assert saved_entity.input == "00150005"
    assert saved_entity.output == "0010"
    assert saved_entity.proof == ["0011", "0004"]
    assert saved_entity.proof_kind == "rounds"
    assert saved_entity.request_id is None


def test_entities_get_distinct_ids():
    assert make_entity().id != make_entity().id


def test_solution_entity_repr():
    entity = make_entity(request_id="req-1")
    expected_repr = (
        f"<SolutionEntity(id={entity.id}, request_id=req-1, "
        f"time_parameter=8, proof_kind=rounds)>"
    )
    assert repr(entity) == expected_repr


def test_save_and_update_through_mixin(test_engine, test_database):
    """Test Saveable.save() and update() against the module engine."""
    with patch.object(database, "get_engine", return_value=test_engine):
        entity = make_entity()
        entity.save()

        entity.request_id = "req-2"
        entity.update()

    saved_entity = test_database.query(SolutionEntity).filter_by(id=entity.id).first()
    assert saved_entity is not None
    assert saved_entity.request_id == "req-2"


def test_save_and_load_solutions(test_engine):
    solutions = [
        Solution(bytes.fromhex("00150005"), bytes.fromhex("0010"), bytes.fromhex("00110004")),
        Solution(bytes.fromhex("00150003"), bytes.fromhex("000e"), bytes.fromhex("0004")),
    ]
    with patch.object(database, "get_engine", return_value=test_engine):
        entities = DatabaseService.save_solutions(solutions, 99, request_id="req-3")
        loaded = DatabaseService.load_solutions(99)

    assert [entity.proof_kind for entity in entities] == ["rounds", "rounds"]
    assert all(entity.request_id == "req-3" for entity in entities)
    assert sorted(loaded, key=Solution.get_input) == sorted(solutions, key=Solution.get_input)


def test_save_solutions_is_all_or_nothing(test_engine, test_database):
    solution = Solution(bytes.fromhex("00150005"), bytes.fromhex("0010"), b"")
    with patch.object(database, "get_engine", return_value=test_engine):
        existing = make_entity()
        existing.save()

        first = make_entity()
        clash = make_entity()
        clash.id = existing.id
        with patch.object(SolutionConverter, "to_entity", side_effect=[first, clash]):
            with pytest.raises(IntegrityError):
                DatabaseService.save_solutions([solution, solution], 8)

    assert test_database.query(SolutionEntity).filter_by(id=first.id).first() is None


def test_failed_save_rolls_back_and_raises(test_engine):
    entity = make_entity()
    with patch.object(database, "get_engine", return_value=test_engine):
        entity.save()
        duplicate = make_entity()
        duplicate.id = entity.id
        with pytest.raises(IntegrityError):
            duplicate.save()
