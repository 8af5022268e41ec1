from __future__ import annotations

from dataclasses import dataclass

from .activities.mysql_activity_repository import MySQLActivityRepository
from .database.connection import DBConfig, DatabaseConnection
from .institutions.mysql_institution_repository import MySQLInstitutionRepository
from .instructors.mysql_instructor_repository import MySQLInstructorRepository
from .routing.mysql_distance_repository import MySQLDistanceMatrixRepository
from .settlement.calculator.monthly_aggregator import MonthlySettlementAggregator
from .settlement.calculator.standard_calculator import StandardSettlementCalculator
from .settlement.service import SettlementService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    instructors_repo: MySQLInstructorRepository
    institutions_repo: MySQLInstitutionRepository
    activities_repo: MySQLActivityRepository
    distances_repo: MySQLDistanceMatrixRepository

    settlement_service: SettlementService


def build_container(*, db_config: dict, equipment_transport_cap: int | None = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    instructors_repo = MySQLInstructorRepository(conn)
    institutions_repo = MySQLInstitutionRepository(conn)
    activities_repo = MySQLActivityRepository(conn)
    distances_repo = MySQLDistanceMatrixRepository(conn)

    aggregator = (
        MonthlySettlementAggregator(equipment_transport_cap=equipment_transport_cap)
        if equipment_transport_cap is not None
        else MonthlySettlementAggregator()
    )
    settlement_service = SettlementService(
        instructors_repo,
        institutions_repo,
        activities_repo,
        distances_repo,
        calculator=StandardSettlementCalculator(),
        aggregator=aggregator,
    )

    return Container(
        conn=conn,
        instructors_repo=instructors_repo,
        institutions_repo=institutions_repo,
        activities_repo=activities_repo,
        distances_repo=distances_repo,
        settlement_service=settlement_service,
    )
