from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .inventory.mysql_inventory_repository import MySQLInventoryRepository
from .inventory.repository import InventoryRepository
from .inventory.service import InventoryService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    inventory_repo: InventoryRepository

    employee_service: EmployeeService
    inventory_service: InventoryService
    dashboard_service: DashboardService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    inventory_repo: InventoryRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        inventory_repo=inventory_repo,
        employee_service=EmployeeService(employees_repo),
        inventory_service=InventoryService(inventory_repo),
        dashboard_service=DashboardService(employees_repo, inventory_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        inventory_repo=MySQLInventoryRepository(conn),
        conn=conn,
    )
