"""
Employee Data Repository
Each method issues exactly one parameterized statement.
"""
from typing import Dict, List

from .db import Database


class EmployeeRepository:
    def __init__(self, db: Database):
        self.db = db

    def list_all(self) -> List[Dict]:
        with self.db.cursor() as cur:
            cur.execute("SELECT id, name, role FROM employees ORDER BY id ASC")
            return [dict(row) for row in cur.fetchall()]

    def create(self, name: str, role: str) -> Dict:
        with self.db.cursor() as cur:
            cur.execute(
                "INSERT INTO employees (name, role) VALUES (%s, %s) RETURNING id, name, role",
                (name, role),
            )
            return dict(cur.fetchone())

    def delete(self, employee_id: str) -> bool:
        """Delete one employee. Returns False when no row had that id."""
        with self.db.cursor() as cur:
            cur.execute("DELETE FROM employees WHERE id = %s", (employee_id,))
            return cur.rowcount > 0
