"""
Model registration: import every table model here so SQLModel metadata knows it
before tables are created.
"""
from apps.employees.models import Employee

__all__ = ["Employee"]
