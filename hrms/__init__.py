"""HRMS — employee, leave and authentication API."""
