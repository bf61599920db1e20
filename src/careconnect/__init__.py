"""
CareConnect: hospital patient-engagement backend

Patients submit symptom queries and book appointments, a rule-based triage
engine suggests and auto-assigns doctors, and administrators manage requests
through dashboard endpoints.
"""

__version__ = "0.1.0"
__author__ = "CareConnect Team"
__description__ = "Hospital patient-engagement and triage backend"
