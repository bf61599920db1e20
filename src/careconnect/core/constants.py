"""
Shared constants for CareConnect application.
"""

# Department labels offered on the booking and doctor forms
DEPARTMENT_OPTIONS = [
    "General Physician",
    "Cardiologist",
    "Dermatologist",
    "Orthopedic",
    "Pediatrician",
    "Neurologist",
    "Psychiatrist",
    "Gynecologist",
    "Ophthalmologist",
    "Dentist",
    "ENT Specialist",
    "Physiotherapist",
]

ALL_DEPARTMENTS = "All Departments"

EMERGENCY_CATEGORY = "Emergency"
GENERAL_CATEGORY = "General Consultation"
SPECIALIST_CATEGORY = "Specialist Required"

# Category substrings that count as a specialist request on the dashboard
SPECIALIST_CATEGORY_KEYWORDS = ["Pediatrician", "Cardiologist", "Dermatologist", "Orthopedic"]

# Fallback specialty used by the doctor matcher
GENERAL_SPECIALTY_KEYWORD = "General"

TOP_DEPARTMENTS_LIMIT = 5

PHONE_BOOKING_PENDING = "Pending"

# Default accounts ensured at startup (password is hashed on insert)
DEFAULT_USERS = [
    {
        "user_id": "admin_1",
        "name": "Hospital Admin",
        "email": "admin@hospital.com",
        "phone": "1234567890",
        "password": "admin",
        "role": "Admin",
    },
    {
        "user_id": "doc_1",
        "name": "Dr. Jane Smith",
        "email": "doctor1@hospital.com",
        "phone": "0987654321",
        "password": "doctor",
        "role": "Doctor",
    },
    {
        "user_id": "pat_1",
        "name": "Test Patient",
        "email": "patient@hospital.com",
        "phone": "1122334455",
        "password": "patient",
        "role": "Patient",
    },
]

# Default doctor roster, registration order matters for matching
DEFAULT_DOCTORS = [
    {"doctor_id": "d1", "name": "Dr. Sarah Smith", "department": "Cardiologist (Heart)", "experience": "12 Years",
     "available_days": ["Monday", "Wednesday", "Friday"], "time_slots": ["Morning", "Afternoon"]},
    {"doctor_id": "d2", "name": "Dr. Mark Davis", "department": "Cardiologist (Heart)", "experience": "9 Years",
     "available_days": ["Tuesday", "Thursday", "Saturday"], "time_slots": ["Morning", "Evening"]},
    {"doctor_id": "d3", "name": "Dr. Lisa Wong", "department": "Cardiologist (Heart)", "experience": "15 Years",
     "available_days": ["Monday", "Tuesday", "Wednesday"], "time_slots": ["Afternoon", "Evening"]},
    {"doctor_id": "d4", "name": "Dr. James Wilson", "department": "Dermatologist (Skin)", "experience": "8 Years",
     "available_days": ["Tuesday", "Thursday"], "time_slots": ["Morning", "Evening"]},
    {"doctor_id": "d5", "name": "Dr. Patricia Hall", "department": "Dermatologist (Skin)", "experience": "5 Years",
     "available_days": ["Monday", "Wednesday", "Friday"], "time_slots": ["Afternoon"]},
    {"doctor_id": "d6", "name": "Dr. Emily Chen", "department": "Orthopedic (Bones/Joints)", "experience": "15 Years",
     "available_days": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"], "time_slots": ["Afternoon", "Evening"]},
    {"doctor_id": "d7", "name": "Dr. Robert Garcia", "department": "Orthopedic (Bones/Joints)", "experience": "11 Years",
     "available_days": ["Tuesday", "Thursday", "Saturday"], "time_slots": ["Morning"]},
    {"doctor_id": "d8", "name": "Dr. Michael Brown", "department": "General Physician", "experience": "5 Years",
     "available_days": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
     "time_slots": ["Morning", "Afternoon", "Evening"]},
    {"doctor_id": "d9", "name": "Dr. William Lee", "department": "General Physician", "experience": "18 Years",
     "available_days": ["Monday", "Wednesday", "Friday"], "time_slots": ["Morning"]},
    {"doctor_id": "d10", "name": "Dr. Angela Martinez", "department": "General Physician", "experience": "2 Years",
     "available_days": ["Tuesday", "Thursday", "Saturday"], "time_slots": ["Evening"]},
    {"doctor_id": "d11", "name": "Dr. Kevin White", "department": "Pediatrician", "experience": "14 Years",
     "available_days": ["Monday", "Wednesday", "Friday"], "time_slots": ["Morning", "Afternoon"]},
    {"doctor_id": "d12", "name": "Dr. Mary Taylor", "department": "Pediatrician", "experience": "7 Years",
     "available_days": ["Tuesday", "Thursday"], "time_slots": ["Afternoon", "Evening"]},
    {"doctor_id": "d13", "name": "Dr. Christopher Moore", "department": "Neurologist (Brain/Nerves)", "experience": "20 Years",
     "available_days": ["Monday", "Tuesday", "Thursday"], "time_slots": ["Morning", "Evening"]},
]
