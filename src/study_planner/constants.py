"""Constants for study plan scheduling."""

from .models import Offering, Semester

# Maximum number of units a student may take in one semester
MAX_UNITS_PER_SEMESTER = 4

# Reference point for all planning: studies can start no earlier than this
DEFAULT_CURRENT_SEMESTER = Semester(2020, Offering.SEMESTER_1)

# Lower-bound arithmetic ignores summer and counts two semesters per year
SEMESTERS_PER_YEAR = 2
