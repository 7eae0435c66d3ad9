"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Storage keys, one per collection plus the session user.
CURRENT_USER_KEY = "attendance_current_user"
USERS_KEY = "attendance_users"
TEACHERS_KEY = "attendance_teachers"
STUDENTS_KEY = "attendance_students"
CLASSES_KEY = "attendance_classes"
ATTENDANCE_KEY = "attendance_records"
GRADES_KEY = "attendance_grades"

STORAGE_KEYS = (
    CURRENT_USER_KEY,
    USERS_KEY,
    TEACHERS_KEY,
    STUDENTS_KEY,
    CLASSES_KEY,
    ATTENDANCE_KEY,
    GRADES_KEY,
)

DEFAULT_MAX_MARKS = 100
STUDENT_QR_PREFIX = "student:"
