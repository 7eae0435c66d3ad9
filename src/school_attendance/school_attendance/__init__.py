"""School Attendance package.

This package is organized by feature modules (users, teachers, students,
attendance, grades, ...) on top of a key-value "mock database" with a thin
Flask controller layer and service/repository layers.
"""
