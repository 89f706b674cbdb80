"""Class attendance package.

Organized by feature modules (classes, students, teachers, attendance)
with a thin Flask controller layer over service/repository layers.
"""
