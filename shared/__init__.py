"""
Shared Kernel

Value objects, the domain error taxonomy and API/database glue shared by
every app of the project.
"""
