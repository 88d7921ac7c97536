"""Domain layer for budgetboard.

Services are imported from their modules directly; this package only groups
them so the database layer can import entities without pulling services in.
"""
