"""Conference registration backend.

This package is organized by feature modules (attendees, sessions,
registrations) with a thin Flask controller layer over service/repository
layers backed by MySQL.
"""
