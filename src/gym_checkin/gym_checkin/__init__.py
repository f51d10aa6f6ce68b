"""Gym Check-in package.

Organized by feature modules (members, checkin, admin, scanning) with a thin
Flask controller layer over service/repository layers.
"""
