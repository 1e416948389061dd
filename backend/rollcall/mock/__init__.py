"""Mock data package for Rollcall.

Deterministic, seeded fake personnel data for the dashboard. There is no
real data source: every record served by the API originates here.

Contents:
    fixtures.py  — Static pools (names, rooms, areas) and roster constants
    factory.py   — Population generation, arrival partition, tracking data

Called by: core/providers/mock_people.py, scripts/dump_roster.py
Depends on: core/random_source.py, models/schemas.py
"""
