"""
Feature modules for Hyrox Plan.

Each feature is a self-contained module with:
- models.py - Dataclasses (no DB dependency)
- service.py - Business logic
- repository.py - Data access (optional)
"""
