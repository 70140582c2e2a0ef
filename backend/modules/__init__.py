"""
Feature modules for the Life Lessons backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models for data transfer
- repository.py: Store access for the module's table
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

The policy module is pure: it decides operations and owns no data.
Modules communicate through interfaces, not concrete implementations.
"""
