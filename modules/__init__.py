"""
Feature modules for the Passhub backend.

Each module keeps its public API in interfaces.py (Protocols), its
pydantic models in models.py and its errors in exceptions.py. Modules
that touch the store add repository.py; modules with HTTP endpoints add
routes.py.

Modules:
- auth: bearer token issue/validation
- users: registration and profiles
- events: organizer-owned events with per-category quotas
- passes: quota-checked issuance and pass status
- rendering: PNG pass cards with QR codes
- notifications: upload and WhatsApp delivery, singly or in paced batches
"""
