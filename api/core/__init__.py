"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (settings,
logging, DB wiring, schema provisioning, error types). Keep feature-specific
SQL and response shaping in the corresponding feature package
(e.g. `contracts/`).
"""
