"""
Pydantic schema definitions for API payloads.

Request bodies, stored records and response envelopes are declared
here, separately from the services, so that the JSON representation
(camelCase keys such as ``updatedAt``) stays decoupled from the
Python attribute names used by the business logic.
"""
