"""
Data Transfer Objects (DTOs) Layer

DTOs decouple the HTTP surface from the ORM models.

Structure:
- request/: query-string parameters, normalized before a specification is built
- response/: product payloads and uniform error bodies
"""
