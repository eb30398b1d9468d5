"""
Request DTOs

DTOs for incoming API requests. Untrusted input is validated and clamped
here so the query layer only ever sees bounded values.
"""
