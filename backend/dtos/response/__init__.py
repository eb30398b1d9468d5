"""
Response DTOs

DTOs for outgoing API responses. Field names are serialized as camelCase.
"""
