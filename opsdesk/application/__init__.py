"""
Application layer: request and response DTOs.
"""
