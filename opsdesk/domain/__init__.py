"""
Domain layer: records, repository interfaces and pure services.
"""
