"""
Domain layer: entities, repository contracts and field name constants.

Nothing in here depends on FastAPI, Motor or any other infrastructure.
"""
