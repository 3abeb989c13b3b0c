"""Infrastructure Layer: database sessions, document store adapter, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All driver exceptions mapped to core errors before leaving this layer
"""
