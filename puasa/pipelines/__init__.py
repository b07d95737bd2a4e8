"""
Stateless orchestration functions called by the routers.
"""
