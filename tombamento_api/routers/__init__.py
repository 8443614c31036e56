"""
FastAPI routers grouped por coleção (health, tombamentos, detalhes).

Each file inside this package exposes an APIRouter that is included in the
main application (app.py).
"""
