"""
FastAPI routers grouped by concern (card page, exports, misc pages).

Each file exposes an APIRouter included by the main application (app.py).
"""
