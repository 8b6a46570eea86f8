"""
FastAPI routers grouped by domain (lessons, orders, auth, status, images).

Each module exposes an APIRouter included by ``lessons_api.app``. Services are
looked up on ``request.app.state`` so the storage backend chosen at startup is
shared by every handler.
"""
