"""
Route package

One APIRouter per resource; main.py mounts them under /api.

@version 1.0.0
"""
