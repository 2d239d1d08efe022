"""
HTTP layer.

Components:
- binding.py: request body -> TaskInput / StatusInput (JSON or form)
- render.py: HTML page and fragment rendering
- app.py: FastAPI app factory and route handlers
"""
