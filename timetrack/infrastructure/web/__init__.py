"""Web layer: FastAPI dependencies, middleware and routers."""
