# Presentation Layer
# ==================
# FastAPI router: CORS, request validation and response shaping.
