"""Example defaults module for a web service."""

defaults = {
    "SVC_HOST": "0.0.0.0",
    "SVC_PORT": 8000,
    "SVC_TIMEOUT": 2.5,
    "SVC_ALLOWED_ORIGINS": ["http://localhost:3000"],
}
