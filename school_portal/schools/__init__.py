# school_portal/schools/__init__.py
from flask import Blueprint
import os

# Allow overriding collection names via env vars if needed
SCHOOLS_COLLECTION = os.getenv("SCHOOLS_COLLECTION", "schools")
CONTENT_COLLECTION = os.getenv("SCHOOL_CONTENT_COLLECTION", "school_content")

schools_bp = Blueprint(
    'schools',
    __name__,
    template_folder='../templates'
)

# Import routes to attach them to the blueprint
from . import routes  # noqa: E402,F401
