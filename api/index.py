"""
API Routes for Bulls & Cows - Vercel Entry Point
"""
import os

from app import create_app
from config import get_config

# Set up Flask with correct paths for Vercel
base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
app = create_app(
    get_config(os.environ.get('APP_ENV', 'production')),
    template_folder=os.path.join(base_dir, "templates"),
)
