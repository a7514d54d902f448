"""
Database initialization script.
"""
from mindsphere.core.config import settings
from mindsphere.db.session import init_db

if __name__ == "__main__":
    print(f"Initializing database at {settings.DATABASE_URL}...")
    init_db()
    print("Database initialized successfully!")
