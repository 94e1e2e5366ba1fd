#!/usr/bin/env python3
"""
Startup script: creates tables and starts the server
"""
import os
import subprocess


def create_tables():
    """Create database tables"""
    print("🔄 Creating database tables...")
    from create_tables import Base, engine
    Base.metadata.create_all(bind=engine)
    print("✅ Tables ready")


def start_server():
    """Start the FastAPI server"""
    print("🚀 Starting FastAPI server...")
    subprocess.run([
        "uvicorn",
        "main:app",
        "--host", "0.0.0.0",
        "--port", os.getenv("PORT", "8000")
    ])


if __name__ == "__main__":
    create_tables()
    start_server()
