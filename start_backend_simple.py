#!/usr/bin/env python3
"""
Development server for the Wedding Guest Manager API.
Watches the guestlist package and reloads on change.
"""

import uvicorn
import os
import sys

if __name__ == "__main__":
    # Run from the project root so relative sqlite paths resolve there
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)
    sys.path.insert(0, script_dir)

    print(f"Starting Wedding Guest Manager API from: {script_dir}")
    print("Server will be available at: http://localhost:8000")
    print("API docs will be available at: http://localhost:8000/docs")

    uvicorn.run(
        "guestlist.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["./guestlist"],
    )
