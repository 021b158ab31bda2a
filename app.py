"""Development entry point: ``python app.py``."""

import os

from src.vacation_system.vacation_system.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "3000")))
