#!/usr/bin/env python3
"""
Studio - projects and public gallery API

Single entry point for the application.
Run with: python run.py
"""

from dotenv import load_dotenv
load_dotenv()

from config import config
from app import create_app

app = create_app()

if __name__ == '__main__':
    print(f"""
    ╔═══════════════════════════════════════╗
    ║                                       ║
    ║     S T U D I O                       ║
    ║     Projects & Gallery API            ║
    ║                                       ║
    ╚═══════════════════════════════════════╝

    🌐 Listening on http://{config.HOST}:{config.PORT}
    🗄  Database: {config.SQLALCHEMY_DATABASE_URI}

    Press Ctrl+C to stop
    """)

    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT, threaded=True)
