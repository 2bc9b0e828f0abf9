#!/usr/bin/env python3
"""
Run script for the TravelHub admin client.
"""

import streamlit.web.cli as stcli
import sys
import os

def main():
    host = os.getenv("STREAMLIT_HOST", "0.0.0.0")
    port = os.getenv("STREAMLIT_PORT", "8501")
    app_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "app.py")

    sys.argv = [
        "streamlit",
        "run",
        app_path,
        "--server.address", host,
        "--server.port", port,
        "--server.headless", "true",
        "--browser.gatherUsageStats", "false"
    ]

    stcli.main()

if __name__ == "__main__":
    main()
