"""
Launcher script for the Transcript Studio Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

def main():
    """Launch the Streamlit app with command line options."""
    parser = argparse.ArgumentParser(description="Transcript Studio Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    args = parser.parse_args()

    if not os.getenv("GEMINI_API_KEY"):
        print("ERROR: GEMINI_API_KEY environment variable not set.")
        print("Please set it in the .env file or environment variables.")
        sys.exit(1)

    # Get the absolute path of the project root
    app_dir = Path(__file__).parent.absolute()
    app_path = app_dir / "transcript_studio" / "frontend" / "streamlit_app.py"

    env = os.environ.copy()

    # Add the project root to PYTHONPATH to fix import issues
    env["PYTHONPATH"] = str(app_dir) + os.pathsep + env.get("PYTHONPATH", "")

    print(f"Starting Transcript Studio on port {args.port}")

    cmd = [
        "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.headless", "true",
        "--browser.serverAddress", "localhost",
        "--browser.gatherUsageStats", "false",
    ]

    try:
        subprocess.run(cmd, env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except Exception as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
