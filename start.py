"""Entry point to run the MedOffice API."""

import os
import sys
import subprocess
from pathlib import Path

# Load .env file FIRST so settings pick it up in the server process
from dotenv import load_dotenv
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)
print(f"✅ Loaded environment from: {env_path}")


def main():
    port = os.getenv("PORT", "8000")
    demo = os.getenv("DEMO_MODE", "").lower() in ("1", "true", "yes")

    print("=" * 50)
    print("Starting MedOffice Calendar API")
    print("=" * 50)
    print(f"- API: http://localhost:{port}")
    print(f"- API Docs: http://localhost:{port}/docs")
    print(f"- Data: {'in-memory demo store' if demo else 'database'}")
    print("=" * 50)

    cwd = os.path.dirname(os.path.abspath(__file__))
    process = subprocess.Popen(
        [sys.executable, "-m", "uvicorn", "medoffice.main:app", "--host", "0.0.0.0", "--port", port, "--reload"],
        cwd=cwd,
        env=os.environ.copy(),
    )

    try:
        process.wait()
    except KeyboardInterrupt:
        print()
        print("Shutting down...")
        process.terminate()
        process.wait()
        print("Server stopped.")


if __name__ == "__main__":
    main()
