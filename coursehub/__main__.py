# Standard library imports
from pathlib import Path

# External package imports
import uvicorn
from dotenv import load_dotenv

# Local application imports
from .core.config import get_settings


def main() -> None:
    """Serve the API with uvicorn (python -m coursehub)"""
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    settings = get_settings()
    uvicorn.run("coursehub.main:app", host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    main()
