"""Entry: start the API server (the virtual player starts with the app)."""
import logging
import uvicorn

from mediaremote.config import API_HOST, API_PORT

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    uvicorn.run(
        "mediaremote.api.app:create_app",
        factory=True,
        host=API_HOST,
        port=API_PORT,
    )
